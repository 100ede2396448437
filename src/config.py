# ABOUTME: Runtime configuration loaded from the environment and an optional .env file.
# ABOUTME: Holds upstream API endpoints, HTTP timeout, server bind address and log level.

import os

from dotenv import load_dotenv

load_dotenv()

# Upstream APIs
FORECAST_URL = os.environ.get("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
GEOCODING_URL = os.environ.get("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
REVERSE_GEOCODING_URL = os.environ.get(
    "REVERSE_GEOCODING_URL", "https://api.bigdatacloud.net/data/reverse-geocode-client"
)
API_LANGUAGE = os.environ.get("API_LANGUAGE", "en")
HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", "10"))  # seconds

# Web server
DASHBOARD_HOST = os.environ.get("DASHBOARD_HOST", "127.0.0.1")
DASHBOARD_PORT = int(os.environ.get("DASHBOARD_PORT", "8000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
