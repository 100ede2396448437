# ABOUTME: Service layer for Open-Meteo and BigDataCloud API calls and response parsing.
# ABOUTME: Handles forward geocoding, current + daily forecast retrieval, and reverse geocoding.

import logging

import httpx

from src import config
from src.models import DEFAULT_PLACE, Coordinate, CurrentConditions, DailyForecastSeries, PlaceLabel, WeatherReport

logger = logging.getLogger(__name__)

CURRENT_PARAMS = (
    "temperature_2m,apparent_temperature,relative_humidity_2m,"
    "is_day,weather_code,wind_speed_10m,pressure_msl"
)

DAILY_PARAMS = "weather_code,temperature_2m_max,temperature_2m_min"

UNKNOWN_PLACE_NAME = "Unknown Location"


async def geocode(client: httpx.AsyncClient, city_name: str) -> Coordinate | None:
    """Geocode a city name to coordinates using the Open-Meteo geocoding API.

    Returns None when the API has no match for the name.
    """
    resp = await client.get(
        config.GEOCODING_URL,
        params={"name": city_name, "count": 1, "language": config.API_LANGUAGE, "format": "json"},
    )
    resp.raise_for_status()
    data = resp.json()

    results = data.get("results")
    if not results:
        return None

    r = results[0]
    return Coordinate(latitude=r["latitude"], longitude=r["longitude"])


async def get_weather(client: httpx.AsyncClient, coord: Coordinate) -> WeatherReport:
    """Fetch current conditions and the daily forecast for a coordinate.

    The timezone is left to the API to infer from the coordinate.
    """
    resp = await client.get(
        config.FORECAST_URL,
        params={
            "latitude": coord.latitude,
            "longitude": coord.longitude,
            "current": CURRENT_PARAMS,
            "daily": DAILY_PARAMS,
            "timezone": "auto",
        },
    )
    resp.raise_for_status()
    data = resp.json()

    return WeatherReport(
        current=parse_current(data["current"]),
        daily=parse_daily_data(data.get("daily") or {}),
    )


def parse_current(raw: dict) -> CurrentConditions:
    """Parse the Open-Meteo ``current`` object, ignoring the fields we do not display."""
    return CurrentConditions.model_validate(
        {field: raw[field] for field in CurrentConditions.model_fields if raw.get(field) is not None}
    )


def parse_daily_data(raw: dict) -> DailyForecastSeries:
    """Parse the Open-Meteo ``daily`` columns we request.

    Raises ValueError (pydantic ValidationError) when the columns are not aligned.
    """
    return DailyForecastSeries(
        time=raw.get("time") or [],
        weather_code=raw.get("weather_code") or [],
        temperature_2m_max=raw.get("temperature_2m_max") or [],
        temperature_2m_min=raw.get("temperature_2m_min") or [],
    )


async def reverse_geocode(client: httpx.AsyncClient, coord: Coordinate) -> PlaceLabel:
    """Resolve a coordinate to a place name and country.

    Never raises: the place name is cosmetic, so any transport or parse failure
    resolves to ``DEFAULT_PLACE`` instead.
    """
    try:
        resp = await client.get(
            config.REVERSE_GEOCODING_URL,
            params={
                "latitude": coord.latitude,
                "longitude": coord.longitude,
                "localityLanguage": config.API_LANGUAGE,
            },
        )
        resp.raise_for_status()
        return parse_place(resp.json())
    except (httpx.HTTPError, ValueError, TypeError, AttributeError):
        logger.warning("Reverse geocoding failed for %s, using default label", coord, exc_info=True)
        return DEFAULT_PLACE


def parse_place(data: dict) -> PlaceLabel:
    """Pick the most specific place name available: city, locality, then principal subdivision."""
    name = data.get("city") or data.get("locality") or data.get("principalSubdivision") or UNKNOWN_PLACE_NAME
    return PlaceLabel(name=str(name), country=str(data.get("countryName") or ""))
