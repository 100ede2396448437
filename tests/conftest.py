# ABOUTME: Shared test fixtures for the weather dashboard test suite.
# ABOUTME: Provides canned upstream payloads and a mock httpx client that routes requests by URL.

from unittest.mock import AsyncMock

import httpx
import pytest

from src import config


def json_response(data, status_code: int = 200, url: str = "https://test") -> httpx.Response:
    return httpx.Response(status_code=status_code, json=data, request=httpx.Request("GET", url))


def forecast_payload(days: int = 5) -> dict:
    """A forecast response shaped like Open-Meteo's, with ``days`` daily rows."""
    return {
        "latitude": 55.68,
        "longitude": 12.57,
        "timezone": "Europe/Copenhagen",
        "current": {
            "time": "2025-01-15T12:00",
            "interval": 900,
            "temperature_2m": 16.4,
            "apparent_temperature": 14.6,
            "relative_humidity_2m": 72,
            "is_day": 1,
            "weather_code": 2,
            "wind_speed_10m": 12.3,
            "pressure_msl": 1013.4,
        },
        "daily": {
            "time": [f"2025-01-{13 + i}" for i in range(days)],
            "weather_code": [2, 61, 0, 3, 95, 71, 45][:days],
            "temperature_2m_max": [18.2, 12.5, 20.0, 15.5, 9.4, 3.0, 7.7][:days],
            "temperature_2m_min": [8.1, 6.5, 9.9, 4.4, -2.5, -4.0, 1.2][:days],
        },
    }


GEOCODE_PAYLOAD = {
    "results": [
        {
            "id": 2618425,
            "name": "Copenhagen",
            "latitude": 55.67594,
            "longitude": 12.56553,
            "country": "Denmark",
        }
    ]
}

REVERSE_PAYLOAD = {
    "city": "Copenhagen",
    "locality": "Indre By",
    "principalSubdivision": "Capital Region",
    "countryName": "Denmark",
}


def routed_client(routes: dict) -> AsyncMock:
    """Create a mock httpx.AsyncClient answering GETs by URL.

    ``routes`` maps an endpoint URL to an httpx.Response, or to an exception instance to raise.
    """
    mock = AsyncMock(spec=httpx.AsyncClient)

    async def get(url, params=None, **kwargs):
        result = routes[url]
        if isinstance(result, Exception):
            raise result
        return result

    mock.get.side_effect = get
    return mock


def called_urls(client: AsyncMock) -> list[str]:
    return [c.args[0] for c in client.get.call_args_list]


@pytest.fixture
def happy_client() -> AsyncMock:
    """Every upstream call succeeds: Copenhagen, partly cloudy, 5 daily rows."""
    return routed_client(
        {
            config.GEOCODING_URL: json_response(GEOCODE_PAYLOAD),
            config.FORECAST_URL: json_response(forecast_payload()),
            config.REVERSE_GEOCODING_URL: json_response(REVERSE_PAYLOAD),
        }
    )
