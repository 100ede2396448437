# ABOUTME: Pipeline stages that turn a location request into dashboard data.
# ABOUTME: Resolves a location, fetches the forecast and place label, and maps stage failures to DashboardError.

import logging

import httpx

from src.location import LocationService, LocationUnavailable
from src.models import Coordinate, PlaceLabel, WeatherReport
from src.weather_service import geocode, get_weather, reverse_geocode

logger = logging.getLogger(__name__)

LOCATION_DENIED = "Unable to access your location. Please enter a city."
LOCATION_UNSUPPORTED = "Geolocation not supported."
CITY_NOT_FOUND = "City not found. Please try a different city."
CITY_GEOCODING_FAILED = "City geocoding failed. Try again."
WEATHER_FETCH_FAILED = "Unable to fetch weather data."

# Errors that mean an upstream call failed in transport or returned something we could not parse
_UPSTREAM_ERRORS = (httpx.HTTPError, AttributeError, KeyError, TypeError, ValueError)


class DashboardError(Exception):
    """A pipeline stage failed. ``message`` is shown to the viewer as-is."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def locate(location_service: LocationService | None) -> Coordinate:
    """Take a one-shot reading from the platform location service."""
    if location_service is None:
        raise DashboardError(LOCATION_UNSUPPORTED)
    try:
        return await location_service.current_position()
    except LocationUnavailable as e:
        logger.info("Location service unavailable: %s", e)
        raise DashboardError(LOCATION_DENIED) from e


async def resolve_city(client: httpx.AsyncClient, city_name: str) -> Coordinate:
    """Resolve a city name to coordinates via forward geocoding."""
    try:
        coord = await geocode(client, city_name)
    except _UPSTREAM_ERRORS as e:
        logger.info("Geocoding failed for %r", city_name, exc_info=True)
        raise DashboardError(CITY_GEOCODING_FAILED) from e
    if coord is None:
        raise DashboardError(CITY_NOT_FOUND)
    return coord


async def fetch_weather(client: httpx.AsyncClient, coord: Coordinate) -> WeatherReport:
    """Fetch the forecast for a coordinate, failing the whole flow on any error."""
    try:
        return await get_weather(client, coord)
    except _UPSTREAM_ERRORS as e:
        logger.info("Forecast fetch failed for %s", coord, exc_info=True)
        raise DashboardError(WEATHER_FETCH_FAILED) from e


async def weather_for(client: httpx.AsyncClient, coord: Coordinate) -> tuple[WeatherReport, PlaceLabel]:
    """Fetch the forecast, then the place label. Reverse geocoding is skipped if the forecast fails."""
    report = await fetch_weather(client, coord)
    place = await reverse_geocode(client, coord)
    return report, place


async def weather_for_city(client: httpx.AsyncClient, city_name: str) -> tuple[WeatherReport, PlaceLabel]:
    coord = await resolve_city(client, city_name)
    return await weather_for(client, coord)


async def weather_for_position(
    client: httpx.AsyncClient, location_service: LocationService | None
) -> tuple[WeatherReport, PlaceLabel]:
    coord = await locate(location_service)
    return await weather_for(client, coord)
