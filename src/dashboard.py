# ABOUTME: HTML rendering for the dashboard container: loading, error and weather views.
# ABOUTME: Also provides DashboardView, the generation-guarded cell holding the container content.

import logging
import math
from datetime import date
from html import escape

from src.models import PlaceLabel, WeatherReport
from src.weather_codes import lookup

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"
FORECAST_DAYS = 4


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity (16.5 -> 17, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def _rounded(value: float | None) -> str:
    return PLACEHOLDER if value is None else str(round_half_up(value))


def _as_is(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _weekday(day: str) -> str:
    """Abbreviated weekday name for an ISO date.

    This is the server-side text; the page script replaces it with the name in the
    viewer's locale using the tile's ``data-date`` attribute.
    """
    try:
        return date.fromisoformat(day).strftime("%a")
    except ValueError:
        return escape(day)


def render_loading() -> str:
    return (
        '<div class="loading">'
        '<div class="spinner"></div>'
        "<p>Loading weather data...</p>"
        "</div>"
    )


def render_error(message: str) -> str:
    return f'<div class="error"><h2>Oops!</h2><p>{escape(message)}</p></div>'


def _detail_tile(icon: str, label: str, value: str) -> str:
    return (
        f'<div class="detail-item"><span class="icon">{icon}</span>'
        f'<div class="text">{label}<br><strong>{value}</strong></div></div>'
    )


def _forecast_tiles(report: WeatherReport) -> list[str]:
    daily = report.daily
    tiles = []
    for i in range(1, min(FORECAST_DAYS + 1, len(daily))):
        info = lookup(daily.weather_code[i], True)
        tiles.append(
            '<div class="forecast-item">'
            f'<div class="forecast-day" data-date="{escape(daily.time[i])}">{_weekday(daily.time[i])}</div>'
            f"<div>{info.icon}</div>"
            f'<div class="forecast-description">{escape(info.description)}</div>'
            f'<div class="forecast-temp"><b>{_rounded(daily.temperature_2m_min[i])}° / '
            f"{_rounded(daily.temperature_2m_max[i])}°C</b></div>"
            "</div>"
        )
    return tiles


def render_dashboard(report: WeatherReport, place: PlaceLabel) -> str:
    """Render the full weather view: header, current conditions, details and a 4-day forecast strip.

    Only forecast indices 1..4 are shown (index 0 is today), so a series with fewer
    than two days renders an empty strip.
    """
    current = report.current
    info = lookup(current.weather_code, bool(current.is_day))
    details = [
        _detail_tile("🌡️", "Feels like", f"{_rounded(current.apparent_temperature)}°C"),
        _detail_tile("💧", "Humidity", f"{_as_is(current.relative_humidity_2m)}%"),
        _detail_tile("💨", "Wind", f"{_as_is(current.wind_speed_10m)} km/h"),
        _detail_tile("📊", "Pressure", f"{_rounded(current.pressure_msl)} hPa"),
    ]
    return (
        '<div class="weather-header">'
        f"<h1>{escape(place.name)}</h1>"
        f'<div class="location">{escape(place.country)}</div>'
        "</div>"
        '<div class="weather-main">'
        f'<div class="weather-icon">{info.icon}</div>'
        f'<div class="temperature">{_rounded(current.temperature_2m)}°C</div>'
        "</div>"
        f'<div class="weather-description">{escape(info.description)}</div>'
        f'<div class="weather-details">{"".join(details)}</div>'
        '<div class="forecast-header"><b>Forecast</b></div>'
        f'<div class="forecast-row">{"".join(_forecast_tiles(report))}</div>'
    )


class DashboardView:
    """The dashboard container's content, written by one pipeline run at a time.

    Each run takes a generation token from ``begin()``. A commit from a run older
    than the newest committed run is dropped, so the most recently started run wins
    regardless of the order in which runs finish.
    """

    def __init__(self, html: str = ""):
        self.html = html
        self._issued = 0
        self._committed = 0

    @property
    def generation(self) -> int:
        return self._committed

    def begin(self) -> int:
        self._issued += 1
        return self._issued

    def commit(self, token: int, html: str) -> bool:
        if token < self._committed:
            logger.debug("Dropping render from generation %d, view is at %d", token, self._committed)
            return False
        self._committed = token
        self.html = html
        return True
