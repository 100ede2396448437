# ABOUTME: Static WMO weather code table used by the forecast API.
# ABOUTME: Maps integer codes to a description and icon, with day/night icons for codes 0 and 1.

from types import MappingProxyType

from src.models import WeatherCodeEntry

UNKNOWN = WeatherCodeEntry(description="Unknown", icon="❓")

# code -> (description, day icon, night icon or None)
# See https://open-meteo.com/en/docs
_CODES = {
    0: ("Clear sky", "☀️", "🌙"),
    1: ("Mainly clear", "🌤️", "🌙"),
    2: ("Partly cloudy", "⛅", None),
    3: ("Overcast", "☁️", None),
    45: ("Fog", "🌫️", None),
    48: ("Depositing rime fog", "🌫️", None),
    51: ("Light drizzle", "🌦️", None),
    53: ("Moderate drizzle", "🌦️", None),
    55: ("Dense drizzle", "🌧️", None),
    56: ("Light freezing drizzle", "🌧️", None),
    57: ("Dense freezing drizzle", "🌧️", None),
    61: ("Slight rain", "🌦️", None),
    63: ("Moderate rain", "🌧️", None),
    65: ("Heavy rain", "🌧️", None),
    66: ("Light freezing rain", "🌧️", None),
    67: ("Heavy freezing rain", "🌧️", None),
    71: ("Slight snow", "🌨️", None),
    73: ("Moderate snow", "❄️", None),
    75: ("Heavy snow", "❄️", None),
    77: ("Snow grains", "❄️", None),
    80: ("Slight rain showers", "🌦️", None),
    81: ("Moderate rain showers", "🌧️", None),
    82: ("Violent rain showers", "⛈️", None),
    85: ("Slight snow showers", "🌨️", None),
    86: ("Heavy snow showers", "❄️", None),
    95: ("Thunderstorm", "⛈️", None),
    96: ("Thunderstorm w/ slight hail", "⛈️", None),
    99: ("Thunderstorm w/ heavy hail", "⛈️", None),
}

DAY_TABLE = MappingProxyType(
    {code: WeatherCodeEntry(description=desc, icon=day) for code, (desc, day, _) in _CODES.items()}
)
NIGHT_TABLE = MappingProxyType(
    {
        code: WeatherCodeEntry(description=desc, icon=night or day)
        for code, (desc, day, night) in _CODES.items()
    }
)


def lookup(code: int | None, is_day: bool) -> WeatherCodeEntry:
    """Return the description and icon for a weather code.

    Total over all integers: codes missing from the table (and None) map to ``UNKNOWN``.
    Only codes 0 and 1 have a distinct night icon; every other code ignores ``is_day``.
    """
    table = DAY_TABLE if is_day else NIGHT_TABLE
    return table.get(code, UNKNOWN)
