# ABOUTME: Pydantic BaseModels for forecast, geocoding and reverse-geocoding data.
# ABOUTME: Defines the transient, request-scoped types that flow through the dashboard pipeline.

from pydantic import BaseModel, ConfigDict, model_validator


class Coordinate(BaseModel):
    """A latitude/longitude pair from the location service or forward geocoding."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class CurrentConditions(BaseModel):
    """Current conditions block of an Open-Meteo forecast response."""

    model_config = ConfigDict(frozen=True)

    temperature_2m: float
    apparent_temperature: float | None = None
    relative_humidity_2m: float | None = None
    wind_speed_10m: float | None = None
    pressure_msl: float | None = None
    weather_code: int | None = None
    is_day: int = 1


class DailyForecastSeries(BaseModel):
    """Column-oriented daily forecast. Index 0 is today."""

    model_config = ConfigDict(frozen=True)

    time: list[str] = []
    weather_code: list[int | None] = []
    temperature_2m_max: list[float | None] = []
    temperature_2m_min: list[float | None] = []

    @model_validator(mode="after")
    def _check_alignment(self) -> "DailyForecastSeries":
        lengths = {
            len(self.time),
            len(self.weather_code),
            len(self.temperature_2m_max),
            len(self.temperature_2m_min),
        }
        if len(lengths) != 1:
            raise ValueError("daily forecast columns have different lengths")
        return self

    def __len__(self) -> int:
        return len(self.time)


class WeatherReport(BaseModel):
    """Parsed response from the Open-Meteo forecast endpoint."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    daily: DailyForecastSeries = DailyForecastSeries()


class PlaceLabel(BaseModel):
    """Human-readable place name shown in the dashboard header."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str = ""


DEFAULT_PLACE = PlaceLabel(name="Your Location", country="")


class WeatherCodeEntry(BaseModel):
    """Description and icon for a WMO weather code."""

    model_config = ConfigDict(frozen=True)

    description: str
    icon: str
