# ABOUTME: Pydantic BaseModels for the 24-hour forecast payload and the rendered weather cards.
# ABOUTME: Defines structured types for data.gov.sg forecast data used by the weather widget.

from pydantic import BaseModel, field_validator


class Range(BaseModel):
    """A low/high pair, used for temperature, humidity and wind speed."""

    low: float | None = None
    high: float | None = None


class Wind(BaseModel):
    """General wind summary: compass direction and speed range in km/h."""

    direction: str | None = None
    speed: Range = Range()

    @field_validator("speed", mode="before")
    @classmethod
    def null_speed_as_empty(cls, value):
        return {} if value is None else value


class GeneralForecast(BaseModel):
    """Island-wide summary for the whole 24-hour window."""

    forecast: str | None = None
    temperature: Range = Range()
    relative_humidity: Range = Range()
    wind: Wind = Wind()

    # The feed sends null for blocks it has no reading for
    @field_validator("temperature", "relative_humidity", "wind", mode="before")
    @classmethod
    def null_block_as_empty(cls, value):
        return {} if value is None else value


class PeriodTime(BaseModel):
    """Start and end timestamps of a forecast period, kept as raw ISO strings."""

    start: str | None = None
    end: str | None = None


class Period(BaseModel):
    """One time-bounded period with a condition text per named region."""

    time: PeriodTime | None = None
    regions: dict[str, str | None] = {}

    @field_validator("regions", mode="before")
    @classmethod
    def null_regions_as_empty(cls, value):
        return {} if value is None else value


class ForecastItem(BaseModel):
    """First entry of the payload's items array."""

    general: GeneralForecast = GeneralForecast()
    periods: list[Period] = []
    timestamp: str | None = None
    update_timestamp: str | None = None

    @field_validator("general", mode="before")
    @classmethod
    def null_general_as_empty(cls, value):
        return {} if value is None else value

    @field_validator("periods", mode="before")
    @classmethod
    def null_periods_as_empty(cls, value):
        return [] if value is None else value


class ForecastPayload(BaseModel):
    """Top-level response body from the forecast endpoint."""

    items: list[ForecastItem] = []


class ForecastCard(BaseModel):
    """One rendered summary card: icon, heading and labelled detail rows."""

    icon: str
    title: str
    subtitle: str
    details: list[tuple[str, str]] = []


class WeatherView(BaseModel):
    """Everything the weather display shows after a successful fetch."""

    cards: list[ForecastCard] = []
    updated: str = "N/A"
