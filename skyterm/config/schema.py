"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skyterm.models.common import TemperatureUnit, ViewMode
from skyterm.models.forecast import Coordinate


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # New York City
    latitude: float = Field(default=40.7128, ge=-90.0, le=90.0)
    longitude: float = Field(default=-74.0060, ge=-180.0, le=180.0)

    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class RequestConfig(BaseModel):
    model_config = {"extra": "forbid"}

    current_fields: list[str] = ["temperature_2m", "wind_speed_10m"]
    daily_fields: list[str] = ["temperature_2m_max"]
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    forecast_days: int = Field(default=7, ge=1, le=16)
    timezone: str = "auto"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.open-meteo.com/v1/forecast"
    user_agent: str = "skyterm/0.1.0"
    timeout_seconds: float | None = Field(default=30.0, gt=0.0)


class ChartConfig(BaseModel):
    model_config = {"extra": "forbid"}

    field: str = "temperature_2m_max"
    margin: float = Field(default=5.0, gt=0.0)
    tick_step: float = Field(default=5.0, gt=0.0)


class UiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    view: ViewMode = ViewMode.SUMMARY
    poll_timeout_ms: int = Field(default=50, ge=1, le=1000)
    quit_key: str = Field(default="q", min_length=1, max_length=1)
    summary_field: str = "temperature_2m"


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    file: str = "skyterm.log"
    level: str = "INFO"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig = LocationConfig()
    request: RequestConfig = RequestConfig()
    client: ClientConfig = ClientConfig()
    chart: ChartConfig = ChartConfig()
    ui: UiConfig = UiConfig()
    logging: LoggingConfig = LoggingConfig()
