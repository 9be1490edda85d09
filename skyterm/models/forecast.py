"""Forecast request and result models."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from skyterm.models.common import FieldName, TemperatureUnit


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class ForecastRequest:
    coordinate: Coordinate
    current_fields: tuple[FieldName, ...] = ()
    daily_fields: tuple[FieldName, ...] = ()
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    forecast_days: int = 7
    timezone: str = "auto"


@dataclass(frozen=True)
class Measurement:
    value: float
    unit: str | None = None


@dataclass(frozen=True)
class CurrentConditions:
    time: str
    values: dict[FieldName, Measurement]
    interval_seconds: int | None = None


@dataclass(frozen=True)
class DailyEntry:
    date: date
    values: dict[FieldName, Measurement]  # fields returned as null are absent


@dataclass(frozen=True)
class ForecastResult:
    latitude: float
    longitude: float
    timezone: str = "GMT"
    timezone_abbreviation: str = "GMT"
    elevation: float | None = None
    current: CurrentConditions | None = None
    daily: list[DailyEntry] | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False)
