"""Common types shared across models."""

from enum import StrEnum
from typing import TypeAlias

FieldName: TypeAlias = str


class TemperatureUnit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"


class ViewMode(StrEnum):
    SUMMARY = "summary"
    CHART = "chart"
    JSON = "json"
