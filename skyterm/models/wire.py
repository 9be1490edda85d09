"""Open-Meteo wire schema and conversion into forecast results.

Open-Meteo returns the daily section column-wise::

    "daily_units": {"time": "iso8601", "temperature_2m_max": "°F"},
    "daily": {"time": ["2024-08-02", "2024-08-03"],
              "temperature_2m_max": [82.76, 75.2]}

Each column is pivoted into one ``DailyEntry`` per date. ``null`` cells
are dropped from the entry's values rather than stored as a value.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ValidationError, model_validator

from skyterm.errors import DecodeError
from skyterm.models.forecast import (
    CurrentConditions,
    DailyEntry,
    ForecastResult,
    Measurement,
)

_CURRENT_META_KEYS = frozenset({"time", "interval"})


class OpenMeteoResponse(BaseModel):
    model_config = {"extra": "ignore"}

    latitude: float
    longitude: float
    timezone: str = "GMT"
    timezone_abbreviation: str = "GMT"
    elevation: float | None = None
    current_units: dict[str, str] = {}
    current: dict[str, Any] | None = None
    daily_units: dict[str, str] = {}
    daily: dict[str, list[Any]] | None = None

    @model_validator(mode="after")
    def _check_daily_columns(self) -> "OpenMeteoResponse":
        if self.daily is None:
            return self
        times = self.daily.get("time")
        if times is None:
            raise ValueError("daily section has no 'time' column")
        for name, column in self.daily.items():
            if len(column) != len(times):
                raise ValueError(
                    f"daily column {name!r} has {len(column)} values, "
                    f"expected {len(times)}"
                )
        return self


def _numeric(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _convert_current(
    current: dict[str, Any], units: dict[str, str]
) -> CurrentConditions:
    values: dict[str, Measurement] = {}
    for name, raw in current.items():
        if name in _CURRENT_META_KEYS:
            continue
        number = _numeric(raw)
        if number is not None:
            values[name] = Measurement(number, units.get(name))

    interval = current.get("interval")
    return CurrentConditions(
        time=str(current.get("time", "")),
        values=values,
        interval_seconds=int(interval) if _numeric(interval) is not None else None,
    )


def _convert_daily(
    daily: dict[str, list[Any]], units: dict[str, str]
) -> list[DailyEntry]:
    entries: list[DailyEntry] = []
    columns = {name: col for name, col in daily.items() if name != "time"}
    for i, stamp in enumerate(daily["time"]):
        try:
            day = date.fromisoformat(str(stamp)[:10])
        except ValueError as e:
            raise DecodeError(f"Invalid daily date {stamp!r}", cause=e) from e

        values: dict[str, Measurement] = {}
        for name, column in columns.items():
            number = _numeric(column[i])
            if number is not None:
                values[name] = Measurement(number, units.get(name))
        entries.append(DailyEntry(date=day, values=values))
    return entries


def decode_forecast(payload: Any) -> ForecastResult:
    """Validate a decoded JSON payload and build a ForecastResult.

    Raises DecodeError when the payload does not match the schema.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    try:
        resp = OpenMeteoResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Forecast payload failed validation: {e}", cause=e) from e

    current = (
        _convert_current(resp.current, resp.current_units)
        if resp.current is not None
        else None
    )
    daily = (
        _convert_daily(resp.daily, resp.daily_units)
        if resp.daily is not None
        else None
    )

    return ForecastResult(
        latitude=resp.latitude,
        longitude=resp.longitude,
        timezone=resp.timezone,
        timezone_abbreviation=resp.timezone_abbreviation,
        elevation=resp.elevation,
        current=current,
        daily=daily,
        raw=payload,
    )
