"""YAML config loader with runtime overrides by dotted key."""

import json
from pathlib import Path
from typing import Any

import yaml

from skyterm.config.schema import AppConfig
from skyterm.models.forecast import ForecastRequest


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path (or an empty file) yields the defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def set_config_value(config: AppConfig, dotted_key: str, value: Any) -> AppConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new AppConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
        elif isinstance(old_value, list):
            value = [v.strip() for v in value.split(",") if v.strip()]
    target[parts[-1]] = value
    return AppConfig(**data)


def build_request(config: AppConfig) -> ForecastRequest:
    """Build the one-shot ForecastRequest from config."""
    req = config.request
    return ForecastRequest(
        coordinate=config.location.coordinate(),
        current_fields=tuple(req.current_fields),
        daily_fields=tuple(req.daily_fields),
        temperature_unit=req.temperature_unit,
        forecast_days=req.forecast_days,
        timezone=req.timezone,
    )
