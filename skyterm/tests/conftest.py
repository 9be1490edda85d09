"""Shared test fixtures."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from skyterm.config.schema import AppConfig
from skyterm.models.forecast import ForecastResult
from skyterm.models.wire import decode_forecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    """Open-Meteo response with current conditions and two daily maxima."""
    return _load("open_meteo_forecast.json")


@pytest.fixture
def sparse_payload() -> dict:
    """Daily-only response with null cells."""
    return _load("open_meteo_sparse.json")


@pytest.fixture
def current_only_payload() -> dict:
    return _load("open_meteo_current_only.json")


@pytest.fixture
def forecast_result(forecast_payload: dict) -> ForecastResult:
    return decode_forecast(forecast_payload)


@pytest.fixture
def default_config(tmp_path: Path) -> AppConfig:
    """Default AppConfig logging into the temp directory."""
    return AppConfig(logging={"file": str(tmp_path / "skyterm.log")})


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "location": {"latitude": 47.6062, "longitude": -122.3321},
        "chart": {"margin": 2.5},
        "ui": {"view": "chart"},
        "logging": {"file": str(tmp_path / "from_yaml.log")},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def window() -> MagicMock:
    """A stand-in curses window: 24x80, no key pressed until told otherwise."""
    win = MagicMock()
    win.getmaxyx.return_value = (24, 80)
    win.getch.return_value = -1
    return win
