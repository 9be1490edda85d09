"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from skyterm.config.schema import (
    AppConfig,
    ChartConfig,
    LocationConfig,
    RequestConfig,
    UiConfig,
)
from skyterm.models.common import TemperatureUnit, ViewMode
from skyterm.models.forecast import Coordinate


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.location.coordinate() == Coordinate(40.7128, -74.0060)
        assert config.request.temperature_unit == TemperatureUnit.FAHRENHEIT
        assert config.chart.margin == 5.0
        assert config.ui.poll_timeout_ms == 50
        assert config.ui.quit_key == "q"
        assert config.ui.view == ViewMode.SUMMARY
        assert config.client.timeout_seconds == 30.0

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ChartConfig(margin=5.0, bogus=True)


class TestLocationConfig:
    @pytest.mark.parametrize("lat", [-90.5, 90.5])
    def test_latitude_bounds(self, lat: float):
        with pytest.raises(ValidationError):
            LocationConfig(latitude=lat)

    def test_longitude_bounds(self):
        with pytest.raises(ValidationError):
            LocationConfig(longitude=181.0)


class TestRequestConfig:
    def test_unit_from_string(self):
        assert RequestConfig(temperature_unit="celsius").temperature_unit == TemperatureUnit.CELSIUS

    def test_unknown_unit(self):
        with pytest.raises(ValidationError):
            RequestConfig(temperature_unit="kelvin")

    @pytest.mark.parametrize("days", [0, 17])
    def test_horizon_bounds(self, days: int):
        with pytest.raises(ValidationError):
            RequestConfig(forecast_days=days)


class TestChartConfig:
    def test_tick_step_positive(self):
        with pytest.raises(ValidationError):
            ChartConfig(tick_step=0)

    @pytest.mark.parametrize("margin", [0.0, -1.0])
    def test_margin_positive(self, margin: float):
        with pytest.raises(ValidationError):
            ChartConfig(margin=margin)


class TestUiConfig:
    def test_quit_key_single_char(self):
        with pytest.raises(ValidationError):
            UiConfig(quit_key="quit")

    def test_poll_timeout_bounds(self):
        with pytest.raises(ValidationError):
            UiConfig(poll_timeout_ms=0)

    def test_view_from_string(self):
        assert UiConfig(view="json").view == ViewMode.JSON
