"""Tests for the text views."""

import json

from skyterm.models.common import ViewMode
from skyterm.models.forecast import ForecastResult
from skyterm.models.wire import decode_forecast
from skyterm.series.extractor import AxisRange, ChartData, SeriesPoint, Tick, build_chart
from skyterm.ui.views import (
    LOADING,
    NO_DATA,
    POINT_MARK,
    TOO_SMALL,
    loading_renderer,
    make_renderer,
    render_chart,
    render_json,
    render_summary,
)

FIELD = "temperature_2m_max"


class TestRenderSummary:
    def test_temperature_line(self, forecast_result: ForecastResult):
        lines = render_summary(forecast_result, "temperature_2m", "°F")
        assert lines[0] == "Temperature: 81.4°F"
        assert "wind_speed_10m: 11.2 km/h" in lines
        assert lines[-1] == "Observed: 2024-08-02T14:45 EDT"

    def test_unit_from_payload_wins(self, current_only_payload: dict):
        lines = render_summary(decode_forecast(current_only_payload), "temperature_2m", "°F")
        assert lines[0] == "Temperature: 25.0°C"

    def test_non_temperature_field_label(self, current_only_payload: dict):
        lines = render_summary(decode_forecast(current_only_payload), "wind_speed_10m", "°F")
        assert lines[0] == "wind_speed_10m: 5.0 m/s"
        assert "Temperature" not in lines[0]
        assert "temperature_2m: 25 °C" in lines

    def test_no_result(self):
        assert render_summary(None, "temperature_2m") == [NO_DATA]

    def test_no_current_block(self, sparse_payload: dict):
        assert render_summary(decode_forecast(sparse_payload), "temperature_2m") == [NO_DATA]


class TestRenderJson:
    def test_pretty_printed_raw_payload(self, forecast_result: ForecastResult, forecast_payload: dict):
        lines = render_json(forecast_result)
        assert lines[0] == "{"
        assert json.loads("\n".join(lines)) == forecast_payload
        assert any("°F" in line for line in lines)

    def test_no_result(self):
        assert render_json(None) == [NO_DATA]


class TestRenderChart:
    def _chart(self, result: ForecastResult) -> ChartData:
        chart = build_chart(result, FIELD, margin=5.0, tick_step=5.0, unit="°F")
        assert chart is not None
        return chart

    def test_fills_requested_height(self, forecast_result: ForecastResult):
        lines = render_chart(self._chart(forecast_result), 60, 12)
        assert len(lines) == 12
        assert all(len(line) <= 60 for line in lines)

    def test_one_mark_per_point(self, forecast_result: ForecastResult):
        lines = render_chart(self._chart(forecast_result), 60, 12)
        assert sum(line.count(POINT_MARK) for line in lines) == 2

    def test_higher_value_drawn_higher(self, forecast_result: ForecastResult):
        lines = render_chart(self._chart(forecast_result), 60, 12)
        rows = [i for i, line in enumerate(lines) if POINT_MARK in line]
        first_col = lines[rows[0]].index(POINT_MARK)
        last_col = lines[rows[-1]].index(POINT_MARK)
        # 08/02 (82.76) sits above 08/03 (75.2) and to its left
        assert rows[0] < rows[-1]
        assert first_col < last_col

    def test_axis_labels(self, forecast_result: ForecastResult):
        lines = render_chart(self._chart(forecast_result), 60, 12)
        assert "08/02" in lines[-1]
        assert "08/03" in lines[-1]
        assert lines[-2].lstrip().startswith("+")
        assert any(line.lstrip().startswith("70.2°F") for line in lines)

    def test_no_chart_placeholder(self):
        assert render_chart(None, 60, 12) == [NO_DATA]

    def test_too_small(self, forecast_result: ForecastResult):
        assert render_chart(self._chart(forecast_result), 5, 3) == [TOO_SMALL]

    def test_flat_single_point(self):
        chart = ChartData(
            title="t",
            series=[SeriesPoint("08/02", 50.0)],
            axis=AxisRange(50.0, 50.0),
            ticks=[Tick(50.0, "50.0")],
        )
        lines = render_chart(chart, 30, 8)
        assert sum(line.count(POINT_MARK) for line in lines) == 1


class TestMakeRenderer:
    def test_summary_mode(self, forecast_result: ForecastResult):
        frame = make_renderer(ViewMode.SUMMARY, forecast_result, unit_symbol="°F")(78, 22)
        assert frame.title == "Weather Info"
        assert frame.lines[0].startswith("Temperature:")

    def test_json_mode(self, forecast_result: ForecastResult):
        frame = make_renderer(ViewMode.JSON, forecast_result)(78, 22)
        assert frame.title == "Raw JSON"

    def test_chart_mode(self, forecast_result: ForecastResult):
        chart = build_chart(forecast_result, FIELD)
        frame = make_renderer(ViewMode.CHART, forecast_result, chart)(78, 22)
        assert frame.title == f"Forecast: {FIELD}"
        assert len(frame.lines) == 22

    def test_chart_mode_without_daily_shows_placeholder(self, current_only_payload: dict):
        result = decode_forecast(current_only_payload)
        chart = build_chart(result, FIELD)
        frame = make_renderer(ViewMode.CHART, result, chart)(78, 22)
        assert chart is None
        assert frame.lines == [NO_DATA]

    def test_loading(self):
        assert loading_renderer(10, 10).lines == [LOADING]
