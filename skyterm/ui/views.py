"""Text renderings of a forecast snapshot, one per view mode.

Everything here is pure: a view turns the snapshot into a ``Frame`` of
plain text lines sized to the space it is given. Curses never appears in
this module, so the same frames serve the TUI and ``--print`` output.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass

from skyterm.models.common import FieldName, ViewMode
from skyterm.models.forecast import ForecastResult
from skyterm.series.extractor import ChartData, current_reading

NO_DATA = "No weather data available"
LOADING = "Fetching weather data..."
TOO_SMALL = "Terminal too small"

POINT_MARK = "o"
LINE_MARK = "."


@dataclass(frozen=True)
class Frame:
    title: str
    lines: list[str]


FrameRenderer = Callable[[int, int], Frame]


def render_summary(
    result: ForecastResult | None, field: FieldName, unit_symbol: str = ""
) -> list[str]:
    reading = current_reading(result, field)
    if reading is None or result is None or result.current is None:
        return [NO_DATA]

    if field.startswith("temperature"):
        headline = f"Temperature: {reading.value:.1f}{reading.unit or unit_symbol}"
    else:
        suffix = f" {reading.unit}" if reading.unit else ""
        headline = f"{field}: {reading.value:.1f}{suffix}"
    lines = [headline]
    for name, m in result.current.values.items():
        if name == field:
            continue
        suffix = f" {m.unit}" if m.unit else ""
        lines.append(f"{name}: {m.value:g}{suffix}")
    if result.current.time:
        lines.append(f"Observed: {result.current.time} {result.timezone_abbreviation}")
    return lines


def render_json(result: ForecastResult | None) -> list[str]:
    if result is None:
        return [NO_DATA]
    return json.dumps(result.raw, indent=2, ensure_ascii=False).splitlines()


def _row_for(value: float, chart: ChartData, plot_height: int) -> int:
    span = chart.axis.max - chart.axis.min
    if span <= 0:
        return plot_height // 2
    frac = (chart.axis.max - value) / span
    return max(0, min(plot_height - 1, round(frac * (plot_height - 1))))


def _col_for(index: int, count: int, plot_width: int) -> int:
    if count == 1:
        return plot_width // 2
    return round(index * (plot_width - 1) / (count - 1))


def render_chart(chart: ChartData | None, width: int, height: int) -> list[str]:
    """Line chart with y tick labels on the left and MM/DD labels below."""
    if chart is None:
        return [NO_DATA]

    label_width = max((len(t.label) for t in chart.ticks), default=0) + 1
    plot_width = width - label_width - 1
    plot_height = height - 2
    if plot_width < 2 or plot_height < 2:
        return [TOO_SMALL]

    grid = [[" "] * plot_width for _ in range(plot_height)]
    count = len(chart.series)
    coords = [
        (_col_for(i, count, plot_width), _row_for(p.value, chart, plot_height))
        for i, p in enumerate(chart.series)
    ]

    # Connect consecutive points column by column
    for (x0, y0), (x1, y1) in zip(coords, coords[1:]):
        for x in range(x0 + 1, x1):
            y = round(y0 + (y1 - y0) * (x - x0) / (x1 - x0))
            grid[y][x] = LINE_MARK
    for x, y in coords:
        grid[y][x] = POINT_MARK

    gutter = [" " * label_width for _ in range(plot_height)]
    for tick in chart.ticks:
        row = _row_for(tick.value, chart, plot_height)
        gutter[row] = tick.label.rjust(label_width - 1) + " "

    lines = [gutter[r] + "|" + "".join(grid[r]) for r in range(plot_height)]
    lines.append(" " * label_width + "+" + "-" * plot_width)

    x_labels = [" "] * plot_width
    next_free = 0
    for (x, _), point in zip(coords, chart.series):
        start = max(0, min(plot_width - len(point.label), x - len(point.label) // 2))
        if start < next_free:
            continue
        x_labels[start:start + len(point.label)] = point.label
        next_free = start + len(point.label) + 1
    lines.append(" " * (label_width + 1) + "".join(x_labels).rstrip())
    return lines


def loading_renderer(width: int, height: int) -> Frame:
    return Frame("Weather Info", [LOADING])


def make_renderer(
    mode: ViewMode,
    result: ForecastResult | None,
    chart: ChartData | None = None,
    summary_field: FieldName = "temperature_2m",
    unit_symbol: str = "",
) -> FrameRenderer:
    """Bind a view mode to one snapshot; the returned callable draws any size."""
    if mode is ViewMode.CHART:
        title = chart.title if chart is not None else "Forecast"
        return lambda width, height: Frame(title, render_chart(chart, width, height))
    if mode is ViewMode.JSON:
        lines = render_json(result)
        return lambda width, height: Frame("Raw JSON", lines)
    lines = render_summary(result, summary_field, unit_symbol)
    return lambda width, height: Frame("Weather Info", lines)
