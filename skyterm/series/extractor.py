"""Series extraction: daily forecast entries to chartable points.

Missing-field policy: a daily entry that lacks the requested field
contributes ``MISSING_VALUE`` (0.0) instead of being skipped, so that the
n-th point always belongs to the n-th date. Callers charting sparse
fields should expect zeros at the gaps.
"""

from dataclasses import dataclass

from skyterm.models.common import FieldName
from skyterm.models.forecast import ForecastResult, Measurement

MISSING_VALUE = 0.0
DEFAULT_MARGIN = 5.0
DEFAULT_TICK_STEP = 5.0
LABEL_FORMAT = "%m/%d"


@dataclass(frozen=True)
class SeriesPoint:
    label: str
    value: float


@dataclass(frozen=True)
class AxisRange:
    min: float
    max: float


@dataclass(frozen=True)
class Tick:
    value: float
    label: str


@dataclass(frozen=True)
class ChartData:
    title: str
    series: list[SeriesPoint]
    axis: AxisRange
    ticks: list[Tick]


def extract(result: ForecastResult, field: FieldName) -> list[SeriesPoint]:
    """One (MM/DD, value) point per daily entry, in source order."""
    if not result.daily:
        return []
    points: list[SeriesPoint] = []
    for entry in result.daily:
        measurement = entry.values.get(field)
        value = measurement.value if measurement is not None else MISSING_VALUE
        points.append(SeriesPoint(entry.date.strftime(LABEL_FORMAT), value))
    return points


def axis_range(series: list[SeriesPoint], margin: float = DEFAULT_MARGIN) -> AxisRange:
    """Value extrema padded by ``margin`` on both ends.

    Empty series have no extrema; callers must handle them first. The
    margin must be positive so that min < max even for a flat series.
    """
    if not series:
        raise ValueError("axis_range needs at least one point")
    if margin <= 0:
        raise ValueError(f"axis margin must be positive, got {margin}")
    values = [p.value for p in series]
    return AxisRange(min(values) - margin, max(values) + margin)


def tick_labels(axis: AxisRange, step: float = DEFAULT_TICK_STEP, unit: str = "") -> list[Tick]:
    """Ticks from axis.min upward every ``step`` units, up to axis.max."""
    if step <= 0:
        raise ValueError(f"tick step must be positive, got {step}")
    ticks: list[Tick] = []
    i = 0
    while True:
        value = axis.min + i * step
        # Tolerate float drift on the last tick
        if value > axis.max + 1e-9:
            break
        ticks.append(Tick(value, f"{value:.1f}{unit}"))
        i += 1
    return ticks


def current_reading(result: ForecastResult | None, field: FieldName) -> Measurement | None:
    if result is None or result.current is None:
        return None
    return result.current.values.get(field)


def build_chart(
    result: ForecastResult | None,
    field: FieldName,
    margin: float = DEFAULT_MARGIN,
    tick_step: float = DEFAULT_TICK_STEP,
    unit: str = "",
) -> ChartData | None:
    """Series, padded axis and ticks for one field; None when there is nothing to plot."""
    if result is None:
        return None
    series = extract(result, field)
    if not series:
        return None
    axis = axis_range(series, margin)
    return ChartData(
        title=f"Forecast: {field}",
        series=series,
        axis=axis,
        ticks=tick_labels(axis, tick_step, unit),
    )
