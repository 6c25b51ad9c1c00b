"""Layout engine: drawing area, value ranges and data→pixel mapping.

All functions are pure. ``progress`` is the morph progress (0 = line chart,
1 = bar chart); x positions and the X-axis row are interpolated by it.

Two value ranges are in play:
 - raw range: plain min/max of the data, used for axis labels and the
   baseline row.
 - drawing range: raw range widened when all values are equal, used to
   normalize point heights.
"""

from __future__ import annotations

import math
import sys
from typing import List, Sequence

from .types import ChartRect, Padding, PointF, TextMetrics, ValueRange

__all__ = [
    "EPSILON",
    "DEFAULT_RANGE",
    "LABEL_BUFFER_PX",
    "MAX_X_AXIS_LABELS",
    "format_value",
    "drawing_area",
    "raw_range",
    "get_min_max",
    "line_x",
    "bar_x",
    "interpolated_x",
    "point_positions",
    "baseline_y",
    "x_axis_y",
    "required_left_padding",
    "show_x_axis_index_labels",
]

EPSILON = sys.float_info.epsilon
DEFAULT_RANGE = ValueRange(-1.0, 1.0)
LABEL_BUFFER_PX = 8
MAX_X_AXIS_LABELS = 20


def format_value(value: float) -> str:
    return f"{value:.2f}"


def drawing_area(
    width: float,
    height: float,
    padding: Padding,
    *,
    title: str = "",
    title_margin: int = 0,
) -> ChartRect:
    title_offset = title_margin if title else 0
    return ChartRect(
        left=padding.left,
        top=padding.top + title_offset,
        width=width - padding.horizontal,
        height=height - padding.vertical - title_offset,
    )


def raw_range(values: Sequence[float]) -> ValueRange:
    if not values:
        return DEFAULT_RANGE
    return ValueRange(min(values), max(values))


def get_min_max(values: Sequence[float]) -> ValueRange:
    """Return the drawing range.

    When every value is equal the range is widened so normalization never
    divides by zero: non-negative values only raise the maximum by one,
    negative values widen by one on both sides (``[-5, -5]`` -> ``[-6, -4]``).
    """
    if not values:
        return DEFAULT_RANGE
    lo, hi = min(values), max(values)
    if abs(hi - lo) < EPSILON:
        if lo >= 0:
            hi += 1
        else:
            lo -= 1
            hi += 1
    return ValueRange(lo, hi)


def line_x(index: int, count: int, area: ChartRect) -> float:
    if count <= 1:
        return area.left
    return area.left + index * (area.width / (count - 1))


def bar_x(index: int, count: int, area: ChartRect) -> float:
    return area.left + (index + 0.5) * (area.width / count)


def interpolated_x(index: int, count: int, area: ChartRect, progress: float) -> float:
    return line_x(index, count, area) * (1 - progress) + bar_x(index, count, area) * progress


def point_positions(values: Sequence[float], area: ChartRect, progress: float) -> List[PointF]:
    n = len(values)
    if n == 0:
        return []
    rng = get_min_max(values)
    span = rng.span
    points: List[PointF] = []
    for i, value in enumerate(values):
        normalized = 0.0 if span == 0 else (value - rng.minimum) / span
        y = area.bottom - normalized * area.height
        points.append((interpolated_x(i, n, area, progress), y))
    return points


def baseline_y(raw: ValueRange, area: ChartRect) -> float:
    """Pixel row of value 0 under the raw range, pinned to an edge when 0 is outside it."""
    if raw.minimum > 0:
        return area.bottom
    if raw.maximum < 0:
        return area.top
    span = raw.span
    # All-zero data: the range collapses onto 0, which sits on the bottom edge.
    zero_position = 0.0 if span == 0 else (0 - raw.minimum) / span
    return area.bottom - zero_position * area.height


def x_axis_y(baseline: float, area: ChartRect, progress: float) -> float:
    return baseline * (1 - progress) + area.bottom * progress


def required_left_padding(
    values: Sequence[float],
    metrics: TextMetrics,
    *,
    show_y_labels: bool,
    current: int,
) -> int:
    """Left padding wide enough for the Y-axis labels plus an 8 px buffer."""
    if not show_y_labels:
        return current
    rng = raw_range(values)
    widest = max(
        metrics.width(format_value(rng.maximum)),
        metrics.width(format_value(rng.minimum)),
    )
    if rng.straddles_zero():
        widest = max(widest, metrics.width("0"))
    return int(math.ceil(widest)) + LABEL_BUFFER_PX


def show_x_axis_index_labels(count: int, enabled: bool) -> bool:
    return enabled and 0 < count <= MAX_X_AXIS_LABELS
