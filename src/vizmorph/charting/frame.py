"""Frame construction: the geometry half of the renderer.

``build_frame`` turns the chart state into a ``ChartFrame`` holding every
line, rectangle and text placement to draw. The painter then only walks the
frame, which keeps all positioning rules testable without a paint device.
"""

from __future__ import annotations

from typing import Sequence

from . import layout
from .appearance import ChartAppearance
from .labels import LABEL_GAP_PX, point_value_labels, rotated_glyphs
from .types import ChartFrame, ChartRect, Padding, TextMetrics, TextPlacement, TickMark

__all__ = ["BAR_WIDTH_FACTOR", "MAX_ALPHA", "TICK_HALF_LENGTH", "build_frame"]

BAR_WIDTH_FACTOR = 0.8
MAX_ALPHA = 200
TICK_HALF_LENGTH = 3


def _y_labels(frame: ChartFrame, metrics: TextMetrics) -> None:
    area = frame.area
    raw = frame.raw_range
    rows = [
        (layout.format_value(raw.maximum), area.top),
        (layout.format_value(raw.minimum), area.bottom),
    ]
    if raw.straddles_zero():
        rows.append(("0", frame.baseline_y))
    for text, row in rows:
        w = metrics.width(text)
        h = metrics.height(text)
        frame.y_labels.append(TextPlacement(text, area.left - w - LABEL_GAP_PX, row - h / 2, w, h))


def _x_axis(frame: ChartFrame, count: int, appearance: ChartAppearance, metrics: TextMetrics) -> None:
    if not appearance.show_x_axis_labels or count == 0:
        return
    with_labels = layout.show_x_axis_index_labels(count, appearance.show_x_axis_labels)
    axis_row = frame.x_axis_y
    for i in range(count):
        x = layout.interpolated_x(i, count, frame.area, frame.progress)
        frame.x_ticks.append(TickMark(x, axis_row - TICK_HALF_LENGTH, axis_row + TICK_HALF_LENGTH))
        if with_labels:
            text = str(i)
            w = metrics.width(text)
            frame.x_labels.append(
                TextPlacement(text, x - w / 2, axis_row + LABEL_GAP_PX, w, metrics.height(text))
            )


def _bars(frame: ChartFrame, count: int) -> None:
    progress = frame.progress
    if progress <= 0 or count == 0:
        return
    bar_width = frame.area.width / count * BAR_WIDTH_FACTOR * progress
    axis_row = frame.x_axis_y
    for px, py in frame.points:
        top = min(py, axis_row)
        frame.bars.append(ChartRect(px - bar_width / 2, top, bar_width, abs(axis_row - py)))
    frame.bar_alpha = int(MAX_ALPHA * progress)


def build_frame(
    values: Sequence[float],
    appearance: ChartAppearance,
    padding: Padding,
    progress: float,
    width: int,
    height: int,
    axis_metrics: TextMetrics,
    title_metrics: TextMetrics,
) -> ChartFrame:
    title = appearance.chart_title
    area = layout.drawing_area(
        width, height, padding, title=title, title_margin=appearance.title_margin
    )
    raw = layout.raw_range(values)
    frame = ChartFrame(
        width=width,
        height=height,
        area=area,
        raw_range=raw,
        drawing_range=layout.get_min_max(values),
        progress=progress,
    )
    count = len(values)
    frame.points = layout.point_positions(values, area, progress)
    frame.baseline_y = layout.baseline_y(raw, area)
    frame.x_axis_y = layout.x_axis_y(frame.baseline_y, area, progress)

    if appearance.show_y_axis_labels:
        _y_labels(frame, axis_metrics)
    _x_axis(frame, count, appearance, axis_metrics)

    if title:
        tw = title_metrics.width(title)
        th = title_metrics.height(title)
        frame.title = TextPlacement(title, (width - tw) / 2, padding.top - th, tw, th)

    _bars(frame, count)
    if progress < 1 and frame.points:
        frame.show_line = True
        frame.line_alpha = int(MAX_ALPHA * (1 - progress))

    if appearance.show_values and frame.points:
        if progress < 0.5 or not frame.bars:
            frame.value_labels = point_value_labels(
                values,
                frame.points,
                axis_metrics,
                min_x=padding.left,
                max_x=width - padding.right,
            )
        else:
            frame.value_glyphs = [
                rotated_glyphs(
                    layout.format_value(value), bar, axis_metrics, top_limit=padding.top
                )
                for value, bar in zip(values, frame.bars)
            ]
    return frame
