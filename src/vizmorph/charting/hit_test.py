"""Pointer hit-testing against the last drawn frame."""

from __future__ import annotations

from typing import Optional, Sequence

from .layout import format_value
from .types import ChartRect, PointF

__all__ = ["is_bar_dominant", "hit_test", "tooltip_text"]


def is_bar_dominant(is_bar_chart: bool, progress: float) -> bool:
    return is_bar_chart or progress >= 0.5


def hit_test(
    x: float,
    y: float,
    points: Sequence[PointF],
    bars: Sequence[ChartRect],
    *,
    threshold: float,
    bar_dominant: bool,
) -> Optional[int]:
    """Return the index under (x, y) or None.

    Bars are tried first when the chart is bar-dominant; points are matched
    with a square window of half-width ``threshold``. First match in index
    order wins in both passes.
    """
    if bar_dominant:
        for i, rect in enumerate(bars):
            if rect.contains(x, y):
                return i
    for i, (px, py) in enumerate(points):
        if abs(x - px) <= threshold and abs(y - py) <= threshold:
            return i
    return None


def tooltip_text(value: float) -> str:
    return f"Value: {format_value(value)}"
