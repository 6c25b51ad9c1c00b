"""Placement of permanent value labels.

Line-dominant frames get one horizontal label per point. Bar-dominant
frames get the value written bottom-to-top along each bar as individually
rotated glyphs; ``rotated_glyphs`` computes their final centres directly
instead of going through a painter transform stack.
"""

from __future__ import annotations

from typing import List, Sequence

from .layout import format_value
from .types import ChartRect, GlyphPlacement, PointF, TextMetrics, TextPlacement

__all__ = [
    "LABEL_GAP_PX",
    "GLYPH_ADVANCE_FACTOR",
    "MAX_INSET_PX",
    "point_value_labels",
    "glyph_advance",
    "rotated_glyphs",
]

LABEL_GAP_PX = 4
GLYPH_ADVANCE_FACTOR = 0.8
MAX_INSET_PX = 20


def point_value_labels(
    values: Sequence[float],
    points: Sequence[PointF],
    metrics: TextMetrics,
    *,
    min_x: float,
    max_x: float,
) -> List[TextPlacement]:
    """Horizontal labels just above each point.

    The first label starts at its point, the last one ends at its point and
    the rest are centred; every label is then clamped into [min_x, max_x - w].
    """
    labels: List[TextPlacement] = []
    last = len(points) - 1
    for i, (px, py) in enumerate(points):
        text = format_value(values[i])
        w = metrics.width(text)
        h = metrics.height(text)
        if i == 0:
            x = px
        elif i == last:
            x = px - w
        else:
            x = px - w / 2
        # min() first so a label wider than the span still pins to min_x.
        x = max(min_x, min(x, max_x - w))
        labels.append(TextPlacement(text, x, py - h - LABEL_GAP_PX, w, h))
    return labels


def glyph_advance(char: str, metrics: TextMetrics) -> float:
    return metrics.width(char) * GLYPH_ADVANCE_FACTOR


def rotated_glyphs(
    text: str,
    bar: ChartRect,
    metrics: TextMetrics,
    *,
    top_limit: float,
) -> List[GlyphPlacement]:
    if not text:
        return []
    advances = [glyph_advance(c, metrics) for c in text]
    total = sum(advances)
    if total <= bar.height:
        start_y = bar.top + min(MAX_INSET_PX, bar.height / 2)
    else:
        start_y = max(bar.top - total - LABEL_GAP_PX, top_limit)
    # First glyph lowest; each following glyph moves up by its own advance.
    current_y = start_y + total - advances[-1]
    glyphs: List[GlyphPlacement] = []
    for char, step in zip(text, advances):
        glyphs.append(
            GlyphPlacement(
                char=char,
                x=bar.center_x,
                y=current_y,
                width=metrics.width(char),
                height=metrics.height(char),
            )
        )
        current_y -= step
    return glyphs
