"""Tests for permanent value-label placement."""

from __future__ import annotations

import pytest

from vizmorph.charting.labels import point_value_labels, rotated_glyphs
from vizmorph.charting.types import ChartRect

from factories import FixedMetrics

METRICS = FixedMetrics(char_width=7, line_height=12)


def test_point_labels_alignment():
    points = [(40.0, 260.0), (210.0, 140.0), (380.0, 20.0)]
    labels = point_value_labels([1, 2, 3], points, METRICS, min_x=40, max_x=380)
    assert [l.text for l in labels] == ["1.00", "2.00", "3.00"]
    assert labels[0].x == 40  # left-aligned at the first point
    assert labels[1].x == pytest.approx(210 - 14)  # centred
    assert labels[2].x == pytest.approx(380 - 28)  # right-aligned at the last point
    assert [l.y for l in labels] == pytest.approx([244, 124, 4])


def test_point_labels_clamped_to_bounds():
    points = [(40.0, 100.0), (45.0, 100.0), (200.0, 100.0), (380.0, 100.0)]
    labels = point_value_labels([1, 2, 3, 4], points, METRICS, min_x=40, max_x=380)
    assert labels[1].x == 40


def test_single_point_label_is_left_aligned():
    (label,) = point_value_labels([5], [(100.0, 50.0)], METRICS, min_x=40, max_x=380)
    assert label.x == 100


def test_glyphs_inside_tall_bar():
    bar = ChartRect(100, 50, 20, 200)
    glyphs = rotated_glyphs("1.00", bar, METRICS, top_limit=20)
    assert "".join(g.char for g in glyphs) == "1.00"
    assert all(g.x == 110 for g in glyphs)
    assert all(g.rotation == -90 for g in glyphs)
    # advance 5.6 per glyph, total 22.4; starts 20 px into the bar
    assert [g.y for g in glyphs] == pytest.approx([86.8, 81.2, 75.6, 70.0])


def test_glyphs_above_short_bar():
    bar = ChartRect(100, 200, 20, 10)
    glyphs = rotated_glyphs("1.00", bar, METRICS, top_limit=20)
    # start = 200 - 22.4 - 4
    assert glyphs[0].y == pytest.approx(173.6 + 22.4 - 5.6)
    assert all(g.y < bar.top for g in glyphs)


def test_glyphs_clamped_below_top_padding():
    bar = ChartRect(100, 30, 20, 5)
    glyphs = rotated_glyphs("1.00", bar, METRICS, top_limit=20)
    assert glyphs[-1].y == pytest.approx(20)


def test_half_height_inset_for_medium_bar():
    bar = ChartRect(0, 100, 10, 30)
    glyphs = rotated_glyphs("1.00", bar, METRICS, top_limit=0)
    # fits (22.4 <= 30), inset is min(20, 15)
    assert glyphs[-1].y == pytest.approx(115)


def test_no_glyphs_for_empty_text():
    assert rotated_glyphs("", ChartRect(0, 0, 10, 10), METRICS, top_limit=0) == []
