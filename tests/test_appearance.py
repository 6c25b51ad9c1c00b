"""Tests for ChartAppearance defaults, validation and serialization."""

from __future__ import annotations

import pytest

from vizmorph.charting.appearance import (
    PADDING_FIELDS,
    SILENT_FIELDS,
    ChartAppearance,
)
from vizmorph.charting.types import ChartConfigError


def test_defaults():
    a = ChartAppearance()
    assert a.line_color == "orangered"
    assert a.bar_color == "steelblue"
    assert a.axis_color == "black"
    assert a.marker_size == 6.0
    assert (a.axis_font_family, a.axis_font_size) == ("Arial", 8.0)
    assert a.animation_interval_ms == 16
    assert a.animation_step == 0.05
    assert a.tooltip_threshold == 6
    assert a.show_x_axis_labels and a.show_y_axis_labels
    assert a.chart_title == "" and a.title_margin == 20
    assert a.tooltip_timeout_ms == 1000
    assert a.show_values is False


@pytest.mark.parametrize(
    "changes",
    [
        {"animation_step": 0},
        {"animation_step": 1.5},
        {"animation_interval_ms": 0},
        {"axis_font_size": -1},
        {"marker_size": -2},
        {"tooltip_threshold": -1},
        {"tooltip_timeout_ms": -5},
        {"title_margin": -1},
    ],
)
def test_invalid_values_rejected(changes):
    with pytest.raises(ChartConfigError):
        ChartAppearance().updated(**changes)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        ChartAppearance(animation_step=-0.1)


def test_updated_returns_copy():
    a = ChartAppearance()
    b = a.updated(chart_title="Hello")
    assert a.chart_title == ""
    assert b.chart_title == "Hello"
    assert b.changed_fields(a) == frozenset({"chart_title"})


def test_side_effect_groups():
    assert "show_y_axis_labels" in PADDING_FIELDS
    assert "axis_font_size" in PADDING_FIELDS
    assert "show_x_axis_labels" not in PADDING_FIELDS
    assert "tooltip_threshold" in SILENT_FIELDS
    assert "line_color" not in SILENT_FIELDS


def test_from_dict_coerces_types():
    a = ChartAppearance.from_dict(
        {"marker_size": "8", "tooltip_threshold": 9.0, "show_values": 1, "chart_title": 5}
    )
    assert a.marker_size == 8.0
    assert a.tooltip_threshold == 9
    assert a.show_values is True
    assert a.chart_title == "5"


def test_dict_round_trip():
    a = ChartAppearance(line_color="#ff0000", show_x_axis_labels=False)
    assert ChartAppearance.from_dict(a.to_dict()) == a
