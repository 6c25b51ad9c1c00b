"""Off-screen export tests."""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QColor

from vizmorph.charting.export import export_chart, render_to_image
from vizmorph.charting.engine import MorphingChartEngine


@pytest.fixture
def bar_engine(qapp):
    engine = MorphingChartEngine(values=[1, 2, 3])
    engine.set_bar_chart(True)
    engine.finish_animation()
    return engine


def test_render_to_image_size(bar_engine):
    image = render_to_image(bar_engine, 320, 200)
    assert (image.width(), image.height()) == (320, 200)
    assert bar_engine.last_frame is not None


def test_bar_pixels_are_painted(bar_engine):
    image = render_to_image(bar_engine, 320, 200)
    bar = bar_engine.last_frame.bars[2]
    pixel = QColor(image.pixel(int(bar.center_x), int(bar.top + bar.height / 2)))
    assert pixel != QColor("white")


def test_png_export_writes_file(bar_engine, tmp_path):
    out = export_chart(bar_engine, tmp_path / "chart.png", width=200, height=150)
    assert out.exists()
    assert out.stat().st_size > 0


def test_svg_export_writes_markup(bar_engine, tmp_path):
    out = export_chart(bar_engine, tmp_path / "chart.svg", format="svg")
    assert "<svg" in out.read_text(encoding="utf-8")


def test_unknown_format_rejected(bar_engine, tmp_path):
    with pytest.raises(ValueError):
        export_chart(bar_engine, tmp_path / "chart.gif", format="gif")
