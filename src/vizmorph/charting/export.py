"""Chart export utilities.

Renders the engine's current state off-screen, independent of any widget,
so the demo launcher and tests can produce PNG/SVG snapshots.
"""
from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QRectF, QSize
from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtSvg import QSvgGenerator

from .engine import MorphingChartEngine

__all__ = ["SUPPORTED_FORMATS", "render_to_image", "export_chart"]

SUPPORTED_FORMATS = ("png", "svg")


def render_to_image(
    engine: MorphingChartEngine, width: int, height: int, *, background: str = "white"
) -> QImage:
    """Render one frame into a new ARGB image of the given size."""
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor(background))
    painter = QPainter(image)
    try:
        engine.render(painter, width, height)
    finally:
        painter.end()
    return image


def export_chart(
    engine: MorphingChartEngine,
    path: str | Path,
    *,
    width: int = 640,
    height: int = 400,
    format: str = "png",
) -> Path:
    """Write the current chart to ``path`` as PNG or SVG and return the path.

    Args:
        engine: Engine whose current state (values, progress, appearance) is drawn.
        path: Destination file; the parent directory must exist.
        width, height: Output size in pixels.
        format: 'png' or 'svg'.
    """
    fmt = format.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError("format must be 'png' or 'svg'")
    out = Path(path)
    if fmt == "png":
        image = render_to_image(engine, width, height)
        if not image.save(str(out), "PNG"):
            raise OSError(f"could not write {out}")
        return out
    generator = QSvgGenerator()
    generator.setFileName(str(out))
    generator.setSize(QSize(width, height))
    generator.setViewBox(QRectF(0, 0, width, height))
    painter = QPainter(generator)
    try:
        engine.render(painter, width, height)
    finally:
        painter.end()
    return out
