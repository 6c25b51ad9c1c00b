"""Qt half of the renderer: draws a prepared ``ChartFrame`` with ``QPainter``."""

from __future__ import annotations

from PyQt6.QtCore import QLineF, QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QPolygonF

from .appearance import TITLE_FONT_FAMILY, TITLE_FONT_SIZE, ChartAppearance
from .types import ChartFrame, TextPlacement

__all__ = ["LINE_WIDTH", "axis_font", "title_font", "paint_frame"]

LINE_WIDTH = 2


def axis_font(appearance: ChartAppearance) -> QFont:
    font = QFont(appearance.axis_font_family)
    font.setPointSizeF(appearance.axis_font_size)
    return font


def title_font() -> QFont:
    font = QFont(TITLE_FONT_FAMILY)
    font.setPointSizeF(TITLE_FONT_SIZE)
    font.setBold(True)
    return font


def _with_alpha(name: str, alpha: int) -> QColor:
    color = QColor(name)
    color.setAlpha(max(0, min(255, alpha)))
    return color


def _draw_text(painter: QPainter, label: TextPlacement) -> None:
    if not label.text:
        return
    painter.drawText(
        QRectF(label.x, label.y, label.width, label.height),
        Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
        label.text,
    )


def paint_frame(painter: QPainter, frame: ChartFrame, appearance: ChartAppearance) -> None:
    area = frame.area
    axis_color = QColor(appearance.axis_color)
    font = axis_font(appearance)

    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

    # Axes
    painter.setPen(QPen(axis_color, 1))
    painter.drawLine(QLineF(area.left, area.top, area.left, area.bottom))
    painter.drawLine(QLineF(area.left, frame.x_axis_y, area.right, frame.x_axis_y))

    painter.setFont(font)
    for label in frame.y_labels:
        _draw_text(painter, label)

    for tick in frame.x_ticks:
        painter.drawLine(QLineF(tick.x, tick.y1, tick.x, tick.y2))
    for label in frame.x_labels:
        _draw_text(painter, label)

    if frame.title is not None:
        painter.setFont(title_font())
        _draw_text(painter, frame.title)
        painter.setFont(font)

    if frame.bars:
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(_with_alpha(appearance.bar_color, frame.bar_alpha)))
        for bar in frame.bars:
            painter.drawRect(QRectF(bar.left, bar.top, bar.width, bar.height))

    if frame.show_line:
        if len(frame.points) > 1:
            painter.setPen(QPen(_with_alpha(appearance.line_color, frame.line_alpha), LINE_WIDTH))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in frame.points]))
        size = appearance.marker_size
        painter.setPen(QPen(QColor(appearance.marker_color), 1))
        painter.setBrush(QBrush(QColor("white")))
        for x, y in frame.points:
            painter.drawEllipse(QRectF(x - size / 2, y - size / 2, size, size))

    painter.setPen(QPen(axis_color, 1))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    for label in frame.value_labels:
        _draw_text(painter, label)
    for glyphs in frame.value_glyphs:
        for glyph in glyphs:
            painter.save()
            painter.translate(glyph.x, glyph.y)
            painter.rotate(glyph.rotation)
            painter.drawText(
                QRectF(-glyph.width / 2, -glyph.height / 2, glyph.width, glyph.height),
                Qt.AlignmentFlag.AlignCenter,
                glyph.char,
            )
            painter.restore()

    painter.restore()
