"""Qt text measurement used by layout and frame construction.

Layout code only depends on the ``TextMetrics`` protocol from ``types``; the
Qt implementation here needs a running ``QGuiApplication`` and is created
lazily by the engine through a factory so tests can substitute fixed-width
metrics.
"""

from __future__ import annotations

from PyQt6.QtGui import QFont, QFontMetricsF

from .types import MetricsFactory, TextMetrics

__all__ = ["TextMetrics", "MetricsFactory", "QtTextMetrics", "qt_metrics_factory"]


class QtTextMetrics:
    """``TextMetrics`` backed by ``QFontMetricsF`` for a given font."""

    def __init__(self, font: QFont) -> None:
        self._font = QFont(font)
        self._fm = QFontMetricsF(self._font)

    @property
    def font(self) -> QFont:
        return QFont(self._font)

    def width(self, text: str) -> float:
        return self._fm.horizontalAdvance(text)

    def height(self, text: str) -> float:
        return self._fm.height()


def qt_metrics_factory(family: str, size: float, bold: bool = False) -> QtTextMetrics:
    font = QFont(family)
    font.setPointSizeF(size)
    font.setBold(bold)
    return QtTextMetrics(font)
