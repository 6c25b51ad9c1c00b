"""Morphing chart widget.

Thin ``QWidget`` host around ``MorphingChartEngine``: the widget owns the
window-side objects (``QTimer``, tooltip, contents margins) and the engine
owns all chart state. Paint, mouse-move and leave events are forwarded to
the engine; the engine's bus events are turned back into ``update()`` calls
and ``QToolTip`` commands.

Usage::

    chart = MorphingChartWidget()
    chart.set_values([3.5, -1.2, 7.0])
    chart.set_bar_chart(not chart.is_bar_chart())
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from PyQt6.QtCore import QPoint, QRect, QSize, QTimer
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QToolTip, QWidget

from ..charting.appearance import ChartAppearance
from ..charting.engine import MorphingChartEngine
from ..charting.types import ChartFrame, TooltipCommand
from ..services.event_bus import ChartEvent, Event

__all__ = ["QtTickScheduler", "MorphingChartWidget"]

log = logging.getLogger(__name__)


class QtTickScheduler:
    """``TickScheduler`` backed by a repeating ``QTimer``."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(False)

    @property
    def timeout(self):
        return self._timer.timeout

    def start(self, interval_ms: int) -> None:
        self._timer.start(interval_ms)

    def stop(self) -> None:
        self._timer.stop()

    def set_interval(self, interval_ms: int) -> None:
        self._timer.setInterval(interval_ms)

    def interval(self) -> int:
        return self._timer.interval()

    def is_active(self) -> bool:
        return self._timer.isActive()


class MorphingChartWidget(QWidget):
    """Line/bar morphing chart.

    Properties exposed for QSS theming:
     - objectName: morphingChart
     - dynamic property 'chartKind': 'line' or 'bar' (requested kind)
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        values: Optional[Iterable[float]] = None,
        appearance: Optional[ChartAppearance] = None,
    ):
        super().__init__(parent)
        self.setObjectName("morphingChart")
        self.setMouseTracking(True)
        self._scheduler = QtTickScheduler(self)
        self._scheduler.timeout.connect(self._on_tick)  # type: ignore[attr-defined]
        self._engine = MorphingChartEngine(appearance=appearance, scheduler=self._scheduler)
        self._last_tooltip: TooltipCommand = TooltipCommand.hide()
        bus = self._engine.bus
        bus.subscribe(ChartEvent.REDRAW_REQUESTED, self._on_redraw)
        bus.subscribe(ChartEvent.TOOLTIP_SHOW, self._on_tooltip_show)
        bus.subscribe(ChartEvent.TOOLTIP_HIDE, self._on_tooltip_hide)
        bus.subscribe(ChartEvent.PADDING_CHANGED, self._on_padding_changed)
        self._apply_margins()
        self.setProperty("chartKind", "line")
        if values is not None:
            self._engine.set_values(values)

    # Engine facade -------------------------------------------------------
    def engine(self) -> MorphingChartEngine:
        return self._engine

    def scheduler(self) -> QtTickScheduler:
        return self._scheduler

    def values(self) -> List[float]:
        return self._engine.values

    def set_values(self, values: Iterable[float]) -> None:
        self._engine.set_values(values)

    def is_bar_chart(self) -> bool:
        return self._engine.is_bar_chart

    def set_bar_chart(self, value: bool) -> None:
        self._engine.set_bar_chart(value)
        self.setProperty("chartKind", "bar" if self._engine.is_bar_chart else "line")

    def progress(self) -> float:
        return self._engine.progress

    def appearance(self) -> ChartAppearance:
        return self._engine.appearance

    def configure(self, **changes) -> None:
        self._engine.configure(**changes)

    def last_tooltip(self) -> TooltipCommand:
        return self._last_tooltip

    def last_frame(self) -> Optional[ChartFrame]:
        return self._engine.last_frame

    # Bus handlers ----------------------------------------------------------
    def _on_tick(self) -> None:
        self._engine.tick()

    def _on_redraw(self, _event: Event) -> None:
        self.update()

    def _on_tooltip_show(self, event: Event) -> None:
        command: TooltipCommand = event.payload
        self._last_tooltip = command
        x, y = command.position
        QToolTip.showText(
            self.mapToGlobal(QPoint(int(x), int(y))),
            command.text,
            self,
            QRect(),
            command.timeout_ms,
        )

    def _on_tooltip_hide(self, _event: Event) -> None:
        self._last_tooltip = TooltipCommand.hide()
        QToolTip.hideText()

    def _on_padding_changed(self, event: Event) -> None:
        log.debug("left margin now %s px", event.payload)
        self._apply_margins()

    def _apply_margins(self) -> None:
        p = self._engine.padding
        self.setContentsMargins(p.left, p.top, p.right, p.bottom)

    # Qt events -------------------------------------------------------------
    def sizeHint(self) -> QSize:  # type: ignore[override]
        return QSize(480, 320)

    def resizeEvent(self, event):  # type: ignore[override]
        self._engine.resize(self.width(), self.height())
        super().resizeEvent(event)

    def paintEvent(self, event):  # type: ignore[override]
        painter = QPainter(self)
        try:
            self._engine.render(painter, self.width(), self.height())
        finally:
            painter.end()

    def mouseMoveEvent(self, event):  # type: ignore[override]
        pos = event.position()
        self._engine.handle_pointer(pos.x(), pos.y())
        super().mouseMoveEvent(event)

    def leaveEvent(self, event):  # type: ignore[override]
        self._engine.handle_pointer_leave()
        super().leaveEvent(event)
