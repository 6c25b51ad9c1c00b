"""Morphing chart engine.

Owns the chart state (value sequence, appearance, padding, morph progress)
and wires the layout engine, animation controller, renderer and hit-tester
together. The engine never touches a window: hosts call ``render`` from
their paint handler, forward pointer events to ``handle_pointer`` /
``handle_pointer_leave`` and subscribe to ``bus`` for the outbound effects
(redraw requests, tooltip commands, padding changes).

Usage::

    engine = MorphingChartEngine(scheduler=my_timer)
    engine.bus.subscribe(ChartEvent.REDRAW_REQUESTED, lambda e: widget.update())
    engine.set_values([1, 2, 3])
    engine.set_bar_chart(True)   # starts the scheduler; host calls engine.tick()
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

from . import layout
from .appearance import (
    PADDING_FIELDS,
    SILENT_FIELDS,
    STEP_FIELDS,
    TIMER_FIELDS,
    TITLE_FONT_FAMILY,
    TITLE_FONT_SIZE,
    ChartAppearance,
)
from .frame import build_frame
from .hit_test import hit_test, is_bar_dominant, tooltip_text
from .morph import MorphAnimator, TickScheduler
from .text_metrics import MetricsFactory, TextMetrics, qt_metrics_factory
from .types import ChartFrame, InvalidChartValueError, Padding, TooltipCommand
from ..services.event_bus import ChartEvent, EventBus

__all__ = ["MorphingChartEngine"]

log = logging.getLogger(__name__)


class MorphingChartEngine:
    def __init__(
        self,
        *,
        values: Optional[Iterable[float]] = None,
        appearance: Optional[ChartAppearance] = None,
        padding: Optional[Padding] = None,
        scheduler: Optional[TickScheduler] = None,
        metrics_factory: MetricsFactory = qt_metrics_factory,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._appearance = appearance or ChartAppearance()
        self._padding = padding or Padding()
        self._metrics_factory = metrics_factory
        self._axis_metrics: Optional[TextMetrics] = None
        self._title_metrics: Optional[TextMetrics] = None
        self._animator = MorphAnimator(
            scheduler,
            step=self._appearance.animation_step,
            interval_ms=self._appearance.animation_interval_ms,
        )
        self.bus = bus or EventBus()
        self._values: List[float] = []
        self._bounds: Tuple[int, int] = (0, 0)
        self._last_frame: Optional[ChartFrame] = None
        self._hovered_index: Optional[int] = None
        if values is not None:
            self.set_values(values)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------
    @property
    def values(self) -> List[float]:
        return list(self._values)  # defensive copy

    def set_values(self, values: Iterable[float]) -> None:
        """Replace the whole value sequence.

        NaN and infinite entries are rejected with ``InvalidChartValueError``
        and the current sequence is kept.
        """
        new_values = [float(v) for v in values]
        bad = [v for v in new_values if not math.isfinite(v)]
        if bad:
            raise InvalidChartValueError(f"non-finite chart values: {bad[:3]!r}")
        self._values = new_values
        log.debug("values replaced (%d points)", len(new_values))
        self._update_left_padding()
        self.bus.publish(ChartEvent.VALUES_CHANGED, len(new_values))
        self.request_redraw()

    # ------------------------------------------------------------------
    # Chart kind / animation
    # ------------------------------------------------------------------
    @property
    def is_bar_chart(self) -> bool:
        return self._animator.is_bar_chart

    def set_bar_chart(self, value: bool) -> None:
        if self._animator.set_bar_chart(value):
            self.bus.publish(ChartEvent.MORPH_STARTED, self._animator.target)

    @property
    def progress(self) -> float:
        return self._animator.progress

    @property
    def animation_running(self) -> bool:
        return self._animator.running

    def attach_scheduler(self, scheduler: TickScheduler) -> None:
        self._animator.attach_scheduler(scheduler)

    def tick(self) -> bool:
        """Handle one scheduler tick; returns True while still morphing."""
        if not self._animator.running:
            return False
        keep_going = self._animator.tick()
        self.request_redraw()
        if not keep_going:
            self.bus.publish(ChartEvent.MORPH_SETTLED, self._animator.progress)
        return keep_going

    def finish_animation(self) -> None:
        """Jump straight to the requested chart kind."""
        was_running = self._animator.running
        self._animator.jump_to_target()
        self.request_redraw()
        if was_running:
            self.bus.publish(ChartEvent.MORPH_SETTLED, self._animator.progress)

    # ------------------------------------------------------------------
    # Appearance
    # ------------------------------------------------------------------
    @property
    def appearance(self) -> ChartAppearance:
        return self._appearance

    @property
    def padding(self) -> Padding:
        return self._padding

    def configure(self, **changes) -> None:
        """Apply option changes and their side effects.

        Invalid values raise ``ChartConfigError`` and unknown names raise
        ``TypeError``; in both cases nothing is applied.
        """
        updated = self._appearance.updated(**changes)
        changed = updated.changed_fields(self._appearance)
        if not changed:
            return
        self._appearance = updated
        log.debug("appearance changed: %s", ", ".join(sorted(changed)))
        if changed & STEP_FIELDS:
            self._animator.step = updated.animation_step
        if changed & TIMER_FIELDS:
            self._animator.interval_ms = updated.animation_interval_ms
        if changed & {"axis_font_family", "axis_font_size"}:
            self._axis_metrics = None
        if changed & PADDING_FIELDS:
            self._update_left_padding()
        if "show_values" in changed and updated.show_values:
            self._hide_tooltip()
        self.bus.publish(ChartEvent.APPEARANCE_CHANGED, changed)
        if changed - SILENT_FIELDS:
            self.request_redraw()

    def _axis_text_metrics(self) -> TextMetrics:
        if self._axis_metrics is None:
            a = self._appearance
            self._axis_metrics = self._metrics_factory(a.axis_font_family, a.axis_font_size, False)
        return self._axis_metrics

    def _title_text_metrics(self) -> TextMetrics:
        if self._title_metrics is None:
            self._title_metrics = self._metrics_factory(TITLE_FONT_FAMILY, TITLE_FONT_SIZE, True)
        return self._title_metrics

    def _update_left_padding(self) -> None:
        if not self._appearance.show_y_axis_labels:
            return
        required = layout.required_left_padding(
            self._values,
            self._axis_text_metrics(),
            show_y_labels=True,
            current=self._padding.left,
        )
        if required != self._padding.left:
            log.debug("left padding %d -> %d", self._padding.left, required)
            self._padding = self._padding.with_left(required)
            self.bus.publish(ChartEvent.PADDING_CHANGED, required)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @property
    def bounds(self) -> Tuple[int, int]:
        return self._bounds

    def resize(self, width: int, height: int) -> None:
        self._bounds = (int(width), int(height))

    @property
    def last_frame(self) -> Optional[ChartFrame]:
        return self._last_frame

    def request_redraw(self) -> None:
        self.bus.publish(ChartEvent.REDRAW_REQUESTED)

    def build_frame(self, width: int, height: int) -> ChartFrame:
        return build_frame(
            self._values,
            self._appearance,
            self._padding,
            self._animator.progress,
            width,
            height,
            self._axis_text_metrics(),
            self._title_text_metrics(),
        )

    def render(self, painter, width: int, height: int) -> ChartFrame:
        """Paint one frame onto ``painter`` (a ``QPainter``) and keep its bars for hit-testing."""
        from .painter import paint_frame  # Qt painting only needed by real hosts

        self.resize(width, height)
        frame = self.build_frame(width, height)
        self._last_frame = frame
        paint_frame(painter, frame, self._appearance)
        return frame

    def remember_frame(self, frame: ChartFrame) -> None:
        """Use ``frame`` as the last drawn frame (hosts painting it themselves)."""
        self._bounds = (frame.width, frame.height)
        self._last_frame = frame

    # ------------------------------------------------------------------
    # Pointer handling
    # ------------------------------------------------------------------
    @property
    def hovered_index(self) -> Optional[int]:
        return self._hovered_index

    def hit_index(self, x: float, y: float) -> Optional[int]:
        width, height = self._bounds
        a = self._appearance
        area = layout.drawing_area(
            width, height, self._padding, title=a.chart_title, title_margin=a.title_margin
        )
        points = layout.point_positions(self._values, area, self._animator.progress)
        bars = self._last_frame.bars[: len(self._values)] if self._last_frame else []
        return hit_test(
            x,
            y,
            points,
            bars,
            threshold=a.tooltip_threshold,
            bar_dominant=is_bar_dominant(self._animator.is_bar_chart, self._animator.progress),
        )

    def handle_pointer(self, x: float, y: float) -> TooltipCommand:
        if self._appearance.show_values:
            # Permanent labels already show every value.
            return self._hide_tooltip()
        index = self.hit_index(x, y)
        if index is None:
            return self._hide_tooltip()
        self._hovered_index = index
        command = TooltipCommand(
            visible=True,
            text=tooltip_text(self._values[index]),
            position=(x, y),
            timeout_ms=self._appearance.tooltip_timeout_ms,
            index=index,
        )
        self.bus.publish(ChartEvent.TOOLTIP_SHOW, command)
        return command

    def handle_pointer_leave(self) -> TooltipCommand:
        return self._hide_tooltip()

    def _hide_tooltip(self) -> TooltipCommand:
        self._hovered_index = None
        self.bus.publish(ChartEvent.TOOLTIP_HIDE)
        return TooltipCommand.hide()
