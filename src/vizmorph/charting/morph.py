"""Line↔bar morph animation controller.

The animation is a single scalar ``progress`` in [0, 1] stepped toward a
target on every scheduler tick:

    line-settled (0) <-- morphing (0 < p < 1) --> bar-settled (1)

``advance`` is the pure transition; ``MorphAnimator`` owns the state and
starts/stops a ``TickScheduler`` so no ticks are spent once settled. The
scheduler is a protocol so tests drive ticks by hand while the widget plugs
in a ``QTimer``.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple

from .layout import EPSILON

__all__ = [
    "DEFAULT_INTERVAL_MS",
    "DEFAULT_STEP",
    "TickScheduler",
    "advance",
    "MorphAnimator",
]

log = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 16  # ~60 Hz
DEFAULT_STEP = 0.05


class TickScheduler(Protocol):  # pragma: no cover - structural only
    def start(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...

    def set_interval(self, interval_ms: int) -> None: ...

    def is_active(self) -> bool: ...


def advance(progress: float, is_bar_chart: bool, step: float) -> Tuple[float, bool]:
    """Step ``progress`` toward its target.

    Returns ``(new_progress, should_continue)``; ``should_continue`` is False
    once the target (1.0 for bars, 0.0 for lines) has been reached, and the
    settled progress is then exactly the target.
    """
    target = 1.0 if is_bar_chart else 0.0
    delta = step if is_bar_chart else -step
    new_progress = min(max(progress + delta, 0.0), 1.0)
    if abs(new_progress - target) < EPSILON:
        return target, False
    return new_progress, True


class MorphAnimator:
    def __init__(
        self,
        scheduler: Optional[TickScheduler] = None,
        *,
        step: float = DEFAULT_STEP,
        interval_ms: int = DEFAULT_INTERVAL_MS,
    ) -> None:
        self._scheduler = scheduler
        self._progress = 0.0
        self._is_bar_chart = False
        self._step = step
        self._interval_ms = interval_ms
        self._running = False

    # State --------------------------------------------------------------
    @property
    def progress(self) -> float:
        return self._progress

    @property
    def is_bar_chart(self) -> bool:
        return self._is_bar_chart

    @property
    def target(self) -> float:
        return 1.0 if self._is_bar_chart else 0.0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, value: float) -> None:
        self._step = value

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, value: int) -> None:
        self._interval_ms = value
        if self._scheduler is not None:
            self._scheduler.set_interval(value)

    def attach_scheduler(self, scheduler: TickScheduler) -> None:
        if self._scheduler is not None and self._running:
            self._scheduler.stop()
        self._scheduler = scheduler
        if self._running:
            scheduler.start(self._interval_ms)

    # Control ------------------------------------------------------------
    def set_bar_chart(self, value: bool) -> bool:
        """Request a chart kind. Returns True when the request changed the target.

        Re-requesting the current kind is a no-op. A change while morphing only
        redirects the target; progress is kept.
        """
        value = bool(value)
        if value == self._is_bar_chart:
            return False
        self._is_bar_chart = value
        if not self._running:
            self._running = True
            if self._scheduler is not None:
                self._scheduler.start(self._interval_ms)
        log.debug("morph toward %s from progress=%.3f", "bar" if value else "line", self._progress)
        return True

    def tick(self) -> bool:
        """Advance one step. Returns True while the animation should keep running."""
        if not self._running:
            return False
        self._progress, keep_going = advance(self._progress, self._is_bar_chart, self._step)
        if not keep_going:
            self.stop()
        return keep_going

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._scheduler is not None:
            self._scheduler.stop()
        log.debug("morph settled at progress=%.3f", self._progress)

    def jump_to_target(self) -> None:
        """Settle immediately at the current target."""
        self._progress = self.target
        self.stop()
