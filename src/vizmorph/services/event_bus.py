"""Chart event bus.

Lightweight synchronous publish/subscribe used by the chart engine to hand
its outbound effects (redraw requests, tooltip commands, padding changes,
animation state) to whatever hosts it, without the engine importing the
host.

Goals:
 - No Qt dependency; handlers run synchronously on the publishing thread
 - Error isolation: one failing handler doesn't break the publish cycle
 - One-shot (once) subscriptions and cancellable handles

Everything runs on the UI thread, so no locking is done.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from time import perf_counter
from typing import Any, Dict, List, Protocol, Tuple

__all__ = [
    "ChartEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

log = logging.getLogger(__name__)


class ChartEvent(str, Enum):
    REDRAW_REQUESTED = "redraw_requested"
    VALUES_CHANGED = "values_changed"
    PADDING_CHANGED = "padding_changed"  # payload: required left padding (int)
    TOOLTIP_SHOW = "tooltip_show"  # payload: TooltipCommand
    TOOLTIP_HIDE = "tooltip_hide"
    MORPH_STARTED = "morph_started"  # payload: target progress
    MORPH_SETTLED = "morph_settled"  # payload: final progress
    APPEARANCE_CHANGED = "appearance_changed"  # payload: frozenset of field names


@dataclass
class Event:
    name: str
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _key(name: str | ChartEvent) -> str:
    return name.value if isinstance(name, ChartEvent) else name


class EventBus:
    """Synchronous event dispatcher.

    Handlers are snapshotted before dispatch so a handler can subscribe or
    unsubscribe while an event is being delivered.
    """

    def __init__(self) -> None:
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[Tuple[Event, BaseException]] = []

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(
        self, name: str | ChartEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = _key(name)
        sub = Subscription(event=key, handler=handler, once=once)
        self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        bucket = self._subs.get(sub.event)
        sub.active = False
        if not bucket:
            return
        for i, existing in enumerate(bucket):
            if existing is sub:
                bucket.pop(i)
                break
        if not bucket:
            self._subs.pop(sub.event, None)

    def clear(self) -> None:
        self._subs.clear()
        self._errors.clear()

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | ChartEvent, payload: Any = None) -> Event:
        key = _key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        subs = list(self._subs.get(key, ()))
        to_remove: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                self._errors.append((evt, exc))
                log.warning("handler for %s failed: %s", key, exc, exc_info=exc)
            else:
                if sub.once:
                    to_remove.append(sub)
        for sub in to_remove:
            self.unsubscribe(sub)
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | ChartEvent) -> int:
        return len(self._subs.get(_key(name), ()))

    def list_events(self) -> list[str]:
        return list(self._subs.keys())

    @property
    def errors(self) -> list[Tuple[Event, BaseException]]:
        return list(self._errors)
