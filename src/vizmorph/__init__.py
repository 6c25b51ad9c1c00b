"""VizMorph public API.

A chart widget that morphs between a line chart and a bar chart of the same
value sequence.

Design Principles:
- Keep exports minimal & stable; prefer namespaced access for internals
  (e.g. `from vizmorph.charting import layout`).
- Avoid side-effect heavy imports (no implicit QApplication creation).
"""

from __future__ import annotations

from .charting import (  # noqa: F401
    ChartAppearance,
    ChartConfigError,
    InvalidChartValueError,
    MorphingChartEngine,
)
from .components import MorphingChartWidget  # noqa: F401
from .services.event_bus import ChartEvent, EventBus  # noqa: F401

__all__ = [
    "ChartAppearance",
    "ChartConfigError",
    "InvalidChartValueError",
    "MorphingChartEngine",
    "MorphingChartWidget",
    "ChartEvent",
    "EventBus",
]

__version__ = "0.1.0"
