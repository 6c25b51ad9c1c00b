"""Charting core: layout, animation, frame construction, hit-testing.

Only ``painter``, ``text_metrics`` and ``export`` import Qt. The layout,
morph, labels, frame, hit-test, appearance and types modules are plain
Python and can be exercised without a paint device.
"""

from .appearance import ChartAppearance  # noqa: F401
from .engine import MorphingChartEngine  # noqa: F401
from .morph import MorphAnimator, TickScheduler, advance  # noqa: F401
from .types import (  # noqa: F401
    ChartConfigError,
    ChartFrame,
    ChartRect,
    InvalidChartValueError,
    Padding,
    TooltipCommand,
    ValueRange,
)
