"""Core charting types for the morphing chart.

Plain dataclasses only (no Qt import) so layout, hit-testing and frame
construction stay testable headless.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Tuple

__all__ = [
    "PointF",
    "ChartRect",
    "ValueRange",
    "Padding",
    "TextPlacement",
    "GlyphPlacement",
    "TickMark",
    "ChartFrame",
    "TooltipCommand",
    "InvalidChartValueError",
    "ChartConfigError",
    "TextMetrics",
    "MetricsFactory",
]

PointF = Tuple[float, float]


class TextMetrics(Protocol):  # pragma: no cover - structural only
    def width(self, text: str) -> float: ...

    def height(self, text: str) -> float: ...


# (family, point size, bold) -> metrics
MetricsFactory = Callable[[str, float, bool], TextMetrics]


class InvalidChartValueError(ValueError):
    """Raised when a value sequence contains NaN or infinite entries."""


class ChartConfigError(ValueError):
    """Raised when an appearance option is outside its accepted range."""


@dataclass(frozen=True)
class ChartRect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    def contains(self, x: float, y: float) -> bool:
        # Half-open: the right and bottom edges are outside.
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class ValueRange:
    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def straddles_zero(self) -> bool:
        return self.minimum < 0 < self.maximum


@dataclass(frozen=True)
class Padding:
    left: int = 40
    top: int = 20
    right: int = 20
    bottom: int = 40

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom

    def with_left(self, left: int) -> "Padding":
        return Padding(left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class TextPlacement:
    """Text positioned by the top-left corner of its measured box."""

    text: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class GlyphPlacement:
    """Single character drawn centred on (x, y) after rotating by ``rotation`` degrees."""

    char: str
    x: float
    y: float
    width: float
    height: float
    rotation: float = -90.0


@dataclass(frozen=True)
class TickMark:
    x: float
    y1: float
    y2: float


@dataclass
class ChartFrame:
    """Everything needed to paint one frame.

    Recomputed on every paint; the engine only keeps ``bars`` around so
    pointer events can be hit-tested against what was last drawn.
    """

    width: int
    height: int
    area: ChartRect
    raw_range: ValueRange
    drawing_range: ValueRange
    progress: float
    points: List[PointF] = field(default_factory=list)
    baseline_y: float = 0.0
    x_axis_y: float = 0.0
    y_labels: List[TextPlacement] = field(default_factory=list)
    x_ticks: List[TickMark] = field(default_factory=list)
    x_labels: List[TextPlacement] = field(default_factory=list)
    title: Optional[TextPlacement] = None
    bars: List[ChartRect] = field(default_factory=list)
    bar_alpha: int = 0
    line_alpha: int = 0
    show_line: bool = False
    value_labels: List[TextPlacement] = field(default_factory=list)
    value_glyphs: List[List[GlyphPlacement]] = field(default_factory=list)


@dataclass(frozen=True)
class TooltipCommand:
    """Instruction for the host: show ``text`` at ``position`` or hide."""

    visible: bool
    text: str = ""
    position: PointF = (0.0, 0.0)
    timeout_ms: int = 0
    index: Optional[int] = None

    @classmethod
    def hide(cls) -> "TooltipCommand":
        return cls(visible=False)
