"""Appearance and behaviour options of the morphing chart.

``ChartAppearance`` is an explicit, immutable configuration record. Changes
go through ``ChartAppearance.updated(**changes)`` (validated copy) and the
engine looks up each changed field in the side-effect sets below to decide
what to recompute.

Colors are Qt color names or ``#rrggbb`` strings; fonts are kept as family
+ point size so the record stays Qt-free and JSON friendly.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, FrozenSet

from .morph import DEFAULT_INTERVAL_MS, DEFAULT_STEP
from .types import ChartConfigError

__all__ = [
    "ChartAppearance",
    "PADDING_FIELDS",
    "TIMER_FIELDS",
    "STEP_FIELDS",
    "SILENT_FIELDS",
    "TITLE_FONT_FAMILY",
    "TITLE_FONT_SIZE",
]

TITLE_FONT_FAMILY = "Arial"
TITLE_FONT_SIZE = 10.0

# Fields whose change requires recomputing the dynamic left padding.
PADDING_FIELDS: FrozenSet[str] = frozenset(
    {"axis_font_family", "axis_font_size", "show_y_axis_labels"}
)
TIMER_FIELDS: FrozenSet[str] = frozenset({"animation_interval_ms"})
STEP_FIELDS: FrozenSet[str] = frozenset({"animation_step"})
# Behaviour-only fields: no redraw needed.
SILENT_FIELDS: FrozenSet[str] = frozenset(
    {"animation_interval_ms", "animation_step", "tooltip_threshold", "tooltip_timeout_ms"}
)


@dataclass(frozen=True)
class ChartAppearance:
    """Named options with the control's defaults.

    Attributes
    ----------
    line_color, bar_color, axis_color, marker_color: Colors of the polyline,
        bars, axes/labels and marker outlines.
    marker_size: Marker diameter in pixels.
    axis_font_family, axis_font_size: Font for axis and value labels.
    animation_interval_ms: Period of the animation tick.
    animation_step: Progress increment per tick, in (0, 1].
    tooltip_threshold: Half-width in pixels of the point hit window.
    show_x_axis_labels, show_y_axis_labels: Axis label toggles.
    chart_title: Title text; empty means no title and no title margin.
    title_margin: Extra vertical space reserved below the title.
    tooltip_timeout_ms: How long a tooltip stays visible.
    show_values: Draw permanent value labels (and suppress tooltips).
    """

    line_color: str = "orangered"
    bar_color: str = "steelblue"
    axis_color: str = "black"
    marker_color: str = "orangered"
    marker_size: float = 6.0
    axis_font_family: str = "Arial"
    axis_font_size: float = 8.0
    animation_interval_ms: int = DEFAULT_INTERVAL_MS
    animation_step: float = DEFAULT_STEP
    tooltip_threshold: int = 6
    show_x_axis_labels: bool = True
    show_y_axis_labels: bool = True
    chart_title: str = ""
    title_margin: int = 20
    tooltip_timeout_ms: int = 1000
    show_values: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not 0 < self.animation_step <= 1:
            raise ChartConfigError(
                f"animation_step must be in (0, 1], got {self.animation_step!r}"
            )
        if self.animation_interval_ms <= 0:
            raise ChartConfigError("animation_interval_ms must be positive")
        if self.axis_font_size <= 0:
            raise ChartConfigError("axis_font_size must be positive")
        for name in ("marker_size", "tooltip_threshold", "tooltip_timeout_ms", "title_margin"):
            if getattr(self, name) < 0:
                raise ChartConfigError(f"{name} must not be negative")

    def updated(self, **changes: Any) -> "ChartAppearance":
        """Return a validated copy; unknown option names raise TypeError."""
        return replace(self, **changes)

    def changed_fields(self, other: "ChartAppearance") -> FrozenSet[str]:
        return frozenset(
            f.name for f in fields(self) if getattr(self, f.name) != getattr(other, f.name)
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChartAppearance":
        # Ignore unknown keys so older/newer settings files still load.
        known = {f.name: f for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                continue
            default = known[key].default
            if isinstance(default, bool):
                kwargs[key] = bool(value)
            elif isinstance(default, int):
                kwargs[key] = int(value)
            elif isinstance(default, float):
                kwargs[key] = float(value)
            else:
                kwargs[key] = str(value)
        return cls(**kwargs)
