"""Chart settings persistence.

Stores the chart appearance and the requested chart kind as JSON so the
demo launcher can restore a configured chart.

Design principles:
- Pure logic (no Qt import) so it can be unit-tested headless.
- Explicit schema with version field to enable future migrations.
- Graceful fallback: missing, corrupt or incompatible files produce defaults instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any, Dict

from ..charting.appearance import ChartAppearance

__all__ = ["ChartSettings", "load_settings", "save_settings", "SETTINGS_VERSION"]

log = logging.getLogger(__name__)

SETTINGS_VERSION = 1  # Increment when structure changes

DEFAULT_FILENAME = "vizmorph_settings.json"


@dataclass(slots=True)
class ChartSettings:
    """Serializable chart settings.

    Attributes
    ----------
    version: Schema version for migration handling.
    appearance: Appearance options of the chart.
    is_bar_chart: Requested chart kind at startup.
    """

    version: int = SETTINGS_VERSION
    appearance: ChartAppearance = field(default_factory=ChartAppearance)
    is_bar_chart: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "appearance": self.appearance.to_dict(),
            "is_bar_chart": self.is_bar_chart,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChartSettings":
        appearance = data.get("appearance") or {}
        if not isinstance(appearance, dict):
            raise TypeError("appearance must be an object")
        return cls(
            version=int(data.get("version", SETTINGS_VERSION)),
            appearance=ChartAppearance.from_dict(appearance),
            is_bar_chart=bool(data.get("is_bar_chart", False)),
        )


def _resolve_path(path: str | Path | None) -> Path:
    if path is None:
        return Path.cwd() / DEFAULT_FILENAME
    p = Path(path)
    return p / DEFAULT_FILENAME if p.is_dir() else p


def load_settings(path: str | Path | None = None) -> ChartSettings:
    """Load chart settings from a file (or a directory holding the default file name)."""
    target = _resolve_path(path)
    if not target.exists():
        return ChartSettings()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
        settings = ChartSettings.from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        # ChartConfigError is a ValueError: out-of-range options also fall back.
        log.warning("ignoring unreadable settings file %s: %s", target, exc)
        return ChartSettings()
    if settings.version != SETTINGS_VERSION:
        log.warning(
            "settings version %s != %s, using defaults", settings.version, SETTINGS_VERSION
        )
        return ChartSettings()
    return settings


def save_settings(settings: ChartSettings, path: str | Path | None = None) -> Path:
    """Persist settings; returns the path written."""
    target = _resolve_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_suffix(target.suffix + ".tmp")
    tmp.write_text(json.dumps(settings.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(target)
    return target
