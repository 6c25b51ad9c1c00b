"""Application layer: settings persistence for the demo launcher."""

from .config_store import (  # noqa: F401
    ChartSettings,
    load_settings,
    save_settings,
    SETTINGS_VERSION,
)

__all__ = [
    "ChartSettings",
    "load_settings",
    "save_settings",
    "SETTINGS_VERSION",
]
