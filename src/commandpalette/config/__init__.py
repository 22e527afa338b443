"""Configuration helpers for the command palette."""

from .settings import (
    DEFAULT_HIGHLIGHT_PREFIX,
    DEFAULT_HIGHLIGHT_SUFFIX,
    Settings,
    SettingsManager,
)

__all__ = [
    "DEFAULT_HIGHLIGHT_PREFIX",
    "DEFAULT_HIGHLIGHT_SUFFIX",
    "Settings",
    "SettingsManager",
]
