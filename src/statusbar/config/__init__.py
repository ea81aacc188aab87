"""
Configuration module.

Pydantic-based settings loaded from ``STATUSBAR_`` environment variables.
"""

from statusbar.config.settings import (
    LayoutSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "LoggingSettings",
    "LayoutSettings",
    "get_settings",
    "reload_settings",
]
