"""Theme definitions."""

from .theme import StatusBarTheme, get_theme, set_theme

__all__ = ["StatusBarTheme", "get_theme", "set_theme"]
