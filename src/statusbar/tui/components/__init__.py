"""Status bar components."""

from .core import Section, StatusBar

__all__ = ["Section", "StatusBar"]
