"""Textual widgets."""

from .status_bar import StatusBarWidget

__all__ = ["StatusBarWidget"]
