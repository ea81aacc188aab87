"""CLI module for statusbar."""

from statusbar.cli.main import app, main

__all__ = ["app", "main"]
