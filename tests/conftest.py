"""Shared fixtures for the statusbar test suite."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator

import pytest
import structlog

from statusbar.config.settings import get_settings
from statusbar.tui.buffer import Buffer, Rect
from statusbar.tui.components.core.section import StatusBar


@pytest.fixture
def paint() -> Callable[..., Buffer]:
    """Render a bar into a fresh one-row buffer and return the buffer."""

    def _paint(bar: StatusBar, width: int, **buffer_kwargs) -> Buffer:
        area = Rect(0, 0, width, 1)
        buffer = Buffer(area, **buffer_kwargs)
        bar.render(area, buffer)
        return buffer

    return _paint


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep STATUSBAR_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("STATUSBAR_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo logging configuration done by a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
