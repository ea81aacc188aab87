"""Status bar layout, rendering and Textual integration.

The Textual widget lives in :mod:`statusbar.tui.widgets` and is not
imported here, so the rendering engine and the CLI load without textual.
"""

from .buffer import Buffer, Cell, Rect
from .components import Section, StatusBar
from .render import render

__all__ = [
    "Buffer",
    "Cell",
    "Rect",
    "Section",
    "StatusBar",
    "render",
]
