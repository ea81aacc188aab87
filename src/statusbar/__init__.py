"""statusbar - a sectioned single-line status bar for terminal UIs.

Features:
- Any number of sections, laid out left to right across the available width
- Display-width aware truncation that never splits wide glyphs
- Optional separators, spacing and alignment per bar
- A Textual widget and a demo application
"""

import logging

from .errors import IndexOutOfBoundsError, StatusBarError
from .tui.buffer import Buffer, Cell, Rect
from .tui.components.core import Section, StatusBar, section_areas, split_widths
from .tui.render import render
from .tui.util.styled import (
    PlainContent,
    RichContent,
    SegmentContent,
    StyledContent,
    styled,
)

# Library default: stay silent until the host configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "StatusBar",
    "Section",
    "render",
    "split_widths",
    "section_areas",
    "Buffer",
    "Cell",
    "Rect",
    "StyledContent",
    "PlainContent",
    "RichContent",
    "SegmentContent",
    "styled",
    "StatusBarError",
    "IndexOutOfBoundsError",
]
