"""Core component utilities: the section store and width layout."""

from .layout import section_areas, split_widths
from .section import ALIGNMENTS, Section, StatusBar

__all__ = [
    "ALIGNMENTS",
    "Section",
    "StatusBar",
    "section_areas",
    "split_widths",
]
