"""Text utilities: styled content adapters and width-aware truncation."""

from .styled import PlainContent, RichContent, SegmentContent, StyledContent, styled
from .truncate import StyledCell, fit_cells, iter_cells, measure, truncate_text

__all__ = [
    "PlainContent",
    "RichContent",
    "SegmentContent",
    "StyledContent",
    "styled",
    "StyledCell",
    "fit_cells",
    "iter_cells",
    "measure",
    "truncate_text",
]
