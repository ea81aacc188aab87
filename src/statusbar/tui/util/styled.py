"""Styled content adapters.

The layout engine only needs something it can turn into Rich segments.
``StyledContent`` is that capability; plain strings, Rich ``Text`` and raw
segment sequences are adapted to it by :func:`styled`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Protocol, Union, runtime_checkable

from rich.console import Console
from rich.segment import Segment
from rich.style import Style
from rich.text import Text


@runtime_checkable
class StyledContent(Protocol):
    """Anything that can be rendered as a sequence of styled segments."""

    def segments(self) -> Iterable[Segment]:
        """Return the content as Rich segments."""
        ...


@lru_cache(maxsize=1)
def _style_console() -> Console:
    # Only used to resolve style names while rendering Text; never printed to.
    return Console(width=10_000, color_system="truecolor", legacy_windows=False)


@dataclass(frozen=True)
class PlainContent:
    """A plain string, optionally carrying a single style."""

    text: str
    style: Optional[Union[Style, str]] = None

    def segments(self) -> Iterable[Segment]:
        if not self.text:
            return []
        style = self.style
        if isinstance(style, str):
            style = Style.parse(style)
        return [Segment(self.text, style)]


@dataclass(frozen=True)
class RichContent:
    """A Rich ``Text`` value with its spans."""

    text: Text

    def segments(self) -> Iterable[Segment]:
        console = _style_console()
        rendered = self.text.render(console)
        if self.text.spans:
            return list(rendered)
        # Text.render ignores the base style when there are no spans.
        style = console.get_style(self.text.style, default=Style.null())
        return [Segment(segment.text, style) for segment in rendered if segment.text]


@dataclass(frozen=True)
class SegmentContent:
    """Segments that have already been rendered."""

    items: tuple[Segment, ...] = field(default_factory=tuple)

    def segments(self) -> Iterable[Segment]:
        return self.items


StyledLike = Union[StyledContent, str, Text, Segment, Iterable[Segment]]


def styled(value: Optional[StyledLike]) -> Optional[StyledContent]:
    """Convert a value into :class:`StyledContent`.

    Args:
        value: A string, Rich ``Text``, ``Segment``, iterable of segments,
            an existing ``StyledContent`` or ``None``

    Returns:
        The adapted content, or ``None`` when ``value`` is ``None``

    Raises:
        TypeError: If the value cannot be converted
    """
    if value is None:
        return None
    if isinstance(value, str):
        return PlainContent(value)
    if isinstance(value, Text):
        return RichContent(value)
    if isinstance(value, Segment):
        return SegmentContent((value,))
    if isinstance(value, StyledContent):
        return value
    if isinstance(value, Iterable):
        items = tuple(value)
        if all(isinstance(item, Segment) for item in items):
            return SegmentContent(items)
    raise TypeError(
        f"Cannot use {type(value).__name__!r} as status bar content"
    )
