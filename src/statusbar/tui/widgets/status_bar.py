"""Textual widget hosting a :class:`StatusBar`."""

from __future__ import annotations

from typing import Optional

from textual.strip import Strip
from textual.widget import Widget

from ..buffer import Buffer, Rect
from ..components.core.section import SectionLike, StatusBar
from ..render import render


class StatusBarWidget(Widget):
    """Single-line status bar docked to the bottom of the screen.

    The bar is re-laid out on every paint, so resizing the terminal needs
    no extra handling.
    """

    DEFAULT_CSS = """
    StatusBarWidget {
        dock: bottom;
        height: 1;
        width: 100%;
        background: $panel;
        color: $text;
    }
    """

    def __init__(
        self,
        bar: Optional[StatusBar] = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ):
        """Initialize the widget.

        Args:
            bar: The status bar to display; defaults to an empty single-section bar
        """
        super().__init__(name=name, id=id, classes=classes)
        self._bar = bar if bar is not None else StatusBar(1)

    @property
    def bar(self) -> StatusBar:
        return self._bar

    def update_bar(self, bar: StatusBar) -> None:
        """Replace the displayed bar."""
        self._bar = bar
        self.refresh()

    def set_section(self, index: int, content: SectionLike) -> StatusBar:
        """Set one section of the displayed bar and repaint."""
        self._bar.section(index, content)
        self.refresh()
        return self._bar

    def render_line(self, y: int) -> Strip:
        width = self.size.width
        base_style = self.rich_style
        if y != 0:
            return Strip.blank(width, base_style)

        area = Rect(0, 0, width, 1)
        buffer = Buffer(area, style=base_style)
        render(area, self._bar, buffer)
        return Strip(buffer.line_segments(0), width)
