"""Demo application for the status bar widget.

Shows a bar docked to the bottom of the screen with a label, a hint and a
clock that ticks every second.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from ..config.settings import LayoutSettings, get_settings
from ..utils.logging import get_logger
from .components.core.section import Section, StatusBar
from .styles.theme import get_theme
from .widgets.status_bar import StatusBarWidget

log = get_logger(__name__)


def build_demo_bar(layout: LayoutSettings) -> StatusBar:
    """Build the bar shown by the demo from layout settings."""
    theme = get_theme()
    bar = StatusBar(layout.sections, spacing=layout.spacing, align=layout.align)
    if layout.sections == 0:
        return bar

    bar.section(
        0,
        Section()
        .with_pre_separator(Text(" ", style=theme.separator))
        .with_content(Text("statusbar", style=theme.label_style(emphasis=True)))
        .with_post_separator(Text(" │", style=theme.separator)),
    )
    if layout.sections > 2:
        bar.section(1, Text("press q to quit", style=theme.label_style()))
    return bar


class StatusBarDemoApp(App):
    """Textual application showing a live status bar."""

    TITLE = "statusbar"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, layout: Optional[LayoutSettings] = None):
        """Initialize the demo.

        Args:
            layout: Bar geometry; defaults to the configured settings
        """
        super().__init__()
        self.layout_settings = layout or get_settings().layout
        self.bar = build_demo_bar(self.layout_settings)

    def compose(self) -> ComposeResult:
        yield Static("Resize the terminal to watch the sections re-flow.", id="body")
        yield StatusBarWidget(self.bar, id="status")

    def on_mount(self) -> None:
        log.info(
            "demo_started",
            sections=self.bar.section_count,
            spacing=self.bar.spacing,
            align=self.bar.align,
        )
        self._tick()
        self.set_interval(1.0, self._tick)

    def _tick(self) -> None:
        if self.bar.section_count < 2:
            return
        theme = get_theme()
        now = Text(datetime.now().strftime("%H:%M:%S"), style=theme.accent)
        self.query_one(StatusBarWidget).set_section(self.bar.section_count - 1, now)


def launch(layout: Optional[LayoutSettings] = None) -> None:
    """Launch the demo application."""
    app = StatusBarDemoApp(layout=layout)
    app.run()


if __name__ == "__main__":
    launch()
