"""
Preview command.

Render a status bar once to standard output.
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.segment import Segments
from rich.text import Text

from statusbar.config.settings import get_settings
from statusbar.errors import StatusBarError
from statusbar.tui.buffer import Buffer, Rect
from statusbar.tui.components.core.section import StatusBar
from statusbar.utils.logging import get_logger

log = get_logger(__name__)


def preview(
    texts: List[str] = typer.Argument(..., help="Content of each section, left to right"),
    width: int = typer.Option(80, "--width", "-w", min=0, help="Width of the bar"),
    spacing: Optional[int] = typer.Option(
        None, "--spacing", "-s", min=0, help="Blank columns between sections"
    ),
    align: Optional[str] = typer.Option(
        None, "--align", "-a", help="Content alignment (left|center|right)"
    ),
    markup: bool = typer.Option(False, "--markup", "-m", help="Parse texts as Rich markup"),
) -> None:
    """Render a bar with one section per TEXT."""
    layout = get_settings().layout
    try:
        bar = StatusBar(
            len(texts),
            spacing=layout.spacing if spacing is None else spacing,
            align=layout.align if align is None else align,
        )
        for index, text in enumerate(texts):
            bar.section(index, Text.from_markup(text) if markup else text)
    except (StatusBarError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    area = Rect(0, 0, width, 1)
    buffer = Buffer(area)
    bar.render(area, buffer)
    log.info("preview_rendered", sections=bar.section_count, width=width)

    console = Console(width=max(width, 1), highlight=False, soft_wrap=True)
    console.print(Segments(buffer.line_segments(0)))
