"""
Main CLI entry point.

Wires the sub-commands together and configures logging before any of
them run.
"""

from typing import Optional

import typer

from statusbar.cli.commands.preview import preview
from statusbar.cli.commands.ui import check, demo
from statusbar.config.settings import get_settings
from statusbar.utils.logging import configure_from_settings, configure_logging

app = typer.Typer(
    name="statusbar",
    help="Sectioned single-line status bar for terminal UIs.",
    no_args_is_help=True,
)

app.command("demo")(demo)
app.command("preview")(preview)
app.command("check")(check)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level (debug|info|warning|error|critical)"
    ),
) -> None:
    """Configure logging for every command."""
    settings = get_settings()
    if log_level:
        configure_logging(
            level=log_level,
            output_format=settings.logging.output_format,
            color=settings.logging.color,
        )
    else:
        configure_from_settings(settings)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
