"""
TUI CLI commands.

Launch the demo application and check TUI dependencies.
"""

from typing import Optional

import typer

from statusbar.config.settings import LayoutSettings, get_settings


def demo(
    sections: Optional[int] = typer.Option(
        None, "--sections", "-n", min=0, help="Number of sections"
    ),
    spacing: Optional[int] = typer.Option(
        None, "--spacing", "-s", min=0, help="Blank columns between sections"
    ),
    align: Optional[str] = typer.Option(
        None, "--align", "-a", help="Content alignment (left|center|right)"
    ),
) -> None:
    """Launch the status bar demo."""
    defaults = get_settings().layout
    try:
        layout = LayoutSettings(
            sections=defaults.sections if sections is None else sections,
            spacing=defaults.spacing if spacing is None else spacing,
            align=defaults.align if align is None else align,
        )
    except ValueError as e:
        typer.echo(f"Invalid layout: {e}", err=True)
        raise typer.Exit(2)

    try:
        from statusbar.tui.app import launch
    except ImportError as e:
        typer.echo("=" * 50)
        typer.echo("  TUI dependencies not installed!")
        typer.echo("=" * 50)
        typer.echo("")
        typer.echo(f"  Error: {e}")
        typer.echo("")
        typer.echo("  Install them with:")
        typer.echo("    pip install textual rich")
        typer.echo("")
        raise typer.Exit(1)

    launch(layout)


def check() -> None:
    """Check if TUI dependencies are available."""
    dependencies = {
        "textual": "TUI framework",
        "rich": "Rich text rendering",
    }

    all_ok = True
    for pkg, desc in dependencies.items():
        try:
            __import__(pkg)
            typer.echo(f"✓ {pkg}: {desc}")
        except ImportError:
            typer.echo(f"✗ {pkg}: {desc} (not installed)")
            all_ok = False

    if all_ok:
        typer.echo("\n✓ All TUI dependencies are available")
        typer.echo("Run 'statusbar demo' to launch")
    else:
        typer.echo("\n✗ Some dependencies are missing")
        typer.echo("Install with: pip install textual rich")
        raise typer.Exit(1)
