"""Colour palette used by the demo application and CLI preview."""

from dataclasses import dataclass


@dataclass
class StatusBarTheme:
    """Dark palette with magenta accents."""

    name: str = "statusbar-dark"
    is_dark: bool = True

    primary: str = "#FF00FF"          # Magenta
    secondary: str = "#AA00FF"        # Purple
    accent: str = "#00FFFF"           # Cyan

    bg_base: str = "#121212"
    bg_subtle: str = "#242424"

    fg_base: str = "#FFFFFF"
    fg_muted: str = "#B0B0B0"
    fg_subtle: str = "#707070"

    success: str = "#00FF66"
    warning: str = "#FFAA00"
    error: str = "#FF3333"

    @property
    def separator(self) -> str:
        return self.fg_subtle

    def label_style(self, emphasis: bool = False) -> str:
        """Rich style string for a section label."""
        if emphasis:
            return f"bold {self.primary}"
        return self.fg_muted


_current_theme: StatusBarTheme = StatusBarTheme()


def get_theme() -> StatusBarTheme:
    """Get the current theme."""
    return _current_theme


def set_theme(theme: StatusBarTheme) -> None:
    """Set the current theme."""
    global _current_theme
    _current_theme = theme
