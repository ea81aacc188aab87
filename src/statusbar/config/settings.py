"""Settings for the status bar demo and CLI.

Values are read from ``STATUSBAR_``-prefixed environment variables, with
``__`` separating nested keys (``STATUSBAR_LAYOUT__SPACING=1``).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseModel):
    """Logging output options."""

    level: Literal["debug", "info", "warning", "error", "critical"] = "warning"
    output_format: Literal["text", "json"] = "text"
    color: bool = True

    @field_validator("level", "output_format", mode="before")
    @classmethod
    def _lowercase(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


class LayoutSettings(BaseModel):
    """Default geometry for bars built by the demo and CLI."""

    sections: int = Field(default=3, ge=0)
    spacing: int = Field(default=0, ge=0)
    align: Literal["left", "center", "right"] = "left"


class Settings(BaseSettings):
    """Top-level settings."""

    model_config = SettingsConfigDict(
        env_prefix="STATUSBAR_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()


def reload_settings() -> Settings:
    """Drop cached settings and load them again from the environment."""
    get_settings.cache_clear()
    return get_settings()
