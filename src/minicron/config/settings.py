"""Pydantic-based settings loaded from environment variables.

Every field maps to a ``MINICRON_``-prefixed env var (or ``.env`` entry).

Usage::

    from minicron.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the command-line scheduler."""

    model_config = SettingsConfigDict(
        env_prefix="MINICRON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- General ------------------------------------------------------------
    log_level: str = "INFO"

    # -- Scheduler ----------------------------------------------------------
    default_schedule: str = "* * * * *"
    # Added past each minute boundary so a wake-up never lands early
    tick_padding_ms: int = Field(default=101, gt=0, lt=1000)

    @field_validator("default_schedule", mode="before")
    @classmethod
    def strip_schedule(cls, value: object) -> object:
        """Drop surrounding whitespace/quotes commonly left in .env files."""
        if isinstance(value, str):
            return value.strip().strip("'\"")
        return value

    @property
    def tick_padding(self) -> float:
        """Padding in seconds."""
        return self.tick_padding_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
