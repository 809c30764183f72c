"""Lightweight configuration for hexworld."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library-wide defaults, overridable through ``HEXWORLD_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEXWORLD_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    hex_size: float = Field(
        default=1.0,
        description="World-space size of a hex when callers do not pass one",
        gt=0.0,
    )
    strict_direction_index: bool = Field(
        default=False,
        description="Raise on out-of-range direction indices instead of clamping them",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
