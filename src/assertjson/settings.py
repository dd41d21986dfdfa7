"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for parsing, matching, and rendering.

    Values are read from ``ASSERTJSON_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSERTJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Matching
    strict_objects: bool = False  # report keys the expectation does not name

    # Rendering
    default_filename: str = "<string>"

    # Parser safety limits
    # Parsing recurses two frames per level; the ceiling stays under the
    # default interpreter recursion limit.
    max_depth: int = Field(default=256, ge=1, le=400)
    max_document_size: int = 5_000_000  # characters


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment (for tests)."""
    get_settings.cache_clear()
