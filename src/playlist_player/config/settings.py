"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages

DEFAULT_DEMO_TRACKS: tuple[str, ...] = ("Lofi Study", "Chillhop Beats", "Evening Jazz")


class PlaylistSettings(BaseModel):
    """Playlist behavior configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    shuffle_seed: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("shuffle_seed", "seed"),
    )
    allow_duplicates: bool = True


class DemoSettings(BaseModel):
    """Configuration of the bundled demo scenario."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    playlist_name: str = Field(
        default="My Chill Mix",
        validation_alias=AliasChoices("playlist_name", "name"),
    )
    tracks: tuple[str, ...] = Field(default=DEFAULT_DEMO_TRACKS)

    @field_validator("tracks", mode="before")
    @classmethod
    def validate_tracks(cls, v: tuple[str, ...] | list[str]) -> tuple[str, ...]:
        """Convert lists to tuples and require at least one track."""
        # JSON arrays from env vars arrive as lists
        if isinstance(v, list):
            v = tuple(v)
        if not v:
            raise ValueError(ErrorMessages.EMPTY_DEMO_TRACKS)
        return v


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - PLAYLIST__SHUFFLE_SEED, PLAYLIST__ALLOW_DUPLICATES (nested)
    - DEMO__PLAYLIST_NAME, DEMO__TRACKS (nested; tracks as a JSON array)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    playlist: PlaylistSettings = Field(default_factory=PlaylistSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
