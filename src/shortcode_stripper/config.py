"""Configuration management for Shortcode Stripper."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shortcode_stripper.core.stripper import DEFAULT_MARKERS, validate_marker
from shortcode_stripper.stores.folder_store import DEFAULT_EXTENSIONS


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shortcodes to strip, in processing order (JSON list in the environment)
    markers: tuple[str, ...] = Field(
        default=DEFAULT_MARKERS,
        alias="SHORTCODE_STRIPPER_MARKERS",
    )

    # File extensions treated as documents in folder stores
    extensions: tuple[str, ...] = Field(
        default=DEFAULT_EXTENSIONS,
        alias="SHORTCODE_STRIPPER_EXTENSIONS",
    )

    # Secret for signing admin action tokens (random per process if unset)
    secret: Optional[str] = Field(default=None, alias="SHORTCODE_STRIPPER_SECRET")

    log_level: str = Field(default="INFO", alias="SHORTCODE_STRIPPER_LOG_LEVEL")

    @field_validator("markers")
    @classmethod
    def _check_markers(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(validate_marker(name) for name in value)

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}"
            for ext in value
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
