"""Environment-driven settings for sparc-init.

Reads ``SPARC_*`` environment variables and an optional ``.env`` file through
pydantic-settings. Command-line flags take precedence over these values.

Examples:
    >>> SparcSettings(_env_file=None, log_level="debug").log_level
    'DEBUG'
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TEMPLATE_VERSION = "1.0.0"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SparcSettings(BaseSettings):
    """Settings for the scaffolder.

    Fields
    ──────
    template_version  : Version stamped into every generated document
    log_level         : structlog level
    log_json          : Emit JSON log lines instead of console output
    custom_modes_file : YAML modes definition copied to ``.roomodes``
    template_dir      : Override directory for the Jinja2 templates
    """

    model_config = SettingsConfigDict(
        env_prefix="SPARC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    template_version: str = TEMPLATE_VERSION
    log_level: str = "WARNING"
    log_json: bool = False

    custom_modes_file: Path | None = Field(
        default=None,
        description="custom_modes.yaml copied to .roomodes when it exists",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Directory containing replacement templates",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def _cached_settings() -> SparcSettings:
    return SparcSettings()


def get_settings(*, _force_reload: bool = False) -> SparcSettings:
    """Return the process-wide settings instance."""
    if _force_reload:
        _cached_settings.cache_clear()
    return _cached_settings()


def reset_settings() -> None:
    """Drop the cached settings (used by tests)."""
    _cached_settings.cache_clear()


__all__ = ["SparcSettings", "TEMPLATE_VERSION", "get_settings", "reset_settings"]
