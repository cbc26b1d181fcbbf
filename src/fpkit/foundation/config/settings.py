"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fpkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.validation.allow_empty_invalid
    False

    # Or with environment variables:
    # FPKIT_LOG_LEVEL=DEBUG
    # FPKIT_LOG_FORMAT=json
    # FPKIT_VALIDATION_ALLOW_EMPTY_INVALID=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors, None auto-detects a TTY")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ValidationSettings(BaseSettings):
    """Validation construction rules."""

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_VALIDATION_",
        extra="ignore",
    )

    allow_empty_invalid: bool = Field(
        default=False,
        description="Admit invalid([]) instead of raising ValueError",
    )


class FpkitSettings(BaseSettings):
    """Root settings for fpkit.

    Loads configuration from environment variables with FPKIT_ prefix.

    Example environment variables:
        FPKIT_DEBUG=true
        FPKIT_LOG_LEVEL=DEBUG
        FPKIT_VALIDATION_ALLOW_EMPTY_INVALID=true
    """

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FpkitSettings:
    """Get the global settings instance (cached)."""
    return FpkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
