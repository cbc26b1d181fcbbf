"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    FpkitSettings,
    LoggingSettings,
    ValidationSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "FpkitSettings",
    "LoggingSettings",
    "ValidationSettings",
    "clear_settings_cache",
    "get_settings",
]
