"""Foundation - shared building blocks for fpkit.

Contains: error types and configuration.
"""

from .config import FpkitSettings, clear_settings_cache, get_settings
from .errors import ErrorCode, FieldError, UnwrapError, classify_error_type

__all__ = [
    # Errors
    "ErrorCode", "FieldError", "UnwrapError", "classify_error_type",
    # Config
    "FpkitSettings", "get_settings", "clear_settings_cache",
]
