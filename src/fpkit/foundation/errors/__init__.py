"""Error types for fpkit.

- UnwrapError: raised when a value is extracted from the wrong variant
- ErrorCode: standard codes for field-level validation failures
- FieldError: structured error payload carried by Invalid validations
"""

from .errors import ErrorCode, FieldError, UnwrapError, classify_error_type

__all__ = ["ErrorCode", "FieldError", "UnwrapError", "classify_error_type"]
