"""Structured errors for field validation and variant extraction."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from functools import lru_cache
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class UnwrapError(RuntimeError):
    """Raised when unwrap()/expect() is called on the failure variant.

    Subclasses RuntimeError so callers catching the broader type keep working.
    """

    __slots__ = ("payload",)

    def __init__(self, message: str, payload: object = None) -> None:
        self.payload = payload
        super().__init__(message)


class ErrorCode(StrEnum):
    """Standard error codes for field validation failures."""
    REQUIRED = "REQUIRED"
    INVALID_TYPE = "INVALID_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_VALUE = "INVALID_VALUE"


# Substring of a pydantic error type -> code. Checked in order.
_PATTERN_CODES: dict[str, ErrorCode] = {
    "missing": ErrorCode.REQUIRED,
    "greater_than": ErrorCode.OUT_OF_RANGE,
    "less_than": ErrorCode.OUT_OF_RANGE,
    "too_short": ErrorCode.OUT_OF_RANGE,
    "too_long": ErrorCode.OUT_OF_RANGE,
    "multiple_of": ErrorCode.OUT_OF_RANGE,
    "pattern": ErrorCode.INVALID_FORMAT,
    "url": ErrorCode.INVALID_FORMAT,
    "email": ErrorCode.INVALID_FORMAT,
    "uuid": ErrorCode.INVALID_FORMAT,
    "parsing": ErrorCode.INVALID_TYPE,
    "_type": ErrorCode.INVALID_TYPE,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES.keys())


@lru_cache(maxsize=256)
def classify_error_type(error_type: str) -> ErrorCode:
    """Map a pydantic error type (e.g. ``int_parsing``) to an ErrorCode."""
    for pattern in _PATTERN_KEYS:
        if pattern in error_type:
            return _PATTERN_CODES[pattern]
    return ErrorCode.INVALID_VALUE


class FieldError(BaseModel):
    """A single validation failure attached to a field path.

    Frozen so it can be shared between Validation instances safely.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = Field(default="", description="Dotted path of the failing field, empty for model-level errors")
    message: str = Field(..., min_length=1)
    code: ErrorCode = ErrorCode.INVALID_VALUE

    @classmethod
    def create(cls, loc: str | Sequence[str | int], message: str, code: ErrorCode = ErrorCode.INVALID_VALUE) -> Self:
        """Build from a field name or a location path such as ('items', 0, 'qty')."""
        field = loc if isinstance(loc, str) else ".".join(str(part) for part in loc)
        return cls(field=field, message=message, code=code)

    def render(self) -> str:
        return f"{self.field}: {self.message}" if self.field else self.message

    __str__ = render
