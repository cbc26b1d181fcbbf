"""Validation: a computation that accumulates every failure.

Where Result.bind stops at the first Err, combine/lift evaluate every input
and concatenate all errors in input order. Use Result for dependent steps,
Validation for independent checks whose failures should all be reported.

Example:
    >>> from fpkit.monads import validation as V
    >>> V.lift(lambda a, b: a + b, [V.valid(2), V.valid(3)])
    Valid(5)
    >>> V.lift(lambda a, b: a + b, [V.invalid(["a required"]), V.invalid(["b required"])])
    Invalid(['a required', 'b required'])
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from ..foundation.config import get_settings
from ..foundation.errors import UnwrapError
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


class Validation(Generic[T, E]):
    """Discriminated union of Valid(value) and Invalid(errors).

    Invalid holds an ordered list of errors; order and duplicates are kept.
    Callers only ever see copies of that list.
    Match with ``case Validation(True, value)`` or
    ``case Validation(False, errors)``.
    """

    __slots__ = ("_value", "_is_valid")
    __match_args__ = ("_is_valid", "_payload")

    def __init__(self, value: T | list[E], is_valid: bool) -> None:
        """Private constructor. Use Valid() or Invalid() instead."""
        self._value = value
        self._is_valid = is_valid

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_valid(self) -> bool:
        return self._is_valid

    def is_invalid(self) -> bool:
        return not self._is_valid

    # ─────────────────────────────────────────────────────────────────
    # Extraction
    # ─────────────────────────────────────────────────────────────────

    def errors(self) -> list[E]:
        """[] if valid, else a copy of the errors."""
        return [] if self._is_valid else list(cast("list[E]", self._value))

    def unwrap(self) -> T:
        """Extract the valid value. Raises UnwrapError carrying the errors otherwise."""
        if self._is_valid:
            return cast(T, self._value)
        raise UnwrapError(f"Called unwrap() on Invalid: {self._value!r}", self.errors())

    def unwrap_or(self, default: U) -> T | U:
        return cast(T, self._value) if self._is_valid else default

    @property
    def _payload(self) -> T | list[E]:
        # Bound by class patterns; errors are copied like errors() does.
        return cast(T, self._value) if self._is_valid else self.errors()

    # ─────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Validation[U, E]:
        """Valid(x) -> Valid(f(x)); Invalid passes through and f is not called."""
        if self._is_valid:
            return Validation(f(cast(T, self._value)), True)
        return cast(Validation[U, E], self)

    def map_errors(self, f: Callable[[E], F]) -> Validation[T, F]:
        """Apply f to each error of an Invalid; Valid passes through."""
        if self._is_valid:
            return cast(Validation[T, F], self)
        return Validation([f(e) for e in cast("list[E]", self._value)], False)

    # ─────────────────────────────────────────────────────────────────
    # Conversion & Matching
    # ─────────────────────────────────────────────────────────────────

    def to_result(self) -> Result[T, list[E]]:
        """Valid(x) -> Ok(x); Invalid(errs) -> Err(errs) with the whole list."""
        return Ok(cast(T, self._value)) if self._is_valid else Err(self.errors())

    def fold(self, on_valid: Callable[[T], R], on_invalid: Callable[[list[E]], R]) -> R:
        """Invoke exactly one callback; on_invalid receives the full error list."""
        if self._is_valid:
            return on_valid(cast(T, self._value))
        return on_invalid(self.errors())

    def match(self, *, valid: Callable[[T], R], invalid: Callable[[list[E]], R]) -> R:
        return self.fold(valid, invalid)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_valid

    def __repr__(self) -> str:
        variant = "Valid" if self._is_valid else "Invalid"
        return f"{variant}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validation):
            return NotImplemented
        return self._is_valid == other._is_valid and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        if self._is_valid:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Valid(value: T) -> Validation[T, E]:  # noqa: N802
    """Construct a successful Validation."""
    return Validation(value, True)


def Invalid(errors: Iterable[E]) -> Validation[T, E]:  # noqa: N802
    """Construct a failed Validation from any iterable of errors.

    The errors are copied into a fresh list; a Mapping contributes its values
    in order. An empty collection raises ValueError unless
    FPKIT_VALIDATION_ALLOW_EMPTY_INVALID is set.

    Raises:
        TypeError: If errors is a bare str/bytes
        ValueError: If errors is empty and empty Invalid is not allowed
    """
    if isinstance(errors, (str, bytes)):
        raise TypeError("invalid() expects a collection of errors, not a single string; wrap it in a list")
    errs = list(errors.values()) if isinstance(errors, Mapping) else list(errors)
    if not errs and not get_settings().validation.allow_empty_invalid:
        raise ValueError("invalid() requires at least one error")
    return Validation(errs, False)


valid = Valid
invalid = Invalid


def ensure(value: T, predicate: Callable[[T], bool], error: E) -> Validation[T, E]:
    """Valid(value) when predicate(value) holds, else Invalid([error]).

    Example:
        >>> ensure(3, lambda n: n > 0, "must be positive")
        Valid(3)
    """
    return Validation(value, True) if predicate(value) else Validation([error], False)


def from_result(r: Result[T, E]) -> Validation[T, E]:
    """Ok(v) -> Valid(v); Err(e) -> Invalid([e])."""
    return r.fold(lambda v: Validation(v, True), lambda e: Validation([e], False))


# ═════════════════════════════════════════════════════════════════════════════
# Functional API
# ═════════════════════════════════════════════════════════════════════════════


def is_valid(v: Validation[T, E]) -> bool:
    return v.is_valid()


def errors(v: Validation[T, E]) -> list[E]:
    """[] for Valid, otherwise the error list. Never None."""
    return v.errors()


def map(v: Validation[T, E], fn: Callable[[T], U]) -> Validation[U, E]:  # noqa: A001
    return v.map(fn)


def combine(validations: Iterable[Validation[Any, E]]) -> Validation[list[Any], E]:
    """Merge validations, accumulating every error.

    Inputs are visited in order without short-circuiting. If any is Invalid,
    the result is Invalid with all errors concatenated in input order and the
    valid values are dropped. Otherwise the result is Valid with the values
    in input order. No inputs gives Valid([]).

    Example:
        >>> combine([Valid(1), Invalid(["e1"]), Invalid(["e2", "e3"])])
        Invalid(['e1', 'e2', 'e3'])
    """
    values: list[Any] = []
    errs: list[E] = []
    for v in validations:
        if v._is_valid:
            values.append(v._value)
        else:
            errs.extend(cast("list[E]", v._value))
    return Validation(errs, False) if errs else Validation(values, True)


def lift(fn: Callable[..., U], validations: Iterable[Validation[Any, E]]) -> Validation[U, E]:
    """Apply fn to the values of all validations, or collect all their errors.

    The values are passed positionally, so fn's arity must match the number
    of validations; a mismatch raises whatever calling fn raises.
    """
    return combine(validations).map(lambda values: fn(*values))


def traverse(items: Iterable[T], f: Callable[[T], Validation[U, E]]) -> Validation[list[U], E]:
    """Validate every item with f and combine, accumulating all errors.

    Unlike result.traverse, f is called for every item.
    """
    return combine([f(item) for item in items])


def to_result(v: Validation[T, E]) -> Result[T, list[E]]:
    return v.to_result()


def match_validation(v: Validation[T, E], on_valid: Callable[[T], R], on_invalid: Callable[[list[E]], R]) -> R:
    """Invoke on_valid with the value, or on_invalid with the full error list."""
    return v.fold(on_valid, on_invalid)
