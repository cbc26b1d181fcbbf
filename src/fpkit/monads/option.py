"""Option monad: a value that may be absent.

Some(value) holds a value, including None itself: ``Some(None)`` is present,
``none()`` is absent. The absent variant carries nothing; an error or
fallback is supplied only when converting (unwrap_or, to_result).

Example:
    >>> from fpkit.monads import option as O
    >>> O.from_mapping({"port": 8080}, "port").map(str).unwrap_or("80")
    '8080'
    >>> O.from_mapping({}, "port").to_result("port missing")
    Err('port missing')
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

from ..foundation.errors import UnwrapError
from .result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
R = TypeVar("R")


class Option(Generic[T]):
    """Discriminated union of Some(value) and none().

    Build with Some() / none(); the constructor is private. none() always
    returns the same instance.
    Match with ``case Option(True, value)``; none() only matches
    ``Option(False, _)``.
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_is_some", "_value")

    def __init__(self, value: T | None, is_some: bool) -> None:
        """Private constructor. Use Some() or none() instead."""
        self._value = value
        self._is_some = is_some

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the value. Raises UnwrapError on none()."""
        if self._is_some:
            return cast(T, self._value)
        raise UnwrapError("Called unwrap() on an empty Option")

    def expect(self, msg: str) -> T:
        """Extract the value, raising UnwrapError with msg on none()."""
        if self._is_some:
            return cast(T, self._value)
        raise UnwrapError(msg)

    def unwrap_or(self, default: U) -> T | U:
        return cast(T, self._value) if self._is_some else default

    def unwrap_or_else(self, f: Callable[[], U]) -> T | U:
        """Extract the value or compute a fallback lazily."""
        return cast(T, self._value) if self._is_some else f()

    # ─────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Some(v) -> Some(f(v)); none() passes through and f is not called."""
        if self._is_some:
            return Option(f(cast(T, self._value)), True)
        return cast(Option[U], self)

    def bind(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Some(v) -> f(v) where f returns an Option; none() passes through."""
        if self._is_some:
            return f(cast(T, self._value))
        return cast(Option[U], self)

    flat_map = bind

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep Some(v) only when predicate(v) holds."""
        if self._is_some and predicate(cast(T, self._value)):
            return self
        return _NOTHING

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if Some, otherwise other."""
        return self if self._is_some else other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some, otherwise the Option produced by f."""
        return self if self._is_some else f()

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """Call f with the value for side effects, return self."""
        if self._is_some:
            f(cast(T, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Conversion & Matching
    # ─────────────────────────────────────────────────────────────────

    def to_result(self, error_if_none: E) -> Result[T, E]:
        """Some(v) -> Ok(v); none() -> Err(error_if_none)."""
        return Ok(cast(T, self._value)) if self._is_some else Err(error_if_none)

    ok_or = to_result

    def fold(self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Invoke exactly one callback. on_none takes no argument."""
        if self._is_some:
            return on_some(cast(T, self._value))
        return on_none()

    def match(self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:
        return self.fold(some, none)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_some

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "Nothing"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if not self._is_some:
            return not other._is_some
        return other._is_some and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_some, self._value)) if self._is_some else hash((False,))

    def __iter__(self) -> Iterator[T]:
        if self._is_some:
            yield cast(T, self._value)


_NOTHING: Option = Option(None, False)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option. Some(None) is still present."""
    return Option(value, True)


def none() -> Option[T]:
    """The empty Option (shared instance)."""
    return _NOTHING


some = Some


def from_nullable(value: T | None) -> Option[T]:
    """none() iff value is None. 0, "" and False are present values."""
    return _NOTHING if value is None else Option(value, True)


def from_mapping(container: Mapping[object, T] | Sequence[T], key: object) -> Option[T]:
    """Look key up by presence, not truthiness.

    A key mapped to None yields Some(None). Sequences accept a non-negative
    in-range int index.

    Example:
        >>> from_mapping({"a": None}, "a")
        Some(None)
        >>> from_mapping(["x", "y"], 5)
        Nothing
    """
    if isinstance(container, Mapping):
        return Option(container[key], True) if key in container else _NOTHING
    if (isinstance(container, Sequence) and isinstance(key, int) and not isinstance(key, bool)
            and 0 <= key < len(container)):
        return Option(container[key], True)
    return _NOTHING


# ═════════════════════════════════════════════════════════════════════════════
# Functional API
# ═════════════════════════════════════════════════════════════════════════════


def is_some(o: Option[T]) -> bool:
    return o.is_some()


def map(o: Option[T], fn: Callable[[T], U]) -> Option[U]:  # noqa: A001
    return o.map(fn)


def bind(o: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    return o.bind(fn)


def unwrap_or(o: Option[T], default: U) -> T | U:
    return o.unwrap_or(default)


def to_result(o: Option[T], error_if_none: E) -> Result[T, E]:
    return o.to_result(error_if_none)


def match_option(o: Option[T], on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
    """Invoke on_some with the value, or on_none with no arguments."""
    return o.fold(on_some, on_none)
