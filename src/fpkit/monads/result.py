"""Result monad: success (Ok) or failure (Err) as plain data.

Implements a discriminated union with the usual monadic operations:
- Functor: map, map_err
- Monad: bind (flat_map, and_then)
- Bifunctor: bimap
- Elimination: fold / match

Two calling styles are supported. Methods chain left to right::

    >>> Ok(5).bind(lambda x: Ok(x) if x > 0 else Err("neg")).map(lambda x: x * 2)
    Ok(10)

Module-level functions take the Result first, for use with pipe/partial::

    >>> from fpkit.monads import result as R
    >>> R.map(R.ok(5), lambda x: x * 2)
    Ok(10)
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    TypeVar,
    cast,
)

from ..foundation.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
R = TypeVar("R")  # Fold result type

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    Instances are immutable: every operation returns a new Result (or the
    receiver itself when it passes through unchanged). Build them with
    Ok()/Err() only.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Err("failed").map(lambda x: x * 2).unwrap_err()
        'failed'

    Class patterns bind the variant flag first, then the payload::

        match result:
            case Result(True, value): ...
            case Result(False, error): ...
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_is_ok", "_value")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | E = value
        self._is_ok: bool = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            UnwrapError: If Result is Err
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"Called unwrap() on Err value: {self._value!r}", self._value)

    def unwrap_err(self) -> E:
        """Extract Err value.

        Raises:
            UnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError(f"Called unwrap_err() on Ok value: {self._value!r}", self._value)

    def expect(self, msg: str) -> T:
        """Extract Ok value, raising UnwrapError with a custom message on Err."""
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(f"{msg}: {self._value!r}", self._value)

    def unwrap_or(self, default: U) -> T | U:
        """Extract Ok value or return default. Never invokes a callback."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], U]) -> T | U:
        """Extract Ok value or compute one from the error."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the Ok value; Err passes through and f is not called.

        Type signature: Result[T, E] -> (T -> U) -> Result[U, E]
        """
        if self._is_ok:
            return Result(f(cast(T, self._value)), _OK)
        return cast(Result[U, E], self)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the Err value; Ok passes through.

        Type signature: Result[T, E] -> (E -> F) -> Result[T, F]
        """
        if not self._is_ok:
            return Result(f(cast(E, self._value)), _ERR)
        return cast(Result[T, F], self)

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Apply ok_fn if Ok, err_fn if Err."""
        if self._is_ok:
            return Result(ok_fn(cast(T, self._value)), _OK)
        return Result(err_fn(cast(E, self._value)), _ERR)

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def bind(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=): chain an operation that can itself fail.

        f must return a Result, so chaining never nests. Err short-circuits.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     return Ok(int(s)) if s.isdigit() else Err(f"invalid int: {s}")
            >>> Ok("42").bind(parse_int)
            Ok(42)
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast(Result[U, E], self)

    flat_map = bind
    and_then = bind

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Err, apply f to recover. On Ok, pass through."""
        if not self._is_ok:
            return f(cast(E, self._value))
        return cast(Result[T, F], self)

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Result[Result[T, E], E] -> Result[T, E]"""
        if self._is_ok:
            return cast(Result[T, E], self._value)
        return cast(Result[T, E], self)

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with the Ok value for side effects, return self."""
        if self._is_ok:
            f(cast(T, self._value))
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with the Err value for side effects, return self."""
        if not self._is_ok:
            f(cast(E, self._value))
        return self

    # ─────────────────────────────────────────────────────────────────
    # Elimination
    # ─────────────────────────────────────────────────────────────────

    def fold(self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        """Invoke exactly one of the callbacks and return its result."""
        if self._is_ok:
            return on_ok(cast(T, self._value))
        return on_err(cast(E, self._value))

    def match(self, *, ok: Callable[[T], R], err: Callable[[E], R]) -> R:
        """Keyword form of fold.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        return self.fold(ok, err)

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        if self._is_ok:
            return (cast(T, self._value), None)
        return (None, cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yields the Ok value, nothing for Err."""
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure)."""
    return Result(error, _ERR)


ok = Ok
err = Err


# ═════════════════════════════════════════════════════════════════════════════
# Functional API
# ═════════════════════════════════════════════════════════════════════════════


def is_ok(r: Result[T, E]) -> bool:
    return r.is_ok()


def map(r: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Ok(v) -> Ok(fn(v)); Err is returned unchanged without calling fn."""
    return r.map(fn)


def bind(r: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Ok(v) -> fn(v); Err is returned unchanged without calling fn."""
    return r.bind(fn)


def map_error(r: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Err(e) -> Err(fn(e)); Ok is returned unchanged."""
    return r.map_err(fn)


def unwrap_or(r: Result[T, E], default: U) -> T | U:
    return r.unwrap_or(default)


def fold(r: Result[T, E], on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
    """Invoke on_ok with the value or on_err with the error, return its result."""
    return r.fold(on_ok, on_err)


match_result = fold


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """[Result[T, E]] -> Result[[T], E]. Fails fast on the first Err.

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> sequence([Ok(1), Err("fail"), Ok(3)])
        Err('fail')
    """
    values: list[T] = []
    for r in results:
        if not r._is_ok:
            return cast(Result[list[T], E], r)
        values.append(cast(T, r._value))
    return Result(values, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items and sequence the results. Stops calling f at the first Err."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return cast(Result[list[U], E], r)
        values.append(cast(U, r._value))
    return Result(values, _OK)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating ALL errors (not fail-fast).

    Example:
        >>> collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")])
        Err(['e1', 'e2'])
    """
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK) if not errors else Result(errors, _ERR)


def attempt(fn: Callable[..., T], *args: object, **kwargs: object) -> Result[T, Exception]:
    """Call fn, capturing a raised Exception as Err.

    The explicit boundary for turning exception-based code into data. The
    combinators themselves never catch.

    Example:
        >>> attempt(int, "42")
        Ok(42)
        >>> attempt(int, "x").is_err()
        True
    """
    try:
        return Result(fn(*args, **kwargs), _OK)
    except Exception as e:
        return Result(e, _ERR)
