"""Function combinators: pipe, compose, tap, partial.

pipe runs a value through functions left to right; compose builds a
function that applies them right to left.

Example:
    >>> pipe(2, lambda x: x + 1, lambda x: x * 3)
    9
    >>> compose(str, abs)(-4)
    '4'
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ..observability import get_logger

if TYPE_CHECKING:
    from ..observability import BoundLogger, LogLevel

T = TypeVar("T")
R = TypeVar("R")


def identity(value: T) -> T:
    return value


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Apply fns to value in order: fns[-1](...fns[1](fns[0](value))).

    With no functions the value is returned unchanged.
    """
    for fn in fns:
        value = fn(value)
    return value


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Build x -> fns[0](fns[1](...fns[-1](x))), applying right to left.

    compose() with no functions is identity.
    """
    if not fns:
        return identity

    def composed(value: Any) -> Any:
        for fn in reversed(fns):
            value = fn(value)
        return value

    return composed


def tap(value: T, side_effect: Callable[[T], object]) -> T:
    """Call side_effect(value) once, discard its result, return value."""
    side_effect(value)
    return value


def partial(fn: Callable[..., R], *bound_args: Any, **bound_kwargs: Any) -> Callable[..., R]:
    """Pre-bind leading arguments: partial(f, a)(b, c) == f(a, b, c).

    Arity is not checked; a wrong argument count fails when fn is called.
    """
    return functools.partial(fn, *bound_args, **bound_kwargs)


def trace(label: str, *, level: LogLevel = "debug", log: BoundLogger | None = None) -> Callable[[T], T]:
    """A pipe step that logs the running value and passes it on unchanged.

    Example:
        >>> pipe(" Ada ", str.strip, trace("stripped"), str.lower)
        'ada'
    """
    def step(value: T) -> T:
        logger = log or get_logger("fpkit.pipe")
        return tap(value, lambda v: logger.log(level, label, value=repr(v)))

    return step
