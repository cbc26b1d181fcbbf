"""Eager sequence transforms returning fresh lists and dicts.

Inputs are never mutated. A Mapping passed to filter/reduce/group_by/index_by
contributes its values, so results are reindexed from zero; map keeps the
keys of a Mapping.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Callable, TypeVar

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
K = TypeVar("K", bound=Hashable)


def _values(seq: Iterable[T] | Mapping[object, T]) -> Iterable[T]:
    return seq.values() if isinstance(seq, Mapping) else seq


def map(seq: Iterable[T] | Mapping[K, T], fn: Callable[[T], U]) -> list[U] | dict[K, U]:  # noqa: A001
    """Element-wise transform preserving length and order."""
    if isinstance(seq, Mapping):
        return {k: fn(v) for k, v in seq.items()}
    return [fn(x) for x in seq]


def filter(seq: Iterable[T] | Mapping[object, T], predicate: Callable[[T], bool]) -> list[T]:  # noqa: A001
    """Keep items satisfying predicate, in order, in a fresh contiguous list.

    Example:
        >>> filter([1, 2, 3, 4], lambda n: n % 2 == 0)
        [2, 4]
    """
    return [x for x in _values(seq) if predicate(x)]


def reduce(seq: Iterable[T] | Mapping[object, T], initial: A, fn: Callable[[A, T], A]) -> A:
    """Left fold: fn(...fn(fn(initial, x0), x1)..., xn). Empty input returns initial."""
    acc = initial
    for x in _values(seq):
        acc = fn(acc, x)
    return acc


def group_by(seq: Iterable[T] | Mapping[object, T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by key_fn, keeping item order within each group.

    Keys appear in first-seen order.
    """
    groups: dict[K, list[T]] = {}
    for x in _values(seq):
        groups.setdefault(key_fn(x), []).append(x)
    return groups


def index_by(seq: Iterable[T] | Mapping[object, T], key_fn: Callable[[T], K]) -> dict[K, T]:
    """Index items by key_fn. On duplicate keys the last item wins."""
    return {key_fn(x): x for x in _values(seq)}
