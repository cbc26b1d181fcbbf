"""Tests for the Result monad.

Validates:
- Functor and monad laws
- Short-circuiting on Err
- The module-level functional API
- Collection operations
"""

from __future__ import annotations

from typing import Callable

import pytest

from fpkit.foundation.errors import UnwrapError
from fpkit.monads import result as R
from fpkit.monads.result import Err, Ok, Result, attempt, collect_results, sequence, traverse


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    result: Result[int, str] = Ok(5)

    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)

    assert Ok(42).bind(f) == f(42)
    assert R.bind(R.ok(42), R.ok) == R.ok(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = Ok(42)

    assert m.bind(lambda x: Ok(x)) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)

    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    """Test Ok variant construction and accessors."""
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert R.is_ok(result)


def test_err_construction() -> None:
    """Test Err variant construction and accessors."""
    result: Result[int, str] = Err("failed")

    assert not result.is_ok()
    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert not R.is_ok(result)


def test_lowercase_constructors_match() -> None:
    """ok/err are the same constructors as Ok/Err."""
    assert R.ok(1) == Ok(1)
    assert R.err("e") == Err("e")
    assert R.ok(None) != R.err(None)


def test_unwrap_on_wrong_variant_raises() -> None:
    """unwrap/unwrap_err/expect raise UnwrapError, a RuntimeError."""
    with pytest.raises(UnwrapError) as exc_info:
        Err("boom").unwrap()
    assert exc_info.value.payload == "boom"

    with pytest.raises(RuntimeError):
        Ok(1).unwrap_err()

    with pytest.raises(UnwrapError, match="loading config"):
        Err("missing").expect("loading config")


def test_map_ok() -> None:
    """Test map on Ok variant."""
    assert Ok(5).map(lambda x: x * 2) == Ok(10)
    assert R.map(R.ok(5), lambda x: x * 2) == R.ok(10)


def test_map_err_does_not_call_fn() -> None:
    """map on Err returns it unchanged without calling fn."""
    calls: list[int] = []

    def record(x: int) -> int:
        calls.append(x)
        return x

    result: Result[int, str] = Err("fail")

    assert R.map(result, record) == Err("fail")
    assert result.map(record) is result
    assert calls == []


def test_map_propagates_exceptions() -> None:
    """A raising fn is not caught by map."""
    with pytest.raises(ZeroDivisionError):
        Ok(1).map(lambda x: x / 0)


def test_map_error() -> None:
    """map_err transforms Err and leaves Ok alone."""
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")
    assert R.map_error(R.err("fail"), str.upper) == R.err("FAIL")
    assert R.map_error(R.ok(42), str.upper) == R.ok(42)


def test_bind_chains() -> None:
    """Test bind chaining Ok to Ok, Ok to Err and short-circuit on Err."""
    assert Ok(5).bind(lambda x: Ok(x * 2)) == Ok(10)
    assert Ok(5).bind(lambda x: Err("failed")) == Err("failed")
    assert R.bind(R.err("fail"), lambda x: Ok(x * 2)) == Err("fail")


def test_bind_aliases() -> None:
    """flat_map and and_then are bind."""
    result: Result[int, str] = Ok(5)
    step: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)

    assert result.flat_map(step) == result.and_then(step) == result.bind(step)


def test_bimap() -> None:
    """Test bimap on both variants."""
    assert Ok(5).bimap(lambda x: x * 2, lambda e: f"Error: {e}") == Ok(10)
    assert Err("fail").bimap(lambda x: x * 2, lambda e: f"Error: {e}") == Err("Error: fail")


def test_or_else() -> None:
    """or_else recovers from Err and ignores Ok."""
    assert Err("fail").or_else(lambda _: Ok(42)) == Ok(42)
    assert Ok(5).or_else(lambda _: Ok(42)) == Ok(5)


def test_unwrap_or() -> None:
    """Test unwrap_or on both variants."""
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10
    assert R.unwrap_or(R.err("x"), None) is None


def test_unwrap_or_else() -> None:
    """Test unwrap_or_else on both variants."""
    assert Ok(5).unwrap_or_else(lambda _: 10) == 5
    assert Err("fail").unwrap_or_else(len) == 4


def test_fold_calls_exactly_one_callback() -> None:
    """fold invokes one callback with its payload."""
    seen: list[str] = []

    def on_ok(v: int) -> str:
        seen.append("ok")
        return f"success: {v}"

    def on_err(e: str) -> str:
        seen.append("err")
        return f"failed: {e}"

    assert R.fold(R.ok(42), on_ok, on_err) == "success: 42"
    assert R.fold(R.err("x"), on_ok, on_err) == "failed: x"
    assert seen == ["ok", "err"]


def test_match_result_is_fold() -> None:
    """match_result shares fold's contract."""
    assert R.match_result is R.fold
    assert Ok(42).match(ok=lambda x: x + 1, err=lambda e: 0) == 43
    assert Err("e").match(ok=lambda x: x + 1, err=lambda e: 0) == 0


def test_inspect() -> None:
    """inspect/inspect_err run side effects and return self."""
    seen: list[object] = []
    ok_result: Result[int, str] = Ok(42)
    err_result: Result[int, str] = Err("fail")

    assert ok_result.inspect(seen.append) is ok_result
    assert ok_result.inspect_err(seen.append) is ok_result
    assert err_result.inspect_err(seen.append) is err_result
    assert seen == [42, "fail"]


def test_to_tuple() -> None:
    """Test conversion to tuple."""
    assert Ok(42).to_tuple() == (42, None)
    assert Err("fail").to_tuple() == (None, "fail")


def test_flatten() -> None:
    """Test flattening nested Result."""
    assert Ok(Ok(42)).flatten() == Ok(42)
    assert Ok(Err("fail")).flatten() == Err("fail")
    assert Err("outer").flatten() == Err("outer")


def test_dunders() -> None:
    """Truthiness, equality, hashing, repr and iteration."""
    assert bool(Ok(42)) is True
    assert bool(Err("fail")) is False
    assert Ok(42) != Ok(43)
    assert Ok(42) != Err(42)
    assert len({Ok(1), Ok(1), Err(1)}) == 2
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err("x")) == "Err('x')"
    assert list(Ok(42)) == [42]
    assert list(Err("fail")) == []


def test_pattern_matching() -> None:
    """Results destructure with match statements, variant flag first."""

    def describe(result: Result[int, int]) -> str:
        match result:
            case Result(True, value) if value > 2:
                return f"big {value}"
            case Result(True, value):
                return f"small {value}"
            case Result(False, error):
                return f"failed {error}"
        return "unreachable"

    assert describe(Ok(3)) == "big 3"
    assert describe(Ok(1)) == "small 1"
    assert describe(Err(5)) == "failed 5"


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_sequence() -> None:
    """sequence collects values and fails fast on the first Err."""
    assert sequence([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert sequence([Ok(1), Err("fail"), Err("later")]) == Err("fail")
    assert sequence([]) == Ok([])


def test_traverse_stops_at_first_err() -> None:
    """traverse does not call f after the first Err."""
    calls: list[str] = []

    def parse_int(s: str) -> Result[int, str]:
        calls.append(s)
        return Ok(int(s)) if s.isdigit() else Err(f"invalid: {s}")

    assert traverse(["1", "2", "3"], parse_int) == Ok([1, 2, 3])

    calls.clear()
    assert traverse(["1", "bad", "3"], parse_int) == Err("invalid: bad")
    assert calls == ["1", "bad"]


def test_collect_results() -> None:
    """collect_results accumulates all errors."""
    assert collect_results([Ok(1), Ok(2)]) == Ok([1, 2])
    assert collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")]) == Err(["e1", "e2"])


def test_attempt() -> None:
    """attempt turns a raised exception into Err."""
    assert attempt(int, "42") == Ok(42)

    failed = attempt(int, "nope")
    assert failed.is_err()
    assert isinstance(failed.unwrap_err(), ValueError)

    assert attempt(dict, a=1) == Ok({"a": 1})


# ═════════════════════════════════════════════════════════════════════════════
# Railway-Oriented Programming Patterns
# ═════════════════════════════════════════════════════════════════════════════


def _parse_int(s: str) -> Result[int, str]:
    try:
        return Ok(int(s))
    except ValueError:
        return Err(f"invalid: {s}")


def _validate_positive(n: int) -> Result[int, str]:
    return Ok(n) if n > 0 else Err("must be positive")


def test_railway_success_path() -> None:
    """Test railway-oriented success path."""
    result = Ok("42").bind(_parse_int).bind(_validate_positive).map(lambda n: n * 2)

    assert result == Ok(84)


def test_railway_error_path() -> None:
    """Test railway-oriented error path (short-circuit)."""
    assert Ok("bad").bind(_parse_int).bind(_validate_positive).map(lambda n: n * 2) == Err("invalid: bad")
    assert Ok("-5").bind(_parse_int).bind(_validate_positive).map(lambda n: n * 2) == Err("must be positive")


def test_fallback_chain() -> None:
    """Test fallback pattern with or_else."""
    def fetch_from_primary() -> Result[str, str]:
        return Err("primary unavailable")

    def fetch_from_cache() -> Result[str, str]:
        return Ok("cached data")

    result = (
        fetch_from_primary()
        .or_else(lambda _: Err("backup unavailable"))
        .or_else(lambda _: fetch_from_cache())
    )

    assert result == Ok("cached data")
