"""fpkit - composable Result, Option and Validation types for Python.

Failure and absence are values, not exceptions. Three small tagged unions
cover the common cases, plus combinators to wire functions together.

Quick Start:
    >>> from fpkit import Ok, Err, pipe
    >>>
    >>> def parse_port(raw: str):
    ...     return Ok(int(raw)) if raw.isdigit() else Err(f"not a port: {raw!r}")
    >>>
    >>> pipe("8080", parse_port, lambda r: r.map(lambda p: p + 1))
    Ok(8081)

Accumulating errors:
    >>> from fpkit import Valid, Invalid, lift
    >>> lift(lambda a, b: a + b, [Invalid(["a required"]), Invalid(["b required"])])
    Invalid(['a required', 'b required'])

Optional values:
    >>> from fpkit import from_mapping
    >>> from_mapping({"host": "localhost"}, "port").to_result("port missing")
    Err('port missing')

Per-type functional API (mirrors the methods, value first):
    >>> from fpkit.monads import result as R
    >>> R.fold(R.ok(1), lambda v: v, lambda e: 0)
    1
"""

from .foundation import (
    ErrorCode,
    FieldError,
    FpkitSettings,
    UnwrapError,
    clear_settings_cache,
    get_settings,
)
from .functions import arrays, compose, group_by, identity, index_by, partial, pipe, reduce, tap, trace
from .monads import (
    Err,
    Invalid,
    Ok,
    Option,
    Result,
    Some,
    Valid,
    Validation,
    attempt,
    collect_results,
    combine,
    ensure,
    err,
    field_errors,
    from_mapping,
    from_nullable,
    from_result,
    invalid,
    lift,
    none,
    ok,
    option,
    result,
    sequence,
    some,
    traverse,
    valid,
    validate_model,
    validation,
)
from .observability import configure_logging, get_logger, log_context

__version__ = "0.1.0"

__all__ = [
    # Result
    "Result", "Ok", "Err", "ok", "err", "sequence", "traverse", "collect_results", "attempt",
    # Option
    "Option", "Some", "some", "none", "from_nullable", "from_mapping",
    # Validation
    "Validation", "Valid", "Invalid", "valid", "invalid", "combine", "lift", "ensure", "from_result",
    "validate_model", "field_errors",
    # Functional API modules
    "result", "option", "validation", "arrays",
    # Composition
    "pipe", "compose", "tap", "partial", "identity", "trace",
    "reduce", "group_by", "index_by",
    # Errors
    "ErrorCode", "FieldError", "UnwrapError",
    # Config & logging
    "FpkitSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger", "log_context",
]
