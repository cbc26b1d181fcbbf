"""Result, Option and Validation: failure and absence as plain data.

- Result[T, E]: Ok(value) | Err(error), short-circuiting chains
- Option[T]: Some(value) | none(), presence without an error payload
- Validation[T, E]: Valid(value) | Invalid(errors), accumulating failures

Option and Validation convert into Result via to_result(); Result knows
nothing about either.

The per-type functional API lives in the submodules, whose names overlap
(``map``, ``bind``, ``to_result``), so import them as modules:

Example:
    >>> from fpkit.monads import result as R, option as O, validation as V
    >>> R.map(R.ok(2), lambda x: x + 1)
    Ok(3)
    >>> O.to_result(O.from_nullable(None), "missing")
    Err('missing')
    >>> V.combine([V.valid(1), V.valid(2)])
    Valid([1, 2])
"""

from . import option, result, validation
from .models import field_errors, validate_model
from .option import Option, Some, from_mapping, from_nullable, none, some
from .result import Err, Ok, Result, attempt, collect_results, err, ok, sequence, traverse
from .validation import Invalid, Valid, Validation, combine, ensure, from_result, invalid, lift, valid

__all__ = [
    # Submodules
    "result", "option", "validation",
    # Result
    "Result", "Ok", "Err", "ok", "err",
    "sequence", "traverse", "collect_results", "attempt",
    # Option
    "Option", "Some", "some", "none", "from_nullable", "from_mapping",
    # Validation
    "Validation", "Valid", "Invalid", "valid", "invalid",
    "combine", "lift", "ensure", "from_result",
    # pydantic bridge
    "validate_model", "field_errors",
]
