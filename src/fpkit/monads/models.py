"""Bridge from pydantic model validation to Validation.

pydantic already reports every failing field at once, which is exactly the
accumulation Validation models. validate_model turns a raised
ValidationError into Invalid([FieldError, ...]) so it composes with
combine/lift.

Example:
    >>> from pydantic import BaseModel
    >>> class User(BaseModel):
    ...     name: str
    ...     age: int
    >>> validate_model(User, {"name": "ada", "age": 36}).is_valid()
    True
    >>> [e.field for e in validate_model(User, {}).errors()]
    ['name', 'age']
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..foundation.errors import FieldError, classify_error_type
from ..observability import get_logger
from .validation import Validation

M = TypeVar("M", bound=BaseModel)


def field_errors(exc: ValidationError) -> list[FieldError]:
    """One FieldError per pydantic error, in pydantic's reporting order."""
    return [
        FieldError.create(err["loc"], err["msg"], classify_error_type(err["type"]))
        for err in exc.errors()
    ]


def validate_model(model_cls: type[M], data: Any) -> Validation[M, FieldError]:
    """Validate data against model_cls, returning Valid(model) or Invalid(field errors)."""
    try:
        model = model_cls.model_validate(data)
    except ValidationError as e:
        errs = field_errors(e)
        get_logger("fpkit.models").debug(
            "model validation failed", model=model_cls.__name__, error_count=len(errs),
        )
        return Validation(errs, False)
    return Validation(model, True)
