"""
Validation — pydantic errors as per-field messages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from kungfu import Result, Ok, Error
from pydantic import BaseModel, ValidationError


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str


type FieldErrors = tuple[FieldError, ...]


def field_errors(exc: ValidationError) -> FieldErrors:
    return tuple(
        FieldError(".".join(str(part) for part in err["loc"]) or "__root__", err["msg"])
        for err in exc.errors()
    )


def validate[M: BaseModel](model: type[M], data: Mapping[str, Any]) -> Result[M, FieldErrors]:
    """
    Validate form data against a schema.

    Example:
        match validate(ContactForm, request):
            case Ok(contact):
                ...
            case Error(errors):
                for e in errors:
                    show(e.field, e.message)
    """
    try:
        return Ok(model.model_validate(dict(data)))
    except ValidationError as e:
        return Error(field_errors(e))


__all__ = ("FieldError", "FieldErrors", "field_errors", "validate")
