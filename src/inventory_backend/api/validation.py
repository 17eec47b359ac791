"""Pure input validation helpers.

Validators never raise across the handler boundary: they return a
:class:`ValidationResult` carrying either the normalized value or the list of
field errors that explain why the candidate was rejected.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from inventory_backend.api.models.envelope import FieldError

T = TypeVar("T")

INVALID_ID_MESSAGE = "Invalid ID"
MAX_IDENTIFIER = 2**31 - 1

_IDENTIFIER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_REQUEST_LOCATIONS = {"body", "path", "query"}


@dataclass(slots=True, frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating one candidate input."""

    value: T | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Convert pydantic error dictionaries into :class:`FieldError` entries."""
    converted = []
    for entry in errors:
        location = [str(part) for part in entry.get("loc", ())]
        if entry.get("type") == "json_invalid":
            location = ["body"]
        elif len(location) > 1 and location[0] in _REQUEST_LOCATIONS:
            location = location[1:]
        converted.append(
            FieldError(field=".".join(location) or "body", message=entry["msg"])
        )
    return converted


def validate(schema: type[BaseModel], candidate: Any) -> ValidationResult[dict[str, Any]]:
    """Check ``candidate`` against ``schema``.

    The normalized record holds only the fields the caller supplied, so the
    same function serves full creation schemas and partial update schemas.
    """
    try:
        model = schema.model_validate(candidate)
    except ValidationError as exc:
        return ValidationResult(errors=field_errors(exc.errors()))
    return ValidationResult(value=model.model_dump(exclude_unset=True))


def parse_identifier(raw: str) -> ValidationResult[int]:
    """Parse a base-10 integer path parameter."""
    candidate = raw.strip()
    if _IDENTIFIER_PATTERN.match(candidate):
        identifier = int(candidate, 10)
        if abs(identifier) <= MAX_IDENTIFIER:
            return ValidationResult(value=identifier)
    return ValidationResult(errors=[FieldError(field="id", message=INVALID_ID_MESSAGE)])


__all__ = [
    "INVALID_ID_MESSAGE",
    "ValidationResult",
    "field_errors",
    "parse_identifier",
    "validate",
]
