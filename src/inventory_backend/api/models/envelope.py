"""Uniform response envelope shared by every endpoint."""

from __future__ import annotations

from typing import Any, Literal

from fastapi.responses import JSONResponse
from pydantic import BaseModel

EnvelopeStatus = Literal["success", "fail", "error"]


class FieldError(BaseModel):
    """A single invalid input location."""

    field: str
    message: str


class Envelope(BaseModel):
    """``{status, data|message|errors}`` wrapper; unset keys are omitted."""

    status: EnvelopeStatus
    data: Any = None
    message: str | None = None
    errors: list[FieldError] | None = None

    def to_response(
        self, status_code: int, headers: dict[str, str] | None = None
    ) -> JSONResponse:
        return JSONResponse(
            content=self.model_dump(mode="json", exclude_unset=True),
            status_code=status_code,
            headers=headers,
        )


def success(data: Any = None, *, message: str | None = None) -> Envelope:
    values: dict[str, Any] = {"status": "success"}
    if data is not None:
        values["data"] = data
    if message is not None:
        values["message"] = message
    return Envelope(**values)


def fail(
    *, message: str | None = None, errors: list[FieldError] | None = None
) -> Envelope:
    values: dict[str, Any] = {"status": "fail"}
    if message is not None:
        values["message"] = message
    if errors is not None:
        values["errors"] = errors
    return Envelope(**values)


def error(message: str) -> Envelope:
    return Envelope(status="error", message=message)


__all__ = ["Envelope", "EnvelopeStatus", "FieldError", "error", "fail", "success"]
