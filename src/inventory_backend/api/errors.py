"""Application-level exception handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_backend.api.models import error, fail
from inventory_backend.api.validation import field_errors

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """Render framework-level failures with the standard envelope."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return fail(errors=field_errors(exc.errors())).to_response(
            status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        envelope = (
            error(str(exc.detail))
            if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
            else fail(message=str(exc.detail))
        )
        return envelope.to_response(exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return error(INTERNAL_ERROR_MESSAGE).to_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )


__all__ = ["INTERNAL_ERROR_MESSAGE", "register_exception_handlers"]
