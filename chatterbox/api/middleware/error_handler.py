"""
Error Handler Middleware

Maps exceptions escaping a handler to the JSON error body. Handlers never
build error responses themselves; they raise.

Error Response Format:
======================
    {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "User validation failed: username",
            "details": {
                "errors": [
                    {"field": "username", "value": "", "message": "a unique username is required"}
                ]
            }
        }
    }

Exception Handling:
===================
1. ChatterboxException subclasses → Use their status_code and to_dict()
2. Request body/query validation → 400 with validation details
3. Other exceptions → 500 with generic message (details hidden)

Request validation errors are reported without the submitted input, since
that input may be a password.

Usage:
======
    from chatterbox.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from chatterbox.shared.core.exceptions import ChatterboxException
from chatterbox.shared.core.logging import logger


def _public_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Strip submitted values from pydantic error entries."""
    return [
        {key: value for key, value in error.items() if key not in ("input", "ctx", "url")}
        for error in jsonable_encoder(errors)
    ]


def _validation_response(errors: Sequence[Any]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": _public_errors(errors)},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the handlers below on app."""

    @app.exception_handler(ChatterboxException)
    async def chatterbox_exception_handler(
        request: Request,
        exc: ChatterboxException,
    ) -> JSONResponse:
        """
        Answer with the exception's own status, code and details.

        Field values of secret rules are already redacted in details.
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request parsing errors.

        These occur when the request body or parameters don't match the
        expected schema.
        """
        logger.warning(
            "Request validation error",
            fields=[".".join(str(part) for part in error["loc"]) for error in exc.errors()],
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised inside handlers.
        """
        logger.warning(
            "Validation error",
            fields=[".".join(str(part) for part in error["loc"]) for error in exc.errors()],
            path=request.url.path,
        )
        return _validation_response(exc.errors())

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Anything else is a 500; the cause is logged, never returned."""
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
