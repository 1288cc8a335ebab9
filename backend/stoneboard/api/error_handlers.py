"""Error Handlers — global exception handlers for the Stoneboard API.

Invariants:
    - StoneboardError → structured JSON with error code, localized message, severity
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details
    - Internal detail (exc.message, tracebacks) goes to the log only

Design Decisions:
    - Three-layer handler: domain (StoneboardError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from stoneboard.config import get_settings
from stoneboard.core.errors import StoneboardError, ErrorSeverity
from stoneboard.core.language_strings import get_message

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_stoneboard_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_stoneboard_error_handler(app: FastAPI) -> None:
    """Register Stoneboard domain/infrastructure error handler."""

    @app.exception_handler(StoneboardError)
    async def stoneboard_error_handler(request: Request, exc: StoneboardError):
        """Handle all Stoneboard domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"StoneboardError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "stone_id": exc.context.stone_id,
                "host": exc.context.host,
            },
            exc_info=exc.http_status >= 500,
        )
        message = get_message(exc.code, get_settings().locale)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(message),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": get_message("INTERNAL_ERROR", get_settings().locale),
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": get_message("REQUEST_INVALID", get_settings().locale),
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
