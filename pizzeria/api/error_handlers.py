"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - PizzeriaError → its http_status with {"error": message, "code": code}
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - A failure is confined to its own request; handlers hold no state

Design Decisions:
    - Three-layer handler: domain (PizzeriaError), validation (Pydantic), catch-all
    - Extracted from main.py to keep the composition root small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pizzeria.core.errors import ErrorSeverity, PizzeriaError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_pizzeria_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_pizzeria_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(PizzeriaError)
    async def pizzeria_error_handler(request: Request, exc: PizzeriaError):
        """Handle all catalog domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"PizzeriaError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
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
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": "Invalid request data",
        "code": "VALIDATION_ERROR",
        "severity": ErrorSeverity.ERROR.value,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
