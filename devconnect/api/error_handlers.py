"""
Global exception handlers.

DomainError subclasses render as ``{"error": {"code", "message", "details"?}}``
with their own HTTP status. Request validation failures render in the same
envelope with field-level details. Anything else is a 500 that never exposes
internal details.
"""

# Standard library imports
import logging
from typing import Any, Dict, List

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..core.errors import DomainError, StorageFailure

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        if isinstance(exc, StorageFailure):
            logger.error(
                f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
                exc_info=exc,
            )
        else:
            logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = _build_validation_details(exc.errors())
        logger.info(f"Validation error on {request.url.path}: {details}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "; ".join(detail["message"] for detail in details) or "Invalid request",
                    "details": details,
                }
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; the client only ever sees a generic message."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )


def _build_validation_details(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors to ``{field, message}`` pairs

    The leading ``body``/``path``/``query`` location is dropped so the field
    name matches the JSON key the client sent.
    """
    details = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in ("body", "path", "query", "header"):
            location = location[1:]

        message = str(error.get("msg", "Invalid value"))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]

        details.append({"field": ".".join(location) or "body", "message": message})
    return details
