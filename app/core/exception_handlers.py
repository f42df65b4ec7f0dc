"""Global exception handlers for consistent error responses.

Every failure leaves the API as ``{"type": ..., "message": ...}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppException

logger = logging.getLogger("app.exception")

# Request parts that add nothing to a field path shown to clients
_LOCATION_PREFIXES = {"body", "query", "path"}


def _describe_validation_error(error: dict[str, Any]) -> str:
    field = ".".join(
        str(loc) for loc in error["loc"] if loc not in _LOCATION_PREFIXES
    )
    return f"{field}: {error['msg']}" if field else error["msg"]


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": exc.error_type,
    }
    if exc.status_code >= 500:
        logger.error("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    else:
        logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    return JSONResponse(
        status_code=exc.status_code,
        content={"type": exc.error_type, "message": exc.message},
    )


def http_exception_handler(
    _request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTPException raised by the framework (404 routes, 405, ...)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"type": "http_error", "message": str(exc.detail)},
    )


def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors with unified format.

    Closed enums (city, place type), email and URL formats, and length limits
    are all rejected here, before any handler touches the database.
    """
    message = "; ".join(_describe_validation_error(error) for error in exc.errors())
    logger.info(
        "Validation failed: %s",
        message,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": 422,
            "error_type": "validation_error",
        },
    )
    return JSONResponse(
        status_code=422,
        content={"type": "validation_error", "message": message},
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"type": "internal_error", "message": "An unexpected error occurred"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
