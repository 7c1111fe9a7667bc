"""
Exception handlers for the FastAPI application.

Every error leaves the API with the same envelope:
``{"error": true, "message": ..., "status_code": ...}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException

from balnearios_ai.core.domain.exceptions import DataStoreException, DomainException

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: Any, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": True, "message": message, "status_code": status_code, **extra},
    )


def _validation_details(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with the common envelope."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    response = _error_response(http_exc.status_code, http_exc.detail)
    if http_exc.headers:
        response.headers.update(http_exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors (body, path and query)."""
    if not isinstance(exc, RequestValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    details = _validation_details(list(exc.errors()))
    logger.warning(f"Validation error on {request.url.path}: {details}")
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", details=details)


async def pydantic_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle pydantic validation errors raised outside request parsing."""
    if not isinstance(exc, ValidationError):
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    details = _validation_details(list(exc.errors()))
    logger.warning(f"Pydantic validation error: {details}")
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, "Data validation error", details=details)


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle domain exceptions.

    DataStoreException maps to 503, any other domain error to 400.
    """
    if isinstance(exc, DataStoreException):
        logger.error(f"Data store failure on {request.method} {request.url.path}: {exc.message}")
        return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc.message, code=exc.code)

    if isinstance(exc, DomainException):
        logger.warning(f"Domain error on {request.url.path}: {exc.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, code=exc.code)

    return await global_exception_handler(request, exc)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
