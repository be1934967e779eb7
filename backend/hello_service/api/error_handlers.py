"""Error Handlers - global exception handlers, including the 404 fallback.

Invariants:
    - Unmatched path or unmatched method -> 404 {"error": "Not Found"}
    - HelloServiceError -> its http_status with {"error": message}
    - Other HTTP errors keep their status, body {"error": detail}
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - 405 folded into 404: the route table either has a (method, path) entry
      or it does not; clients see a single "Not Found" outcome
    - Extracted from main.py to keep the factory short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_service.core.errors import (
    HelloServiceError, InternalServiceError, RouteNotFoundError,
)
from hello_service.schemas.greeting import ErrorMessage

logger = logging.getLogger(__name__)

_UNMATCHED_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(exc: HelloServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HelloServiceError)
    async def service_error_handler(request: Request, exc: HelloServiceError):
        """Handle errors raised explicitly by route code."""
        logger.error(
            f"HelloServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register the fallback for routing mismatches and framework HTTP errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in _UNMATCHED_STATUSES:
            not_found = RouteNotFoundError(request.method, request.url.path)
            logger.info(
                "No route matched",
                extra={
                    "method": not_found.method,
                    "path": not_found.path,
                    "status_code": not_found.http_status,
                },
            )
            return _error_response(not_found)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorMessage(error=str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _error_response(InternalServiceError())
