"""
Error handling middleware for FastAPI.
Provides centralized exception handling and error responses.

Every error is rendered as ``{"success": false, "message": ..., "errors"?: {...}}``.
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.exceptions import AppError, UnavailableError, ValidationError

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "An unexpected error occurred"


def error_response(
    status_code: int,
    message: str,
    errors: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Build the JSON error envelope."""
    content: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def add_exception_handlers(app: FastAPI) -> None:
    """
    Add exception handlers to FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle custom AppError exceptions."""
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            f"{exc.__class__.__name__}: {exc.message}",
            extra={
                "status_code": exc.status_code,
                "path": request.url.path,
                "method": request.method
            }
        )

        # storage failures never leak driver text
        message = GENERIC_SERVER_ERROR if isinstance(exc, UnavailableError) else exc.message
        errors = exc.errors if isinstance(exc, ValidationError) else None
        return error_response(exc.status_code, message, errors)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies (invalid JSON, non-object body)."""
        logger.warning(
            f"Request validation error: {exc.errors()}",
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        return error_response(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        logger.warning(
            f"HTTP {exc.status_code}: {exc.detail}",
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            exc_info=True,
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_ERROR)
