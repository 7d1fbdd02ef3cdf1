"""
Application exception handlers.

Every failure, whether a service error, a framework HTTP error or an
unexpected exception, is rendered as an ``ErrorResponse`` body.
"""
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from ..core.exceptions import MediaUploadError, get_http_status_code
from .models import ErrorResponse

logger = logging.getLogger(__name__)

# Fixed bodies for framework errors whose detail is not client-facing
HTTP_ERROR_MESSAGES = {
    status.HTTP_404_NOT_FOUND: ("Not found", "The requested resource was not found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method not allowed", None),
    status.HTTP_429_TOO_MANY_REQUESTS: ("Too many requests", None),
}


class ExceptionHandlerRegistry:
    """Registry for the application's exception handlers."""

    def __init__(self, debug: bool = False):
        """
        Initialize exception handler registry.

        Args:
            debug: Expose server error details to clients
        """
        self.debug = debug

    @staticmethod
    def format_error(error: str, details: Optional[str] = None) -> Dict[str, Any]:
        """Render an error body."""
        return ErrorResponse(error=error, details=details).model_dump()

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(MediaUploadError)
        async def media_upload_error_handler(request: Request, exc: MediaUploadError):
            """Handle service exceptions."""
            status_code = get_http_status_code(exc)
            details = exc.details

            if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
                logger.error(
                    f"{exc.message} on {request.method} {request.url.path}: {exc.to_dict()}",
                    exc_info=exc
                )
                if not self.debug:
                    details = None
            else:
                logger.info(f"Rejected {request.method} {request.url.path}: {exc.message} - {details}")

            return JSONResponse(
                status_code=status_code,
                content=self.format_error(exc.message, details)
            )

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            """Handle framework HTTP errors."""
            error, details = HTTP_ERROR_MESSAGES.get(exc.status_code, (str(exc.detail), None))
            return JSONResponse(
                status_code=exc.status_code,
                content=self.format_error(error, details),
                headers=getattr(exc, "headers", None)
            )

        @app.exception_handler(RequestValidationError)
        async def request_validation_error_handler(request: Request, exc: RequestValidationError):
            """Handle malformed requests."""
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=self.format_error("Invalid request", str(exc.errors()))
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=self.format_error(
                    "Internal server error",
                    str(exc) if self.debug else None
                )
            )


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """
    Register exception handlers for a FastAPI application.

    Args:
        app: FastAPI application instance
        debug: Expose server error details to clients
    """
    registry = ExceptionHandlerRegistry(debug)
    registry.register_handlers(app)
