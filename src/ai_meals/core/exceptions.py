"""Custom exceptions and exception handlers.

Every error leaving the API uses the same envelope::

    {"success": false, "error": "<message>", "timestamp": "<ISO-8601>"}

``timestamp`` is only present for failures that happened after the request
was accepted (generation failures, unexpected errors); request validation
failures omit it.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from ai_meals.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    success: bool = False
    error: str
    timestamp: datetime | None = None


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        include_timestamp: bool = True,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.include_timestamp = include_timestamp
        super().__init__(message)


class BadRequestException(AppException):
    """Request rejected before any work was done (400, no timestamp)."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            message,
            include_timestamp=False,
        )


class GenerationFailedException(AppException):
    """Recipe generation failed after validation passed."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)


class ServiceUnavailableException(AppException):
    """A required backing service has not been initialised."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, message)


def error_response(
    status_code: int,
    message: str,
    *,
    include_timestamp: bool = True,
) -> ORJSONResponse:
    """Build the standard error envelope response."""
    body = ErrorResponse(
        error=message,
        timestamp=datetime.now(UTC) if include_timestamp else None,
    )
    return ORJSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        _request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        return error_response(
            exc.status_code,
            exc.message,
            include_timestamp=exc.include_timestamp,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        _request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        _request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Report the first validation problem as a 400."""
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Validation failed"
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            message,
            include_timestamp=False,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        _request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error("Unhandled exception")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
        )
