"""
Custom exception classes and JSON error handling.

Every error leaving the API has the shape ``{"error": "<message>"}``.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict
from starlette.exceptions import HTTPException as StarletteHTTPException


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


class BadRequestError(AppException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class RateLimitError(AppException):
    """Rate limit exceeded exception."""

    def __init__(
        self,
        detail: str = "Rate limit exceeded. Please try again later.",
        retry_after: Optional[int] = None,
    ):
        self.retry_after = retry_after
        super().__init__(status_code=429, detail=detail)


class InternalServerError(AppException):
    """Internal server error exception."""

    def __init__(self, detail: str = "An unexpected error occurred."):
        super().__init__(status_code=500, detail=detail)


class TranscriptError(InternalServerError):
    """Raised when a caption transcript cannot be produced for a video."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(detail=f"Could not fetch transcript: {reason}")


class SummarizationError(InternalServerError):
    """Raised when the generative-text service fails or returns unusable output."""


class ConfigurationError(InternalServerError):
    """Raised when the deployment is missing a required setting."""


def create_error_response(
    status_code: int,
    detail: str,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Create a JSON error response."""
    error = ErrorResponse(error=detail)
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        headers=headers,
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return its JSON body."""
    headers = None
    if isinstance(exc, RateLimitError) and exc.retry_after is not None:
        headers = {"Retry-After": str(exc.retry_after)}
    return create_error_response(exc.status_code, exc.detail, headers=headers)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing errors (404, 405) in the same JSON shape."""
    if exc.status_code == 405:
        detail = "Method not allowed"
    else:
        detail = str(exc.detail)
    return create_error_response(exc.status_code, detail, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """A body without a usable ``url`` string is a bad request."""
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return create_error_response(400, "URL is required")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so no unstructured fault reaches the client."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}: {exc}")
    return create_error_response(500, "An unexpected error occurred.")
