"""
Error handling for the FastAPI application.
Translates domain exceptions into HTTP responses and catches anything
unhandled, formatting every error consistently.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from tasktracker.application.dto.base_dto import ErrorResponseDTO
from tasktracker.domain.models.base import (
    AuthenticationError,
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    InternalError,
    ValidationError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"

# Checked in order; first match wins
STATUS_BY_EXCEPTION = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateEntityError, status.HTTP_409_CONFLICT),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    """Build the error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponseDTO(error=message, status=status_code).model_dump(),
        headers=headers
    )


def status_for(exc: DomainException) -> int:
    """Map a domain exception to its HTTP status."""
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions.
    Logs the traceback server-side and returns a generic 500 response.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Translate typed domain errors to their fixed HTTP status."""
    status_code = status_for(exc)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s on %s %s", exc.code, request.method, request.url.path)
        return error_response(status_code, GENERIC_ERROR_MESSAGE)

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return error_response(status_code, exc.message, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures are client errors: report the first problem as a 400."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")
        )
        detail = first.get("msg", "invalid value")
        message = f"{location}: {detail}" if location else detail

    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework HTTP errors (unknown routes, wrong methods) in the envelope."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"The path {request.url.path} was not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"

    return error_response(exc.status_code, message, getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
