"""Exception handlers mapping errors to HTTP responses.

Every error body has the shape ``{"message": str}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scribe.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error into its HTTP status."""
    status_code = _status_for(exc)

    if isinstance(exc, NotFoundError):
        # Same body for unknown IDs, malformed IDs and drafts
        message = f"{exc.resource} not found"
    elif isinstance(exc, NotAuthorizedError):
        message = f"Not authorized to modify this {exc.resource}"
    elif isinstance(exc, StoreError) or status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        message = SERVER_ERROR_MESSAGE
    else:
        message = str(exc)

    if status_code < 500:
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {message}")

    return _message(status_code, message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"{location}: {first['msg']}" if location else first["msg"]
    else:
        message = "Invalid request"
    return _message(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep framework-raised HTTP errors in the common body shape."""
    return _message(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
