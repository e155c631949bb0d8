"""Mapping of errors to the JSON error envelope ``{success: false, message}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from domain.model.errors import (
    AuthenticationError,
    DependencyError,
    DomainError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; subclasses must precede their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (DependencyError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def domain_error_response(error: DomainError) -> tuple[int, str]:
    """Map a domain error to (status_code, message).

    Unknown domain errors are reported as a generic server error.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code, str(error) or "Server error"
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error"


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def _handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code, message = domain_error_response(exc)
    if status_code >= 500:
        logger.error("Request failed", extra={
            "path": request.url.path, "error": str(exc), "errorType": type(exc).__name__,
        })
    return JSONResponse(status_code=status_code, content=error_body(message))


async def _handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"path": request.url.path, "errorType": type(exc).__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server error"),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _handle_domain_error)
    app.add_exception_handler(HTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
