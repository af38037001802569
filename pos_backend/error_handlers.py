"""Custom error handlers and exceptions for the application."""
from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from typing import Union

from .logging_config import get_logger

logger = get_logger("error_handlers")


class AppException(Exception):
    """Base exception for application-specific errors."""

    def __init__(self, message: str, status_code: int = 500, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(AppException):
    """Raised when no document matches the given key."""

    def __init__(self, resource: str, identifier: Union[int, float, str]):
        super().__init__(
            message=f"{resource} not found.",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)}
        )


class DuplicateResourceError(AppException):
    """Raised when a unique index rejects a document."""

    def __init__(self, resource: str, field: str, value: Union[int, str]):
        super().__init__(
            message=f"{resource} with this {field} already exists.",
            status_code=409,
            details={"resource": resource, "field": field, "value": str(value)}
        )


class ValidationError(AppException):
    """Raised when data validation fails."""

    def __init__(self, message: str, errors: list = None):
        super().__init__(
            message=message,
            status_code=400,
            details={"validation_errors": errors or []}
        )


class StoreError(AppException):
    """Raised on connectivity or unexpected driver failures."""

    def __init__(self, message: str, original_error: str = None):
        super().__init__(
            message=message,
            status_code=500,
            details={"original_error": original_error}
        )


async def app_exception_handler(request: Request, exc: AppException):
    """Handler for custom application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application error: {exc.message}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "details": exc.details
        }
    )

    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request validation errors."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": " -> ".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    logger.warning(
        f"Validation error on {request.method} {request.url.path}",
        extra={"validation_errors": errors}
    )

    message = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    return PlainTextResponse(
        f"Validation failed: {message}",
        status_code=status.HTTP_400_BAD_REQUEST
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handler for store errors that escaped the repositories."""
    logger.error(
        f"Database error: {str(exc)}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )

    detail = getattr(exc, "orig", None) or exc
    return PlainTextResponse(
        str(detail),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handler for unexpected exceptions."""
    logger.critical(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )

    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app) -> None:
    """Attach all handlers to a FastAPI application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
