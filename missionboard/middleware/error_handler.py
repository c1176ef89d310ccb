"""
Error handling for the MissionBoard API.

Services raise `AppError` subclasses; the handlers registered in
`missionboard.main` turn them into flat JSON bodies:

    {"message": ..., "category": ..., "timestamp": ..., "path": ..., **details}

Request validation failures become 400s with `validation_errors`. Database
and unexpected errors are logged with their traceback and rendered as a
generic 500 that exposes no internals.
"""

import logging
from typing import Optional
from datetime import datetime, timezone
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError, IntegrityError

logger = logging.getLogger(__name__)


class ErrorCategory:
    """Error categories for structured error handling"""
    VALIDATION = "validation_error"
    NOT_FOUND = "not_found_error"
    CONFLICT = "conflict_error"
    AUTHORIZATION = "authorization_error"
    DATABASE = "database_error"
    INTERNAL = "internal_error"


class AppError(Exception):
    """Base application error with structured information"""

    def __init__(
        self,
        message: str,
        category: str = ErrorCategory.INTERNAL,
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppError):
    """A referenced resource does not exist (or is not visible to the caller)"""
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.NOT_FOUND,
            status_code=404,
            details=details,
        )


class ValidationError(AppError):
    """Business-rule validation errors"""
    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            status_code=400,
            details=details,
        )


class ConflictError(AppError):
    """The request clashes with the current state of a resource"""
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFLICT,
            status_code=409,
            details=details,
        )


class AuthorizationError(AppError):
    def __init__(self, message: str = "Not authorized"):
        super().__init__(
            message=message,
            category=ErrorCategory.AUTHORIZATION,
            status_code=403,
        )


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def handle_app_error(error: AppError, request: Request) -> JSONResponse:
    """Handle structured application errors"""

    log = logger.error if error.status_code >= 500 else logger.info
    log(
        f"Application error: {error.category} - {error.message}",
        extra={
            "category": error.category,
            "status_code": error.status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=error.status_code,
        content={
            "message": error.message,
            "category": error.category,
            "timestamp": _now_iso(),
            "path": request.url.path,
            **error.details,
        },
    )


def handle_validation_error(error: RequestValidationError, request: Request) -> JSONResponse:
    """Handle FastAPI request validation errors"""

    errors = []
    for err in error.errors():
        errors.append({
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        })

    logger.warning(
        f"Validation error on {request.url.path}",
        extra={"errors": errors, "method": request.method},
    )

    return JSONResponse(
        status_code=400,
        content={
            "message": "Request validation failed",
            "category": ErrorCategory.VALIDATION,
            "timestamp": _now_iso(),
            "path": request.url.path,
            "validation_errors": errors,
        },
    )


def handle_database_error(error: SQLAlchemyError, request: Request) -> JSONResponse:
    """Handle database errors"""

    if isinstance(error, IntegrityError):
        message = "Database constraint violation. Check your input data."
    else:
        message = "Database operation failed. Please try again."

    logger.error(
        f"Database error: {type(error).__name__}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=error,
    )

    return JSONResponse(
        status_code=500,
        content={
            "message": message,
            "category": ErrorCategory.DATABASE,
            "timestamp": _now_iso(),
            "path": request.url.path,
        },
    )


def handle_unexpected_error(error: Exception, request: Request) -> JSONResponse:
    """Handle unexpected errors"""

    logger.critical(
        f"Unexpected error: {type(error).__name__}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=error,
    )

    # Don't expose internal details
    return JSONResponse(
        status_code=500,
        content={
            "message": "An unexpected error occurred.",
            "category": ErrorCategory.INTERNAL,
            "timestamp": _now_iso(),
            "path": request.url.path,
        },
    )


# Exception handlers for FastAPI
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return handle_app_error(exc, request)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return handle_validation_error(exc, request)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    return handle_database_error(exc, request)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return handle_unexpected_error(exc, request)


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
