"""
Exception handlers that render every failure with the same envelope:

    {"error": {"code": ..., "message": ..., "details": {...}}}
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from hotel_booking.config.settings import settings
from hotel_booking.core.exceptions import BaseAppException, ErrorCode
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)


def _error_body(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details or {}}}


def _field_name(loc) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts on every location
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in {"body", "query", "path", "form", "header"}:
        parts = parts[1:]
    return ".".join(parts) or "__root__"


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    """Render application exceptions raised by services and repositories."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.error_code.value} - {exc.message}",
        extra={
            "error_code": exc.error_code.value,
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
        }
    )

    if exc.status_code >= 500 and not settings.DEBUG:
        body = _error_body(exc.error_code.value, "Internal Server Error")
    else:
        body = exc.to_dict()
    return JSONResponse(status_code=exc.status_code, content=body)


async def request_validation_handler(request: Request, exc) -> JSONResponse:
    """Translate request and form schema failures to a 400 with per-field messages."""
    field_errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        message = error.get("msg", "Invalid value")
        # Pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        field_errors.setdefault(_field_name(error.get("loc", ())), []).append(message)

    if len(field_errors) == 1:
        message = next(iter(field_errors.values()))[0]
    else:
        message = "Request validation failed"

    logger.warning(
        f"Validation error: {len(field_errors)} field(s) failed validation",
        extra={"path": request.url.path, "method": request.method}
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            ErrorCode.VALIDATION_ERROR.value, message, {"field_errors": field_errors}
        ),
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Render database failures that escaped the repository layer."""
    logger.error(
        f"Database exception: {type(exc).__name__}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=True
    )
    message = str(exc) if settings.DEBUG else "Internal Server Error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(ErrorCode.DATABASE_ERROR.value, message),
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; hides exception text unless DEBUG is on."""
    logger.critical(
        f"Unexpected exception: {type(exc).__name__} - {exc}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=True
    )
    message = str(exc) if settings.DEBUG else "Internal Server Error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(ErrorCode.INTERNAL_ERROR.value, message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)


__all__ = [
    "register_exception_handlers",
    "app_exception_handler",
    "request_validation_handler",
    "database_exception_handler",
    "unexpected_exception_handler",
]
