"""
Exceptions raised by repositories and services.

Every exception knows its HTTP status and error code, so the handlers in
``core.error_handlers`` can render any failure as::

    {"error": {"code": ..., "message": ..., "details": {...}}}

Subclasses only declare class-level defaults; constructors add whatever
context belongs in ``details``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"

    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"

    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    STORAGE_SERVICE_ERROR = "STORAGE_SERVICE_ERROR"
    EMAIL_SERVICE_ERROR = "EMAIL_SERVICE_ERROR"


class BaseAppException(Exception):
    """
    Root of the application's exception hierarchy.

    Args:
        message: Human-readable message returned to the client
        error_code: Overrides the class default code
        details: Structured context for the error body
        status_code: Overrides the class default HTTP status
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "Internal Server Error"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_message
        if error_code is not None:
            self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.error_code.value,
                "message": self.message,
                "details": self.details,
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


# --- 400 -----------------------------------------------------------------------

class ValidationError(BaseAppException):
    """Malformed or missing input; ``field_errors`` maps field names to messages."""

    status_code = 400
    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: Optional[ErrorCode] = None,
        status_code: Optional[int] = None,
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class InvalidDateRangeError(ValidationError):
    error_code = ErrorCode.INVALID_DATE_RANGE
    default_message = "Invalid date range"

    def __init__(
        self,
        message: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ):
        super().__init__(message)
        self.details.update(start_date=start_date, end_date=end_date)


class DuplicateEntryError(BaseAppException):
    """A unique value (email, phone, coupon code) is already taken."""

    status_code = 400
    error_code = ErrorCode.DUPLICATE_ENTRY
    default_message = "Duplicate entry"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)


class InsufficientCapacityError(BaseAppException):
    """A booking asks for more room units than remain free for its dates."""

    status_code = 400
    error_code = ErrorCode.INSUFFICIENT_CAPACITY
    default_message = "Not enough rooms available for the selected dates"

    def __init__(
        self,
        message: Optional[str] = None,
        room_id: Optional[int] = None,
        requested: Optional[int] = None,
        available: Optional[int] = None,
    ):
        super().__init__(
            message,
            details={"room_id": room_id, "requested": requested, "available": available},
        )


# --- 401 -----------------------------------------------------------------------

class AuthenticationError(BaseAppException):
    status_code = 401
    error_code = ErrorCode.AUTHENTICATION_FAILED
    default_message = "Authentication failed"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class TokenError(AuthenticationError):
    """Base for token failures; records which kind of token was presented."""

    error_code = ErrorCode.TOKEN_INVALID
    default_message = "Invalid token"

    def __init__(self, message: Optional[str] = None, token_type: str = "access"):
        super().__init__(message, details={"token_type": token_type})


class TokenExpiredError(TokenError):
    error_code = ErrorCode.TOKEN_EXPIRED
    default_message = "Token has expired"


class InvalidTokenError(TokenError):
    pass


# --- 404 -----------------------------------------------------------------------

class ResourceNotFoundError(BaseAppException):
    status_code = 404
    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id is not None:
                message += f" (ID: {resource_id})"
        super().__init__(
            message,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class _EntityNotFoundError(ResourceNotFoundError):
    """Not-found error for one entity type with a fixed default message."""

    resource_type = "Resource"
    not_found_message = "Resource not found"

    def __init__(self, resource_id: Optional[Any] = None, message: Optional[str] = None):
        super().__init__(self.resource_type, resource_id, message or self.not_found_message)


class UserNotFoundError(_EntityNotFoundError):
    error_code = ErrorCode.USER_NOT_FOUND
    resource_type = "User"
    not_found_message = "User not found"


class HotelNotFoundError(_EntityNotFoundError):
    error_code = ErrorCode.HOTEL_NOT_FOUND
    resource_type = "Hotel"
    not_found_message = "Hotel not found."


class RoomNotFoundError(_EntityNotFoundError):
    error_code = ErrorCode.ROOM_NOT_FOUND
    resource_type = "Room"
    not_found_message = "Room not found."


class BookingNotFoundError(_EntityNotFoundError):
    error_code = ErrorCode.BOOKING_NOT_FOUND
    resource_type = "Booking"
    not_found_message = "Booking not found"


# --- 500 -----------------------------------------------------------------------

class DatabaseError(BaseAppException):
    error_code = ErrorCode.DATABASE_ERROR
    default_message = "Database operation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        operation: Optional[str] = None,
        table: Optional[str] = None,
    ):
        super().__init__(message, details={"operation": operation, "table": table})


class ExternalServiceError(BaseAppException):
    """A collaborator outside the process (storage, mail) failed."""

    error_code = ErrorCode.EXTERNAL_SERVICE_ERROR
    default_message = "External service error"
    service_name: Optional[str] = None

    def __init__(self, message: Optional[str] = None):
        details = {"service_name": self.service_name} if self.service_name else None
        super().__init__(message, details=details)


class StorageServiceError(ExternalServiceError):
    error_code = ErrorCode.STORAGE_SERVICE_ERROR
    default_message = "Storage service error"
    service_name = "storage"


class EmailServiceError(ExternalServiceError):
    error_code = ErrorCode.EMAIL_SERVICE_ERROR
    default_message = "Email service error"
    service_name = "email"


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "InvalidDateRangeError",
    "DuplicateEntryError",
    "InsufficientCapacityError",
    "AuthenticationError",
    "TokenError",
    "TokenExpiredError",
    "InvalidTokenError",
    "ResourceNotFoundError",
    "UserNotFoundError",
    "HotelNotFoundError",
    "RoomNotFoundError",
    "BookingNotFoundError",
    "DatabaseError",
    "ExternalServiceError",
    "StorageServiceError",
    "EmailServiceError",
]
