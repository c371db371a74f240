from hotel_booking.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    TimestampMixin,
)
from hotel_booking.schemas.common.response import ErrorDetail, ErrorResponse, MessageResponse

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
    "TimestampMixin",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
]
