"""
Standard API response wrappers.
"""

from typing import Any, Dict

from pydantic import Field

from hotel_booking.schemas.common.base import BaseSchema

__all__ = ["MessageResponse", "ErrorDetail", "ErrorResponse"]


class MessageResponse(BaseSchema):
    """Plain confirmation message."""

    message: str = Field(..., description="Response message")


class ErrorDetail(BaseSchema):
    code: str = Field(..., description="Application error code")
    message: str = Field(..., description="Error message")
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseSchema):
    """Uniform error envelope (documentation only)."""

    error: ErrorDetail
