"""
Base models package.

Provides the declarative base, mixins and enums for all database models.
"""

from hotel_booking.models.base.base_model import Base, BaseModel
from hotel_booking.models.base.enums import BookingStatus, Gender, UserType, enum_values
from hotel_booking.models.base.mixins import TimestampMixin

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "BookingStatus",
    "Gender",
    "UserType",
    "enum_values",
]
