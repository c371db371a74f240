"""
Enumerations stored as plain strings.
"""

import enum


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class UserType(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class BookingStatus(str, enum.Enum):
    """Lifecycle of a booking; only ``cancelled`` releases capacity."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


def enum_values(enum_cls):
    # store "pending", not "PENDING"
    return [member.value for member in enum_cls]
