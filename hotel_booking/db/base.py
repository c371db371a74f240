"""Declarative base with every model imported so metadata is complete."""
from hotel_booking.models.base import Base

# Register all models with Base.metadata
from hotel_booking.models import (  # noqa: F401
    Amenity,
    Booking,
    Coupon,
    Hotel,
    Review,
    Room,
    RoomService,
    UrlImageHotel,
    UrlImageRoom,
    User,
)

__all__ = ["Base"]
