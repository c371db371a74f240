"""SQLAlchemy models for the hotel booking domain."""

from hotel_booking.models.base import Base, BaseModel, BookingStatus, Gender, UserType
from hotel_booking.models.user import User
from hotel_booking.models.hotel import Hotel, UrlImageHotel
from hotel_booking.models.amenity import Amenity
from hotel_booking.models.room import Room, RoomService, UrlImageRoom
from hotel_booking.models.review import Review
from hotel_booking.models.coupon import Coupon
from hotel_booking.models.booking import Booking

__all__ = [
    "Base",
    "BaseModel",
    "BookingStatus",
    "Gender",
    "UserType",
    "User",
    "Hotel",
    "UrlImageHotel",
    "Amenity",
    "Room",
    "RoomService",
    "UrlImageRoom",
    "Review",
    "Coupon",
    "Booking",
]
