"""Persistence layer: one repository per entity."""

from hotel_booking.repositories.amenity import AmenityRepository
from hotel_booking.repositories.base import BaseRepository
from hotel_booking.repositories.booking import BookingRepository
from hotel_booking.repositories.coupon import CouponRepository
from hotel_booking.repositories.hotel import HotelImageRepository, HotelRepository
from hotel_booking.repositories.review import ReviewRepository
from hotel_booking.repositories.room import RoomImageRepository, RoomRepository, RoomServiceRepository
from hotel_booking.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "AmenityRepository",
    "BookingRepository",
    "CouponRepository",
    "HotelRepository",
    "HotelImageRepository",
    "ReviewRepository",
    "RoomRepository",
    "RoomImageRepository",
    "RoomServiceRepository",
    "UserRepository",
]
