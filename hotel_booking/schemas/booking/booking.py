"""
Booking and availability schemas.

Booking payloads keep the snake_case field names clients already send.
"""

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from hotel_booking.models.base import BookingStatus
from hotel_booking.schemas.common import BaseCreateSchema, BaseResponseSchema, BaseSchema

__all__ = [
    "BookingCreate",
    "BookingFilter",
    "BookingResponse",
    "BookingDetail",
    "AvailabilityResponse",
]


class BookingCreate(BaseCreateSchema):
    # JSON numbers only; strings and booleans are rejected
    room_id: int = Field(..., gt=0, strict=True)
    user_id: int = Field(..., gt=0, strict=True)
    hotel_id: int = Field(..., gt=0, strict=True)
    check_in_date: date = Field(..., description="First night (inclusive)")
    check_out_date: date = Field(..., description="Departure day (exclusive)")
    quantity: int = Field(..., gt=0, strict=True, description="Room units requested")
    total_price: float = Field(..., gt=0, strict=True)
    full_name: str = Field(..., min_length=1, max_length=255)
    status: BookingStatus = BookingStatus.PENDING
    special_requests: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)

    @model_validator(mode="after")
    def validate_dates(self) -> "BookingCreate":
        if self.check_in_date >= self.check_out_date:
            raise ValueError("'check_in_date' must be before 'check_out_date'")
        return self


class BookingFilter(BaseSchema):
    room_id: Optional[int] = None
    user_id: Optional[int] = None
    hotel_id: Optional[int] = None
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None
    status: Optional[BookingStatus] = None


class BookingResponse(BaseResponseSchema):
    room_id: int
    user_id: int
    hotel_id: int
    check_in_date: date
    check_out_date: date
    quantity: int
    total_price: float
    status: BookingStatus
    special_requests: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class BookingRoom(BaseSchema):
    id: int
    name: str
    price: float
    hotel_id: int = Field(..., alias="hotelId")
    hotel_name: Optional[str] = Field(default=None, alias="hotelName")


class BookingHotel(BaseSchema):
    id: int
    name: str


class BookingUser(BaseSchema):
    id: int
    name: str
    email: str
    number_phone: Optional[str] = Field(default=None, alias="numberPhone")


class BookingDetail(BookingResponse):
    room: Optional[BookingRoom] = None
    hotel: Optional[BookingHotel] = None
    user: Optional[BookingUser] = None

    @classmethod
    def from_booking(cls, booking) -> "BookingDetail":
        detail = cls.model_validate(booking)
        if booking.room is not None:
            detail.room = BookingRoom(
                id=booking.room.id,
                name=booking.room.name,
                price=booking.room.price,
                hotel_id=booking.room.hotel_id,
                hotel_name=booking.room.hotel.name if booking.room.hotel else None,
            )
        return detail


class AvailabilityResponse(BaseSchema):
    available_quantity: int = Field(..., alias="availableQuantity")
