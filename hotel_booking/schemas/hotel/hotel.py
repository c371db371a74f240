"""
Hotel schemas.
"""

from typing import List, Optional

from pydantic import Field

from hotel_booking.schemas.common import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from hotel_booking.schemas.media import HotelImageResponse

__all__ = [
    "HotelCreate",
    "HotelUpdate",
    "HotelResponse",
    "HotelNameSearch",
    "HotelIdResponse",
]


class HotelCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    star: int = Field(..., ge=1, le=5)
    map: Optional[str] = Field(default=None, max_length=500, description="Comma-separated districts")
    type_hotel: Optional[str] = Field(default=None, alias="TypeHotel")
    payment: Optional[str] = None
    owner_id: Optional[int] = Field(default=None, alias="ownerId")


class HotelUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    star: Optional[int] = Field(default=None, ge=1, le=5)
    map: Optional[str] = Field(default=None, max_length=500)
    type_hotel: Optional[str] = Field(default=None, alias="TypeHotel")
    payment: Optional[str] = None
    owner_id: Optional[int] = Field(default=None, alias="ownerId")


class HotelResponse(BaseResponseSchema):
    name: str
    star: int
    map: Optional[str] = None
    type_hotel: Optional[str] = Field(default=None, alias="TypeHotel")
    payment: Optional[str] = None
    owner_id: Optional[int] = Field(default=None, alias="ownerId")
    images: List[HotelImageResponse] = Field(default_factory=list)


class HotelNameSearch(BaseSchema):
    hotel_name: str = Field(..., alias="hotelName", min_length=1)


class HotelIdResponse(BaseSchema):
    hotel_id: int = Field(..., alias="hotelId")
