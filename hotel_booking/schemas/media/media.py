"""
Image record schemas for rooms and hotels.
"""

from typing import Optional

from pydantic import Field

from hotel_booking.schemas.common import BaseResponseSchema, BaseUpdateSchema

__all__ = [
    "RoomImageResponse",
    "RoomImageUpdate",
    "HotelImageResponse",
    "HotelImageUpdate",
]


class RoomImageResponse(BaseResponseSchema):
    url: str
    file_name: Optional[str] = Field(default=None, alias="fileName")
    room_id: int = Field(..., alias="IdRoom")


class RoomImageUpdate(BaseUpdateSchema):
    url: str = Field(..., min_length=1)
    room_id: int = Field(..., alias="IdRoom", gt=0)


class HotelImageResponse(BaseResponseSchema):
    url: str
    file_name: Optional[str] = Field(default=None, alias="fileName")
    hotel_id: int = Field(..., alias="HotelId")


class HotelImageUpdate(BaseUpdateSchema):
    url: str = Field(..., min_length=1)
    hotel_id: int = Field(..., alias="HotelId", gt=0)
