"""
Amenity and room-amenity link schemas.
"""

from typing import List, Optional

from pydantic import Field

from hotel_booking.schemas.common import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)

__all__ = [
    "AmenityCreate",
    "AmenityUpdate",
    "AmenityResponse",
    "RoomServiceCreate",
    "RoomServiceUpdate",
    "RoomServiceResponse",
    "AmenityFilter",
]


class AmenityCreate(BaseCreateSchema):
    name: str = Field(..., min_length=3, max_length=255)
    amenity_class: str = Field(..., alias="Aclass", min_length=1)


class AmenityUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=3, max_length=255)
    amenity_class: Optional[str] = Field(default=None, alias="Aclass", min_length=1)


class AmenityResponse(BaseResponseSchema):
    name: str
    amenity_class: Optional[str] = Field(default=None, alias="Aclass")


class RoomServiceCreate(BaseCreateSchema):
    room_id: int = Field(..., alias="roomId", gt=0)
    service_id: int = Field(..., alias="serviceId", gt=0)


class RoomServiceUpdate(BaseUpdateSchema):
    room_id: Optional[int] = Field(default=None, alias="roomId", gt=0)
    service_id: Optional[int] = Field(default=None, alias="serviceId", gt=0)


class RoomSummary(BaseSchema):
    id: int
    name: str
    price: float
    hotel_id: int = Field(..., alias="hotelId")


class RoomServiceResponse(BaseResponseSchema):
    room_id: int = Field(..., alias="roomId")
    service_id: int = Field(..., alias="serviceId")
    amenity: Optional[AmenityResponse] = None
    room: Optional[RoomSummary] = None


class AmenityFilter(BaseSchema):
    amenities: List[int] = Field(..., min_length=1)
