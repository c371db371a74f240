"""
Room schemas.
"""

from typing import List, Optional

from pydantic import Field

from hotel_booking.schemas.amenity import AmenityResponse
from hotel_booking.schemas.common import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema
from hotel_booking.schemas.media import RoomImageResponse

__all__ = ["RoomCreate", "RoomUpdate", "RoomResponse"]


class RoomCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    status: bool = True
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0, description="Total units of this room type")
    quantity_people: int = Field(default=1, ge=1)
    hotel_id: int = Field(..., alias="hotelId", gt=0)
    type_bed: Optional[str] = Field(default=None, max_length=100)


class RoomUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    status: Optional[bool] = None
    price: Optional[float] = Field(default=None, ge=0)
    quantity: Optional[int] = Field(default=None, ge=0)
    quantity_people: Optional[int] = Field(default=None, ge=1)
    type_bed: Optional[str] = Field(default=None, max_length=100)


class RoomResponse(BaseResponseSchema):
    name: str
    status: bool
    price: float
    quantity: int
    quantity_people: int
    type_bed: Optional[str] = None
    hotel_id: int = Field(..., alias="hotelId")
    images: List[RoomImageResponse] = Field(default_factory=list)
    amenities: List[AmenityResponse] = Field(default_factory=list)
