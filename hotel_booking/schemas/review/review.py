"""
Review schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hotel_booking.schemas.common import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)

__all__ = ["ReviewCreate", "ReviewUpdate", "ReviewResponse", "HotelReview"]


class ReviewCreate(BaseCreateSchema):
    rating: int = Field(..., ge=1, le=5)
    description: str = Field(..., min_length=1)
    hotel_id: int = Field(..., alias="hotelId", gt=0)
    guest_id: int = Field(..., alias="guestId", gt=0)


class ReviewUpdate(BaseUpdateSchema):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    description: Optional[str] = Field(default=None, min_length=1)


class ReviewResponse(BaseResponseSchema):
    rating: int
    description: Optional[str] = None
    file: Optional[str] = None
    hotel_id: int = Field(..., alias="hotelId")
    guest_id: int = Field(..., alias="guestId")


class HotelReview(BaseSchema):
    """Review flattened with hotel and guest names."""

    id: int
    rating: int
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")
    hotel_id: int = Field(..., alias="hotelId")
    hotel_name: Optional[str] = Field(default=None, alias="hotelName")
    guest_id: int = Field(..., alias="guestId")
    guest_name: Optional[str] = Field(default=None, alias="guestName")
    guest_avatar: Optional[str] = Field(default=None, alias="guestAvatar")

    @classmethod
    def from_review(cls, review) -> "HotelReview":
        return cls(
            id=review.id,
            rating=review.rating,
            description=review.description,
            created_at=review.created_at,
            updated_at=review.updated_at,
            hotel_id=review.hotel_id,
            hotel_name=review.hotel.name if review.hotel else None,
            guest_id=review.guest_id,
            guest_name=review.guest.name if review.guest else None,
            guest_avatar=review.guest.url if review.guest else None,
        )
