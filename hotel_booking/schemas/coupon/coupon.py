"""
Coupon schemas.
"""

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from hotel_booking.schemas.common import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = ["CouponCreate", "CouponUpdate", "CouponResponse"]


class CouponCreate(BaseCreateSchema):
    code: str = Field(..., min_length=1, max_length=100)
    percent: int = Field(..., ge=1, le=100, description="Discount percentage")
    begin: date
    end: date

    @model_validator(mode="after")
    def validate_period(self) -> "CouponCreate":
        if self.begin >= self.end:
            raise ValueError("'begin' date must be before 'end' date.")
        return self


class CouponUpdate(BaseUpdateSchema):
    code: Optional[str] = Field(default=None, min_length=1, max_length=100)
    percent: Optional[int] = Field(default=None, ge=1, le=100)
    begin: Optional[date] = None
    end: Optional[date] = None


class CouponResponse(BaseResponseSchema):
    code: str
    percent: int
    begin: date
    end: date
