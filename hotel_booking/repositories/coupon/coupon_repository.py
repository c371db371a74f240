"""
Coupon repository.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ResourceNotFoundError
from hotel_booking.models.coupon import Coupon
from hotel_booking.repositories.base import BaseRepository


class CouponRepository(BaseRepository[Coupon]):

    def __init__(self, db: Session):
        super().__init__(Coupon, db)

    def get_by_id(self, id) -> Coupon:
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError("Coupon", id, "Coupon not found")
        return entity

    def find_by_code(self, code: str) -> Optional[Coupon]:
        return self.db.scalar(select(Coupon).where(Coupon.code == code))
