"""
Discount coupon operations.
"""

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import DuplicateEntryError, InvalidDateRangeError, ResourceNotFoundError
from hotel_booking.models.coupon import Coupon
from hotel_booking.repositories.coupon import CouponRepository
from hotel_booking.schemas.coupon import CouponCreate, CouponUpdate
from hotel_booking.services.base import BaseService


class CouponService(BaseService[Coupon, CouponRepository]):

    def __init__(self, db_session: Session):
        super().__init__(CouponRepository(db_session), db_session)

    def _ensure_code_free(self, code: str, exclude_id: int = None) -> None:
        existing = self.repository.find_by_code(code)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEntryError("Coupon code already exists", field="code")

    def create(self, data: CouponCreate) -> Coupon:
        self._ensure_code_free(data.code)
        return self.repository.create(Coupon(**data.model_dump()))

    def get_by_code(self, code: str) -> Coupon:
        coupon = self.repository.find_by_code(code)
        if coupon is None:
            raise ResourceNotFoundError("Coupon", message="Coupon not found")
        return coupon

    def update(self, coupon_id: int, data: CouponUpdate) -> Coupon:
        """Partial update; the resulting period must still have begin < end."""
        coupon = self.repository.get_by_id(coupon_id)
        changes = data.changes()
        if "code" in changes:
            self._ensure_code_free(changes["code"], exclude_id=coupon.id)

        begin = changes.get("begin", coupon.begin)
        end = changes.get("end", coupon.end)
        if begin >= end:
            raise InvalidDateRangeError(
                "'begin' date must be before 'end' date.",
                start_date=begin.isoformat(),
                end_date=end.isoformat(),
            )
        return self.repository.update(coupon, changes)
