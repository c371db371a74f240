"""
Discount coupon model.
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hotel_booking.models.base import BaseModel, TimestampMixin

__all__ = ["Coupon"]


class Coupon(BaseModel, TimestampMixin):
    """Percentage discount valid between two dates."""

    __tablename__ = "coupons"

    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    percent: Mapped[int] = mapped_column(Integer, nullable=False)
    begin: Mapped[date] = mapped_column(Date, nullable=False)
    end: Mapped[date] = mapped_column(Date, nullable=False)
