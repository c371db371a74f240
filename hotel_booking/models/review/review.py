"""
Guest review model.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.models.base import BaseModel, TimestampMixin

__all__ = ["Review"]


class Review(BaseModel, TimestampMixin):
    """A guest's rating of a hotel."""

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    file: Mapped[Optional[str]] = mapped_column(String(500), nullable=True, comment="Image URL")
    hotel_id: Mapped[int] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    hotel: Mapped["Hotel"] = relationship(back_populates="reviews")
    guest: Mapped["User"] = relationship(back_populates="reviews")
