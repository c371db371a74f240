"""
Amenity model.
"""

from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.models.base import BaseModel, TimestampMixin

__all__ = ["Amenity"]


class Amenity(BaseModel, TimestampMixin):
    """An amenity a room may offer (wifi, minibar, ...)."""

    __tablename__ = "amenities"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amenity_class: Mapped[Optional[str]] = mapped_column("a_class", String(100), nullable=True)

    room_links: Mapped[List["RoomService"]] = relationship(
        back_populates="amenity",
        cascade="all, delete-orphan",
    )
