"""
Hotel and hotel image models.
"""

from typing import List, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.models.base import BaseModel, TimestampMixin

__all__ = ["Hotel", "UrlImageHotel"]


class Hotel(BaseModel, TimestampMixin):
    """A hotel listing owned by a user."""

    __tablename__ = "hotels"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    star: Mapped[int] = mapped_column(Integer, nullable=False)
    map: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True, comment="Comma-separated districts"
    )
    type_hotel: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    payment: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    owner_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    owner: Mapped[Optional["User"]] = relationship(back_populates="hotels")
    images: Mapped[List["UrlImageHotel"]] = relationship(
        back_populates="hotel",
        cascade="all, delete-orphan",
    )
    rooms: Mapped[List["Room"]] = relationship(
        back_populates="hotel",
        cascade="all, delete-orphan",
    )
    reviews: Mapped[List["Review"]] = relationship(
        back_populates="hotel",
        cascade="all, delete-orphan",
    )

    def districts(self) -> List[str]:
        """Trimmed, non-empty district names from the map field"""
        if not self.map:
            return []
        return [part.strip() for part in self.map.split(",") if part.strip()]


class UrlImageHotel(BaseModel, TimestampMixin):
    """A stored hotel image and its storage reference."""

    __tablename__ = "url_image_hotels"

    url: Mapped[str] = mapped_column(String(500), nullable=False)
    file_name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="Storage reference used for deletion"
    )
    hotel_id: Mapped[int] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )

    hotel: Mapped["Hotel"] = relationship(back_populates="images")
