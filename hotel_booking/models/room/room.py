"""
Room models: room types, their images and amenity links.
"""

from typing import List, Optional

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.models.base import BaseModel, TimestampMixin

__all__ = ["Room", "UrlImageRoom", "RoomService"]


class Room(BaseModel, TimestampMixin):
    """
    A room type within a hotel.

    ``quantity`` is the total number of interchangeable units of this room
    type, independent of bookings; availability is derived from it.
    """

    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_rooms_quantity_non_negative"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    price: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    quantity_people: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    type_bed: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    hotel_id: Mapped[int] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )

    hotel: Mapped["Hotel"] = relationship(back_populates="rooms")
    images: Mapped[List["UrlImageRoom"]] = relationship(
        back_populates="room",
        cascade="all, delete-orphan",
    )
    services: Mapped[List["RoomService"]] = relationship(
        back_populates="room",
        cascade="all, delete-orphan",
    )
    bookings: Mapped[List["Booking"]] = relationship(
        back_populates="room",
        cascade="all, delete-orphan",
    )

    @property
    def amenities(self) -> List["Amenity"]:
        return [link.amenity for link in self.services if link.amenity is not None]


class UrlImageRoom(BaseModel, TimestampMixin):
    """A stored room image and its storage reference."""

    __tablename__ = "url_image_rooms"

    url: Mapped[str] = mapped_column(String(500), nullable=False)
    file_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    room_id: Mapped[int] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )

    room: Mapped["Room"] = relationship(back_populates="images")


class RoomService(BaseModel, TimestampMixin):
    """Link between a room and an amenity it offers."""

    __tablename__ = "room_services"

    room_id: Mapped[int] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_id: Mapped[int] = mapped_column(
        ForeignKey("amenities.id", ondelete="CASCADE"), nullable=False, index=True
    )

    room: Mapped["Room"] = relationship(back_populates="services")
    amenity: Mapped["Amenity"] = relationship(back_populates="room_links")
