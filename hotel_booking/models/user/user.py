"""
User account model.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import Date, Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_booking.models.base import BaseModel, Gender, TimestampMixin, UserType, enum_values

__all__ = ["User"]


class User(BaseModel, TimestampMixin):
    """Registered guest or administrator."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False, comment="bcrypt hash")
    number_phone: Mapped[Optional[str]] = mapped_column(String(15), nullable=True, unique=True)
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    gender: Mapped[Optional[Gender]] = mapped_column(
        Enum(Gender, values_callable=enum_values, native_enum=False, length=10),
        nullable=True,
    )
    type: Mapped[UserType] = mapped_column(
        Enum(UserType, values_callable=enum_values, native_enum=False, length=10),
        nullable=False,
        default=UserType.USER,
    )
    cccd: Mapped[Optional[str]] = mapped_column(String(20), nullable=True, comment="National ID")
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True, comment="Avatar URL")

    hotels: Mapped[List["Hotel"]] = relationship(back_populates="owner")
    reviews: Mapped[List["Review"]] = relationship(
        back_populates="guest",
        cascade="all, delete-orphan",
    )
    bookings: Mapped[List["Booking"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
