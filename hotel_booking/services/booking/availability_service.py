"""
Availability accounting for room inventory.

A room type has ``quantity`` interchangeable units. The units free over
``[start, end)`` are that total minus the units held by every
non-cancelled booking whose stay overlaps the range. A new booking is
admitted only if it asks for no more than that.
"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from hotel_booking.config.settings import settings
from hotel_booking.core.exceptions import (
    InsufficientCapacityError,
    InvalidDateRangeError,
    UserNotFoundError,
    ValidationError,
)
from hotel_booking.models.booking import Booking
from hotel_booking.models.room import Room
from hotel_booking.repositories.booking import BookingRepository
from hotel_booking.repositories.room import RoomRepository
from hotel_booking.repositories.user import UserRepository
from hotel_booking.schemas.booking import BookingCreate
from hotel_booking.services.base import BaseService, track_performance


class AvailabilityService(BaseService[Booking, BookingRepository]):
    """Computes free room units and gates booking creation on them."""

    def __init__(self, db_session: Session, lock_room: Optional[bool] = None):
        super().__init__(BookingRepository(db_session), db_session)
        self.rooms = RoomRepository(db_session)
        self.users = UserRepository(db_session)
        self.lock_room = settings.BOOKING_LOCK_ROOM_ON_ADMISSION if lock_room is None else lock_room

    @staticmethod
    def _check_range(start: date, end: date) -> None:
        if start is None or end is None:
            raise ValidationError("Missing required fields")
        if start >= end:
            raise InvalidDateRangeError(
                "'check_in_date' must be before 'check_out_date'",
                start_date=start.isoformat(),
                end_date=end.isoformat(),
            )

    def _free_units(self, room: Room, start: date, end: date) -> int:
        booked = self.repository.sum_overlapping_quantity(room.id, start, end)
        return room.quantity - booked

    @track_performance("available_quantity")
    def available_quantity(self, room_id: int, start: date, end: date) -> int:
        """
        Units of ``room_id`` not held by any overlapping booking.

        Raises:
            InvalidDateRangeError: If ``start >= end``
            RoomNotFoundError: If the room does not exist
        """
        self._check_range(start, end)
        room = self.rooms.get_by_id(room_id)
        return self._free_units(room, start, end)

    def check_admission(self, data: BookingCreate, lock: bool = False) -> int:
        """
        Verify a booking request fits the remaining inventory.

        With ``lock`` the room row is read ``FOR UPDATE`` so concurrent
        admissions for the same room queue behind this transaction.

        Returns:
            Units available before this booking

        Raises:
            InsufficientCapacityError: If more units are requested than remain
        """
        self._check_range(data.check_in_date, data.check_out_date)
        room = self.rooms.get_for_update(data.room_id) if lock else self.rooms.get_by_id(data.room_id)
        if room.hotel_id != data.hotel_id:
            raise ValidationError(
                "Room does not belong to the selected hotel",
                field_errors={"hotel_id": [f"Room {room.id} belongs to hotel {room.hotel_id}"]},
            )
        if self.users.find_by_id(data.user_id) is None:
            raise UserNotFoundError(data.user_id)

        available = self._free_units(room, data.check_in_date, data.check_out_date)
        if data.quantity > available:
            self._logger.warning(
                "Booking rejected: insufficient capacity",
                extra={
                    "room_id": room.id,
                    "requested": data.quantity,
                    "available": available,
                },
            )
            raise InsufficientCapacityError(
                room_id=room.id, requested=data.quantity, available=available
            )
        return available

    def record_booking(self, data: BookingCreate) -> Booking:
        """Insert the booking row without committing."""
        return self.repository.create(Booking(**data.model_dump()), commit=False)

    @track_performance("admit_booking")
    def admit_booking(self, data: BookingCreate) -> Booking:
        """
        Check availability and persist the booking in one transaction.

        Nothing is written when the request is rejected.
        """
        with self.transaction():
            available = self.check_admission(data, lock=self.lock_room)
            booking = self.record_booking(data)

        self.db.refresh(booking)
        self._logger.info(
            "Booking admitted",
            extra={
                "booking_id": booking.id,
                "room_id": booking.room_id,
                "quantity": booking.quantity,
                "remaining": available - booking.quantity,
            },
        )
        return booking
