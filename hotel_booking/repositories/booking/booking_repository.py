"""
Booking repository.

Owns the inventory aggregate used by the availability check: the number
of room units held by bookings whose stay overlaps a date range.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from hotel_booking.core.exceptions import BookingNotFoundError
from hotel_booking.models.base import BookingStatus
from hotel_booking.models.booking import Booking
from hotel_booking.models.room import Room
from hotel_booking.repositories.base import BaseRepository

# Statuses that no longer hold inventory
RELEASED_STATUSES = (BookingStatus.CANCELLED,)


class BookingRepository(BaseRepository[Booking]):
    not_found_error = BookingNotFoundError

    def __init__(self, db: Session):
        super().__init__(Booking, db)

    def sum_overlapping_quantity(self, room_id: int, start: date, end: date) -> int:
        """
        Total units of ``room_id`` held by bookings overlapping ``[start, end)``.

        Uses the half-open overlap test ``check_in < end AND check_out > start``:
        a booking checking out on ``start`` or checking in on ``end`` does
        not count. Returns 0 when nothing overlaps.
        """
        stmt = select(func.coalesce(func.sum(Booking.quantity), 0)).where(
            Booking.room_id == room_id,
            Booking.check_in_date < end,
            Booking.check_out_date > start,
            Booking.status.not_in(RELEASED_STATUSES),
        )
        return int(self.db.scalar(stmt) or 0)

    def search(
        self,
        room_id: Optional[int] = None,
        user_id: Optional[int] = None,
        hotel_id: Optional[int] = None,
        check_in_date: Optional[date] = None,
        check_out_date: Optional[date] = None,
        status: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        """Bookings matching every supplied filter, newest first."""
        return self.find_by_criteria(
            {
                "room_id": room_id,
                "user_id": user_id,
                "hotel_id": hotel_id,
                "check_in_date": check_in_date,
                "check_out_date": check_out_date,
                "status": status,
            },
            order_by=["-id"],
        )

    def get_with_details(self, booking_id: int) -> Booking:
        """Booking with room, hotel and user eagerly loaded."""
        stmt = (
            select(Booking)
            .where(Booking.id == booking_id)
            .options(
                selectinload(Booking.room).selectinload(Room.hotel),
                selectinload(Booking.hotel),
                selectinload(Booking.user),
            )
        )
        booking = self.db.scalar(stmt)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking
