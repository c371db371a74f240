"""
Booking queries and removal.
"""

from typing import List

from sqlalchemy.orm import Session

from hotel_booking.models.booking import Booking
from hotel_booking.repositories.booking import BookingRepository
from hotel_booking.schemas.booking import BookingFilter
from hotel_booking.services.base import BaseService


class BookingService(BaseService[Booking, BookingRepository]):

    def __init__(self, db_session: Session):
        super().__init__(BookingRepository(db_session), db_session)

    def search(self, filters: BookingFilter) -> List[Booking]:
        return self.repository.search(**filters.model_dump())

    def get_detail(self, booking_id: int) -> Booking:
        return self.repository.get_with_details(booking_id)

    def delete(self, booking_id: int) -> None:
        booking = self.repository.get_by_id(booking_id)
        self.repository.delete(booking)
        self._logger.info("Booking deleted", extra={"booking_id": booking_id})
