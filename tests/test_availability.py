"""
Tests for room availability accounting and booking admission.

Stays are half-open: a booking holds units from its check-in day up to,
but not including, its check-out day.
"""

from datetime import date

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import sessionmaker

from hotel_booking.config.settings import settings
from hotel_booking.core.exceptions import (
    InsufficientCapacityError,
    InvalidDateRangeError,
    RoomNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from hotel_booking.db.base import Base
from hotel_booking.models import Booking, Hotel, Room, User
from hotel_booking.models.base import BookingStatus
from hotel_booking.repositories.booking import BookingRepository
from hotel_booking.schemas.booking import BookingCreate
from hotel_booking.services.booking import AvailabilityService

from tests.conftest import make_booking


def request_for(room, user, check_in, check_out, quantity=1) -> BookingCreate:
    return BookingCreate(
        room_id=room.id,
        user_id=user.id,
        hotel_id=room.hotel_id,
        check_in_date=check_in,
        check_out_date=check_out,
        quantity=quantity,
        total_price=100.0,
        full_name="Alice Nguyen",
    )


def booking_count(session) -> int:
    return session.scalar(select(func.count()).select_from(Booking))


class TestOverlapSum:
    """Tests for BookingRepository.sum_overlapping_quantity()."""

    def test_no_bookings_sums_to_zero(self, db_session, room) -> None:
        """Should return 0 when the room has no bookings."""
        repo = BookingRepository(db_session)

        assert repo.sum_overlapping_quantity(room.id, date(2024, 5, 1), date(2024, 5, 3)) == 0

    def test_counts_only_overlapping_bookings(self, db_session, room, user) -> None:
        """Should add quantities of bookings that intersect the range."""
        make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3), quantity=1)
        make_booking(db_session, room, user, date(2024, 5, 2), date(2024, 5, 5), quantity=1)
        make_booking(db_session, room, user, date(2024, 6, 1), date(2024, 6, 3), quantity=2)
        repo = BookingRepository(db_session)

        assert repo.sum_overlapping_quantity(room.id, date(2024, 5, 2), date(2024, 5, 4)) == 2

    def test_back_to_back_stays_do_not_overlap(self, db_session, room, user) -> None:
        """Should treat a check-out day equal to the range start as free."""
        make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3), quantity=2)
        repo = BookingRepository(db_session)

        assert repo.sum_overlapping_quantity(room.id, date(2024, 5, 3), date(2024, 5, 5)) == 0
        assert repo.sum_overlapping_quantity(room.id, date(2024, 4, 28), date(2024, 5, 1)) == 0

    def test_cancelled_bookings_hold_nothing(self, db_session, room, user) -> None:
        """Should exclude cancelled bookings from the sum."""
        make_booking(
            db_session, room, user, date(2024, 5, 1), date(2024, 5, 3),
            quantity=2, status=BookingStatus.CANCELLED,
        )
        repo = BookingRepository(db_session)

        assert repo.sum_overlapping_quantity(room.id, date(2024, 5, 1), date(2024, 5, 3)) == 0

    def test_other_rooms_are_ignored(self, db_session, room, user, hotel) -> None:
        """Should only count bookings of the requested room."""
        other = Room(name="Single", price=50.0, quantity=5, hotel_id=hotel.id)
        db_session.add(other)
        db_session.commit()
        make_booking(db_session, other, user, date(2024, 5, 1), date(2024, 5, 3), quantity=3)
        repo = BookingRepository(db_session)

        assert repo.sum_overlapping_quantity(room.id, date(2024, 5, 1), date(2024, 5, 3)) == 0


class TestAvailableQuantity:
    """Tests for AvailabilityService.available_quantity()."""

    def test_empty_room_is_fully_available(self, db_session, room) -> None:
        """Should report the full inventory when nothing is booked."""
        service = AvailabilityService(db_session)

        assert service.available_quantity(room.id, date(2024, 5, 1), date(2024, 5, 3)) == 2

    def test_subtracts_overlapping_units(self, db_session, room, user) -> None:
        """Should subtract units held by overlapping stays."""
        make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3), quantity=1)
        service = AvailabilityService(db_session)

        assert service.available_quantity(room.id, date(2024, 5, 2), date(2024, 5, 4)) == 1

    def test_range_must_be_ordered(self, db_session, room) -> None:
        """Should reject a range whose start is not before its end."""
        service = AvailabilityService(db_session)

        with pytest.raises(InvalidDateRangeError):
            service.available_quantity(room.id, date(2024, 5, 3), date(2024, 5, 3))

    def test_unknown_room(self, db_session) -> None:
        """Should raise RoomNotFoundError for a missing room."""
        service = AvailabilityService(db_session)

        with pytest.raises(RoomNotFoundError):
            service.available_quantity(999, date(2024, 5, 1), date(2024, 5, 3))


class TestAdmitBooking:
    """Tests for AvailabilityService.admit_booking()."""

    def test_fills_room_then_rejects(self, db_session, room, user) -> None:
        """Should admit bookings up to the inventory and reject the next one."""
        service = AvailabilityService(db_session, lock_room=False)

        service.admit_booking(request_for(room, user, date(2024, 5, 1), date(2024, 5, 3)))
        service.admit_booking(request_for(room, user, date(2024, 5, 1), date(2024, 5, 3)))
        with pytest.raises(InsufficientCapacityError) as exc_info:
            service.admit_booking(request_for(room, user, date(2024, 5, 2), date(2024, 5, 4)))

        assert exc_info.value.message == "Not enough rooms available for the selected dates"
        assert booking_count(db_session) == 2

    def test_rejection_writes_nothing(self, db_session, room, user) -> None:
        """Should leave the bookings table untouched when denied."""
        service = AvailabilityService(db_session, lock_room=False)

        with pytest.raises(InsufficientCapacityError):
            service.admit_booking(request_for(room, user, date(2024, 5, 1), date(2024, 5, 3), quantity=3))

        assert booking_count(db_session) == 0

    def test_admits_after_previous_checkout(self, db_session, room, user) -> None:
        """Should admit a stay starting on the day a full booking checks out."""
        make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3), quantity=2)
        service = AvailabilityService(db_session, lock_room=False)

        booking = service.admit_booking(request_for(room, user, date(2024, 5, 3), date(2024, 5, 5), quantity=2))

        assert booking.id is not None
        assert booking.status == BookingStatus.PENDING

    def test_cancelled_booking_frees_units(self, db_session, room, user) -> None:
        """Should admit into units released by a cancelled booking."""
        make_booking(
            db_session, room, user, date(2024, 5, 1), date(2024, 5, 3),
            quantity=2, status=BookingStatus.CANCELLED,
        )
        service = AvailabilityService(db_session, lock_room=False)

        service.admit_booking(request_for(room, user, date(2024, 5, 1), date(2024, 5, 3), quantity=2))

        assert booking_count(db_session) == 2

    def test_zero_quantity_room_rejects_everything(self, db_session, hotel, user) -> None:
        """Should deny any request for a room with no units."""
        empty = Room(name="Closed wing", price=10.0, quantity=0, hotel_id=hotel.id)
        db_session.add(empty)
        db_session.commit()
        service = AvailabilityService(db_session, lock_room=False)

        with pytest.raises(InsufficientCapacityError):
            service.admit_booking(request_for(empty, user, date(2024, 5, 1), date(2024, 5, 2)))

    def test_room_must_belong_to_hotel(self, db_session, room, user) -> None:
        """Should reject a booking whose hotel does not own the room."""
        other_hotel = Hotel(name="Elsewhere", star=3)
        db_session.add(other_hotel)
        db_session.commit()
        data = request_for(room, user, date(2024, 5, 1), date(2024, 5, 2))
        data.hotel_id = other_hotel.id
        service = AvailabilityService(db_session, lock_room=False)

        with pytest.raises(ValidationError):
            service.admit_booking(data)
        assert booking_count(db_session) == 0

    def test_unknown_user(self, db_session, room, user) -> None:
        """Should raise UserNotFoundError for a missing guest."""
        data = request_for(room, user, date(2024, 5, 1), date(2024, 5, 2))
        data.user_id = 999
        service = AvailabilityService(db_session, lock_room=False)

        with pytest.raises(UserNotFoundError):
            service.admit_booking(data)

    def test_lock_flag_defaults_from_settings(self, db_session) -> None:
        """Should take the row-lock switch from settings unless given."""
        assert AvailabilityService(db_session).lock_room is settings.BOOKING_LOCK_ROOM_ON_ADMISSION
        assert AvailabilityService(db_session, lock_room=False).lock_room is False

    def test_locked_admission_runs_on_sqlite(self, db_session, room, user) -> None:
        """Should admit normally with the row lock on a backend that ignores it."""
        service = AvailabilityService(db_session, lock_room=True)

        service.admit_booking(request_for(room, user, date(2024, 5, 1), date(2024, 5, 3)))

        assert booking_count(db_session) == 1


class TestConcurrentAdmission:
    """Two admissions checked before either is written."""

    @pytest.fixture
    def file_sessions(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'race.db'}")
        Base.metadata.create_all(engine)
        factory = sessionmaker(bind=engine, autoflush=False)

        with factory() as seed:
            guest = User(name="Bob", email="bob@example.com", password="x", number_phone="0987654321")
            hotel = Hotel(name="Harbour Inn", star=3)
            seed.add_all([guest, hotel])
            seed.flush()
            room = Room(name="Twin", price=80.0, quantity=1, hotel_id=hotel.id)
            seed.add(room)
            seed.commit()
            ids = (room.id, hotel.id, guest.id)

        yield factory, ids
        engine.dispose()

    def test_unserialised_checks_can_overbook(self, file_sessions) -> None:
        """Should show both requests passing the check when nothing serialises them."""
        factory, (room_id, hotel_id, user_id) = file_sessions
        data = BookingCreate(
            room_id=room_id, user_id=user_id, hotel_id=hotel_id,
            check_in_date=date(2024, 7, 1), check_out_date=date(2024, 7, 3),
            quantity=1, total_price=160.0, full_name="Bob",
        )

        with factory() as first, factory() as second:
            service_a = AvailabilityService(first, lock_room=False)
            service_b = AvailabilityService(second, lock_room=False)

            assert service_a.check_admission(data) == 1
            assert service_b.check_admission(data) == 1

            service_a.record_booking(data)
            first.commit()
            service_b.record_booking(data)
            second.commit()

        with factory() as check:
            held = BookingRepository(check).sum_overlapping_quantity(
                room_id, date(2024, 7, 1), date(2024, 7, 3)
            )
        assert held == 2

    def test_sequential_admission_is_exact(self, file_sessions) -> None:
        """Should deny the second request once the first is committed."""
        factory, (room_id, hotel_id, user_id) = file_sessions
        data = BookingCreate(
            room_id=room_id, user_id=user_id, hotel_id=hotel_id,
            check_in_date=date(2024, 7, 1), check_out_date=date(2024, 7, 3),
            quantity=1, total_price=160.0, full_name="Bob",
        )

        with factory() as first:
            AvailabilityService(first, lock_room=True).admit_booking(data)
        with factory() as second:
            with pytest.raises(InsufficientCapacityError):
                AvailabilityService(second, lock_room=True).admit_booking(data)
