"""Tests for the booking endpoints."""

from datetime import date

from hotel_booking.models import Room
from hotel_booking.models.base import BookingStatus

from tests.conftest import API, booking_payload, make_booking


class TestCreateBooking:
    """Tests for POST /bookings."""

    def test_admits_and_returns_booking(self, client, room, user) -> None:
        """Should create a pending booking with status 201."""
        response = client.post(f"{API}/bookings", json=booking_payload(room, user, "2024-05-01", "2024-05-03"))

        assert response.status_code == 201
        body = response.json()
        assert body["room_id"] == room.id
        assert body["quantity"] == 1
        assert body["status"] == "pending"

    def test_full_room_is_rejected(self, client, room, user) -> None:
        """Should answer 400 INSUFFICIENT_CAPACITY once every unit is taken."""
        payload = booking_payload(room, user, "2024-05-01", "2024-05-03", quantity=2)
        assert client.post(f"{API}/bookings", json=payload).status_code == 201

        response = client.post(f"{API}/bookings", json=booking_payload(room, user, "2024-05-02", "2024-05-04"))

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INSUFFICIENT_CAPACITY"
        assert error["message"] == "Not enough rooms available for the selected dates"
        assert len(client.get(f"{API}/bookings").json()) == 1

    def test_missing_field(self, client, room, user) -> None:
        """Should answer 400 VALIDATION_ERROR when a required field is absent."""
        payload = booking_payload(room, user, "2024-05-01", "2024-05-03")
        del payload["room_id"]

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "room_id" in error["details"]["field_errors"]

    def test_reversed_dates(self, client, room, user) -> None:
        """Should reject a check-out that is not after check-in."""
        response = client.post(f"{API}/bookings", json=booking_payload(room, user, "2024-05-03", "2024-05-03"))

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "'check_in_date' must be before 'check_out_date'"

    def test_unknown_room(self, client, room, user) -> None:
        """Should answer 404 when the room does not exist."""
        payload = booking_payload(room, user, "2024-05-01", "2024-05-03")
        payload["room_id"] = 999

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "ROOM_NOT_FOUND"

    def test_boolean_quantity_is_rejected(self, client, room, user) -> None:
        """Should not read a JSON true as one room unit."""
        payload = booking_payload(room, user, "2024-05-01", "2024-05-03")
        payload["quantity"] = True

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "quantity" in error["details"]["field_errors"]
        assert client.get(f"{API}/bookings").json() == []

    def test_numeric_strings_are_rejected(self, client, room, user) -> None:
        """Should not coerce quoted numbers for quantity and total_price."""
        payload = booking_payload(room, user, "2024-05-01", "2024-05-03")
        payload["quantity"] = "2"
        payload["total_price"] = "500"

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 400
        field_errors = response.json()["error"]["details"]["field_errors"]
        assert {"quantity", "total_price"} <= set(field_errors)

    def test_integer_total_price_is_accepted(self, client, room, user) -> None:
        """Should accept a whole-number price sent as a JSON integer."""
        payload = booking_payload(room, user, "2024-05-01", "2024-05-03")
        payload["total_price"] = 240

        response = client.post(f"{API}/bookings", json=payload)

        assert response.status_code == 201
        assert response.json()["total_price"] == 240.0


class TestAvailabilityEndpoint:
    """Tests for GET /bookings/availability."""

    def test_reports_free_units(self, client, db_session, room, user) -> None:
        """Should return the number of units still free."""
        make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3))

        response = client.get(
            f"{API}/bookings/availability",
            params={"roomId": room.id, "checkInDate": "2024-05-02", "checkOutDate": "2024-05-04"},
        )

        assert response.status_code == 200
        assert response.json() == {"availableQuantity": 1}

    def test_admission_reduces_availability(self, client, db_session, hotel, user) -> None:
        """Should leave five of ten units free after admitting five for the same dates."""
        suite = Room(name="Family Suite", price=300.0, quantity=10, quantity_people=4, hotel_id=hotel.id)
        db_session.add(suite)
        db_session.commit()

        created = client.post(
            f"{API}/bookings",
            json=booking_payload(suite, user, "2024-08-10", "2024-08-14", quantity=5),
        )
        assert created.status_code == 201

        response = client.get(
            f"{API}/bookings/availability",
            params={"roomId": suite.id, "checkInDate": "2024-08-10", "checkOutDate": "2024-08-14"},
        )

        assert response.status_code == 200
        assert response.json() == {"availableQuantity": 5}

    def test_requested_quantity_too_large(self, client, room) -> None:
        """Should fail when the optional quantity exceeds what is free."""
        response = client.get(
            f"{API}/bookings/availability",
            params={"roomId": room.id, "checkInDate": "2024-05-01", "checkOutDate": "2024-05-02", "quantity": 3},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INSUFFICIENT_CAPACITY"

    def test_missing_dates(self, client, room) -> None:
        """Should answer 400 when dates are not supplied."""
        response = client.get(f"{API}/bookings/availability", params={"roomId": room.id})

        assert response.status_code == 400


class TestBookingQueries:
    """Tests for listing, reading and deleting bookings."""

    def test_filters_are_applied(self, client, db_session, room, user) -> None:
        """Should return only bookings matching the query filters."""
        make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3))
        make_booking(db_session, room, user, date(2024, 6, 1), date(2024, 6, 3), status=BookingStatus.CANCELLED)

        response = client.get(f"{API}/bookings", params={"status": "cancelled"})

        assert response.status_code == 200
        assert [b["check_in_date"] for b in response.json()] == ["2024-06-01"]

    def test_detail_includes_room_and_user(self, client, db_session, room, user) -> None:
        """Should embed the room with its hotel name and the guest summary."""
        booking = make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3))

        body = client.get(f"{API}/bookings/{booking.id}").json()

        assert body["room"]["name"] == "Deluxe Double"
        assert body["room"]["hotelName"] == "Riverside Hotel"
        assert body["user"]["email"] == "alice@example.com"

    def test_delete(self, client, db_session, room, user) -> None:
        """Should delete the booking and then report it missing."""
        booking = make_booking(db_session, room, user, date(2024, 5, 1), date(2024, 5, 3))

        response = client.delete(f"{API}/bookings/{booking.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Booking deleted successfully"}
        assert client.get(f"{API}/bookings/{booking.id}").status_code == 404
