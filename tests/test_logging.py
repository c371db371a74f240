"""Tests for log redaction and the context logger."""

import logging

from hotel_booking.core.exceptions import HotelNotFoundError, InsufficientCapacityError
from hotel_booking.core.logging import ContextFilter, get_logger, redact, request_id


class TestRedact:
    """Tests for redact()."""

    def test_masks_credentials_recursively(self) -> None:
        """Should mask credential-like keys at any depth."""
        data = redact({"email": "a@example.com", "password": "x", "nested": {"access_token": "t"}})

        assert data == {
            "email": "a@example.com",
            "password": "[REDACTED]",
            "nested": {"access_token": "[REDACTED]"},
        }

    def test_matches_whole_words_only(self) -> None:
        """Should leave keys that merely contain a sensitive word untouched."""
        data = redact({
            "sort_key": "name",
            "monkey_patch": True,
            "api_key": "k",
            "accessToken": "t",
            "X-Authorization": "Bearer t",
        })

        assert data == {
            "sort_key": "name",
            "monkey_patch": True,
            "api_key": "[REDACTED]",
            "accessToken": "[REDACTED]",
            "X-Authorization": "[REDACTED]",
        }


class TestContextLogger:
    """Tests for get_logger()."""

    def test_bound_context_and_redaction(self, caplog) -> None:
        """Should merge bound context with call extras and redact secrets."""
        logger = get_logger("hotel_booking.tests").bind(component="bookings")

        with caplog.at_level(logging.INFO, logger="hotel_booking.tests"):
            logger.info("created", extra={"room_id": 3, "token": "abc"})

        record = caplog.records[-1]
        assert record.component == "bookings"
        assert record.room_id == 3
        assert record.token == "[REDACTED]"

    def test_filter_stamps_request_id(self) -> None:
        """Should copy the current request id onto the record."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        token = request_id.set("req-1")
        try:
            ContextFilter().filter(record)
        finally:
            request_id.reset(token)

        assert record.request_id == "req-1"


class TestExceptionDefaults:
    """Tests for exception class defaults."""

    def test_entity_not_found(self) -> None:
        """Should use the entity code, message and 404."""
        exc = HotelNotFoundError(7)

        assert exc.status_code == 404
        assert exc.to_dict()["error"] == {
            "code": "HOTEL_NOT_FOUND",
            "message": "Hotel not found.",
            "details": {"resource_type": "Hotel", "resource_id": 7},
        }

    def test_capacity_details(self) -> None:
        """Should carry the room and the shortfall."""
        exc = InsufficientCapacityError(room_id=1, requested=3, available=2)

        assert exc.status_code == 400
        assert exc.message == "Not enough rooms available for the selected dates"
        assert exc.details == {"room_id": 1, "requested": 3, "available": 2}
