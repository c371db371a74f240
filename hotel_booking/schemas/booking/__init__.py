from hotel_booking.schemas.booking.booking import (
    AvailabilityResponse,
    BookingCreate,
    BookingDetail,
    BookingFilter,
    BookingResponse,
)

__all__ = [
    "BookingCreate",
    "BookingFilter",
    "BookingResponse",
    "BookingDetail",
    "AvailabilityResponse",
]
