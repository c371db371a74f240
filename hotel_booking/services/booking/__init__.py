from hotel_booking.services.booking.availability_service import AvailabilityService
from hotel_booking.services.booking.booking_service import BookingService

__all__ = ["AvailabilityService", "BookingService"]
