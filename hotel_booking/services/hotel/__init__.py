from hotel_booking.services.hotel.hotel_service import HotelService

__all__ = ["HotelService"]
