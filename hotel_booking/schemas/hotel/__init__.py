from hotel_booking.schemas.hotel.hotel import (
    HotelCreate,
    HotelIdResponse,
    HotelNameSearch,
    HotelResponse,
    HotelUpdate,
)

__all__ = ["HotelCreate", "HotelUpdate", "HotelResponse", "HotelNameSearch", "HotelIdResponse"]
