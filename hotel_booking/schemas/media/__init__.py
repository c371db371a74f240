from hotel_booking.schemas.media.media import (
    HotelImageResponse,
    HotelImageUpdate,
    RoomImageResponse,
    RoomImageUpdate,
)

__all__ = ["RoomImageResponse", "RoomImageUpdate", "HotelImageResponse", "HotelImageUpdate"]
