from hotel_booking.schemas.amenity.amenity import (
    AmenityCreate,
    AmenityFilter,
    AmenityResponse,
    AmenityUpdate,
    RoomServiceCreate,
    RoomServiceResponse,
    RoomServiceUpdate,
    RoomSummary,
)

__all__ = [
    "AmenityCreate",
    "AmenityUpdate",
    "AmenityResponse",
    "AmenityFilter",
    "RoomServiceCreate",
    "RoomServiceUpdate",
    "RoomServiceResponse",
    "RoomSummary",
]
