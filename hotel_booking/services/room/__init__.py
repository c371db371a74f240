from hotel_booking.services.room.room_amenity_service import RoomAmenityService
from hotel_booking.services.room.room_service import RoomService

__all__ = ["RoomService", "RoomAmenityService"]
