from hotel_booking.repositories.room.room_repository import (
    RoomImageRepository,
    RoomRepository,
    RoomServiceRepository,
)

__all__ = ["RoomRepository", "RoomImageRepository", "RoomServiceRepository"]
