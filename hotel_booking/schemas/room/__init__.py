from hotel_booking.schemas.room.room import RoomCreate, RoomResponse, RoomUpdate

__all__ = ["RoomCreate", "RoomUpdate", "RoomResponse"]
