from hotel_booking.models.room.room import Room, RoomService, UrlImageRoom

__all__ = ["Room", "RoomService", "UrlImageRoom"]
