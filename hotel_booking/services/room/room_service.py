"""
Room operations.
"""

from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ResourceNotFoundError
from hotel_booking.integrations.storage import StorageClient
from hotel_booking.models.room import Room, UrlImageRoom
from hotel_booking.repositories.hotel import HotelRepository
from hotel_booking.repositories.room import RoomImageRepository, RoomRepository
from hotel_booking.schemas.room import RoomCreate, RoomUpdate
from hotel_booking.services.base import BaseService, track_performance
from hotel_booking.services.media import Upload, discard_uploads, store_uploads


class RoomService(BaseService[Room, RoomRepository]):

    def __init__(self, db_session: Session, storage: StorageClient):
        super().__init__(RoomRepository(db_session), db_session)
        self.hotels = HotelRepository(db_session)
        self.images = RoomImageRepository(db_session)
        self.storage = storage

    @track_performance("create_room")
    def create(self, data: RoomCreate, uploads: Sequence[Upload] = ()) -> Room:
        self.hotels.get_by_id(data.hotel_id)

        stored = store_uploads(self.storage, uploads, folder="rooms") if uploads else []
        try:
            with self.transaction():
                room = self.repository.create(Room(**data.model_dump()), commit=False)
                for item in stored:
                    self.images.create(
                        UrlImageRoom(url=item.url, file_name=item.file_name, room_id=room.id),
                        commit=False,
                    )
        except Exception:
            discard_uploads(self.storage, stored)
            raise

        self.db.refresh(room)
        self._logger.info("Room created", extra={"room_id": room.id, "hotel_id": room.hotel_id})
        return room

    def list_rooms(self, hotel_id: Optional[int] = None) -> List[Room]:
        rooms = self.repository.find_by_hotel(hotel_id)
        if not rooms:
            raise ResourceNotFoundError("Room", message="No rooms found.")
        return rooms

    def update(self, room_id: int, data: RoomUpdate) -> Room:
        room = self.repository.get_by_id(room_id)
        return self.repository.update(room, data.changes())

    def delete(self, room_id: int) -> None:
        """Delete stored images, amenity links and bookings, then the room."""
        room = self.repository.get_by_id(room_id)
        for image in room.images:
            self.storage.delete(image.file_name)
        self.repository.delete(room)
