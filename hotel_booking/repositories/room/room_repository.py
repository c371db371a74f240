"""
Room, room image and room service repositories.
"""

from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from hotel_booking.core.exceptions import ResourceNotFoundError, RoomNotFoundError
from hotel_booking.models.room import Room, RoomService, UrlImageRoom
from hotel_booking.repositories.base import BaseRepository


class RoomRepository(BaseRepository[Room]):
    not_found_error = RoomNotFoundError

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def get_for_update(self, room_id: int) -> Room:
        """
        Load a room with ``SELECT ... FOR UPDATE``.

        Holds the row lock until the surrounding transaction ends; SQLite
        ignores the clause.
        """
        room = self.db.scalar(
            select(Room).where(Room.id == room_id).with_for_update()
        )
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def find_by_hotel(self, hotel_id: Optional[int] = None) -> List[Room]:
        """Rooms (with amenities and images loaded), optionally for one hotel."""
        stmt = (
            select(Room)
            .options(
                selectinload(Room.services).selectinload(RoomService.amenity),
                selectinload(Room.images),
            )
            .order_by(Room.id)
        )
        if hotel_id is not None:
            stmt = stmt.where(Room.hotel_id == hotel_id)
        return list(self.db.scalars(stmt).all())

    def find_with_any_amenity(self, amenity_ids: Iterable[int]) -> List[Room]:
        """Distinct rooms offering at least one of the given amenities."""
        stmt = (
            select(Room)
            .where(Room.id.in_(
                select(RoomService.room_id).where(RoomService.service_id.in_(list(amenity_ids)))
            ))
            .options(selectinload(Room.services).selectinload(RoomService.amenity))
            .order_by(Room.id)
        )
        return list(self.db.scalars(stmt).all())


class RoomImageRepository(BaseRepository[UrlImageRoom]):

    def __init__(self, db: Session):
        super().__init__(UrlImageRoom, db)

    def get_by_id(self, id) -> UrlImageRoom:
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError("Room image", id, "Image not found")
        return entity

    def find_by_room(self, room_id: int) -> List[UrlImageRoom]:
        return self.find_by_criteria({"room_id": room_id})


class RoomServiceRepository(BaseRepository[RoomService]):

    def __init__(self, db: Session):
        super().__init__(RoomService, db)

    def get_by_id(self, id) -> RoomService:
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError("Room amenity", id, "Room amenity not found")
        return entity

    def find_by_room(self, room_id: int) -> List[RoomService]:
        stmt = (
            select(RoomService)
            .where(RoomService.room_id == room_id)
            .options(selectinload(RoomService.amenity))
            .order_by(RoomService.id)
        )
        return list(self.db.scalars(stmt).all())

    def find_by_amenity(self, service_id: int) -> List[RoomService]:
        stmt = (
            select(RoomService)
            .where(RoomService.service_id == service_id)
            .options(selectinload(RoomService.room))
            .order_by(RoomService.id)
        )
        return list(self.db.scalars(stmt).all())
