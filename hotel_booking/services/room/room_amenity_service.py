"""
Links between rooms and the amenities they offer.
"""

from typing import List

from sqlalchemy.orm import Session

from hotel_booking.models.room import Room, RoomService
from hotel_booking.repositories.amenity import AmenityRepository
from hotel_booking.repositories.room import RoomRepository, RoomServiceRepository
from hotel_booking.schemas.amenity import RoomServiceCreate, RoomServiceUpdate
from hotel_booking.services.base import BaseService


class RoomAmenityService(BaseService[RoomService, RoomServiceRepository]):

    def __init__(self, db_session: Session):
        super().__init__(RoomServiceRepository(db_session), db_session)
        self.rooms = RoomRepository(db_session)
        self.amenities = AmenityRepository(db_session)

    def services_for_room(self, room_id: int) -> List[RoomService]:
        self.rooms.get_by_id(room_id)
        return self.repository.find_by_room(room_id)

    def rooms_with_amenities(self, amenity_ids: List[int]) -> List[Room]:
        return self.rooms.find_with_any_amenity(amenity_ids)

    def links_for_amenity(self, service_id: int) -> List[RoomService]:
        self.amenities.get_by_id(service_id)
        return self.repository.find_by_amenity(service_id)

    def create(self, data: RoomServiceCreate) -> RoomService:
        self.rooms.get_by_id(data.room_id)
        self.amenities.get_by_id(data.service_id)
        return self.repository.create(RoomService(room_id=data.room_id, service_id=data.service_id))

    def update(self, link_id: int, data: RoomServiceUpdate) -> RoomService:
        link = self.repository.get_by_id(link_id)
        changes = data.changes()
        if "room_id" in changes:
            self.rooms.get_by_id(changes["room_id"])
        if "service_id" in changes:
            self.amenities.get_by_id(changes["service_id"])
        return self.repository.update(link, changes)
