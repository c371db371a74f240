"""
Amenity repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ResourceNotFoundError
from hotel_booking.models.amenity import Amenity
from hotel_booking.repositories.base import BaseRepository


class AmenityRepository(BaseRepository[Amenity]):

    def __init__(self, db: Session):
        super().__init__(Amenity, db)

    def get_by_id(self, id) -> Amenity:
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError("Amenity", id, "Amenity not found")
        return entity

    def search(self, name: Optional[str] = None, amenity_class: Optional[str] = None) -> List[Amenity]:
        stmt = select(Amenity).order_by(Amenity.id)
        if name:
            stmt = stmt.where(Amenity.name.contains(name))
        if amenity_class:
            stmt = stmt.where(Amenity.amenity_class == amenity_class)
        return list(self.db.scalars(stmt).all())
