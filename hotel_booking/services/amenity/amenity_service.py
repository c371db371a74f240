"""
Amenity catalogue operations.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hotel_booking.models.amenity import Amenity
from hotel_booking.repositories.amenity import AmenityRepository
from hotel_booking.schemas.amenity import AmenityCreate, AmenityUpdate
from hotel_booking.services.base import BaseService


class AmenityService(BaseService[Amenity, AmenityRepository]):

    def __init__(self, db_session: Session):
        super().__init__(AmenityRepository(db_session), db_session)

    def create(self, data: AmenityCreate) -> Amenity:
        return self.repository.create(Amenity(**data.model_dump()))

    def search(self, name: Optional[str] = None, amenity_class: Optional[str] = None) -> List[Amenity]:
        return self.repository.search(name=name, amenity_class=amenity_class)

    def update(self, amenity_id: int, data: AmenityUpdate) -> Amenity:
        amenity = self.repository.get_by_id(amenity_id)
        return self.repository.update(amenity, data.changes())
