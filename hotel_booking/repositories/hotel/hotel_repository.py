"""
Hotel and hotel image repositories.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from hotel_booking.core.exceptions import HotelNotFoundError, ResourceNotFoundError
from hotel_booking.models.hotel import Hotel, UrlImageHotel
from hotel_booking.repositories.base import BaseRepository


class HotelRepository(BaseRepository[Hotel]):
    not_found_error = HotelNotFoundError

    def __init__(self, db: Session):
        super().__init__(Hotel, db)

    def search(
        self,
        name: Optional[str] = None,
        type_hotel: Optional[str] = None,
        star: Optional[int] = None,
        payment: Optional[str] = None,
    ) -> List[Hotel]:
        """
        Filter hotels: substring match on name, exact match on the rest.
        Newest first.
        """
        stmt = select(Hotel).options(selectinload(Hotel.images)).order_by(Hotel.id.desc())
        if name:
            stmt = stmt.where(Hotel.name.contains(name))
        if type_hotel:
            stmt = stmt.where(Hotel.type_hotel == type_hotel)
        if star is not None:
            stmt = stmt.where(Hotel.star == star)
        if payment:
            stmt = stmt.where(Hotel.payment == payment)
        return list(self.db.scalars(stmt).all())

    def find_by_name(self, name: str) -> Optional[Hotel]:
        """Case-insensitive exact name lookup."""
        stmt = select(Hotel).where(func.lower(Hotel.name) == name.lower()).order_by(Hotel.id)
        return self.db.scalars(stmt).first()

    def all_maps(self) -> List[str]:
        """Raw map fields of every hotel in id order."""
        stmt = select(Hotel.map).where(Hotel.map.is_not(None)).order_by(Hotel.id)
        return list(self.db.scalars(stmt).all())


class HotelImageRepository(BaseRepository[UrlImageHotel]):

    def __init__(self, db: Session):
        super().__init__(UrlImageHotel, db)

    def get_by_id(self, id) -> UrlImageHotel:
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError("Hotel image", id, "Image not found")
        return entity

    def find_by_hotel(self, hotel_id: int) -> List[UrlImageHotel]:
        return self.find_by_criteria({"hotel_id": hotel_id})
