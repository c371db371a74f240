"""
Review repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from hotel_booking.core.exceptions import ResourceNotFoundError
from hotel_booking.models.review import Review
from hotel_booking.repositories.base import BaseRepository


class ReviewRepository(BaseRepository[Review]):

    def __init__(self, db: Session):
        super().__init__(Review, db)

    def get_by_id(self, id) -> Review:
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError("Review", id, "Review not found")
        return entity

    def find_with_relations(self, hotel_id: Optional[int] = None) -> List[Review]:
        """Reviews with hotel and guest loaded, newest first."""
        stmt = (
            select(Review)
            .options(selectinload(Review.hotel), selectinload(Review.guest))
            .order_by(Review.id.desc())
        )
        if hotel_id is not None:
            stmt = stmt.where(Review.hotel_id == hotel_id)
        return list(self.db.scalars(stmt).all())
