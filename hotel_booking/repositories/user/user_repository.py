"""
User repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import UserNotFoundError
from hotel_booking.models.user import User
from hotel_booking.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    not_found_error = UserNotFoundError

    def __init__(self, db: Session):
        super().__init__(User, db)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.scalar(select(User).where(User.email == email))

    def find_by_phone(self, number_phone: str) -> Optional[User]:
        return self.db.scalar(select(User).where(User.number_phone == number_phone))

    def search_by_name(self, name: Optional[str] = None) -> List[User]:
        """Users whose name contains ``name`` (all users when empty)."""
        stmt = select(User).order_by(User.id)
        if name:
            stmt = stmt.where(User.name.contains(name))
        return list(self.db.scalars(stmt).all())
