"""
Hotel review operations.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ResourceNotFoundError
from hotel_booking.integrations.storage import StorageClient
from hotel_booking.models.review import Review
from hotel_booking.repositories.hotel import HotelRepository
from hotel_booking.repositories.review import ReviewRepository
from hotel_booking.repositories.user import UserRepository
from hotel_booking.schemas.review import ReviewCreate, ReviewUpdate
from hotel_booking.services.base import BaseService
from hotel_booking.services.media import Upload


class ReviewService(BaseService[Review, ReviewRepository]):

    def __init__(self, db_session: Session, storage: StorageClient):
        super().__init__(ReviewRepository(db_session), db_session)
        self.hotels = HotelRepository(db_session)
        self.users = UserRepository(db_session)
        self.storage = storage

    def create(self, data: ReviewCreate, upload: Optional[Upload] = None) -> Review:
        self.hotels.get_by_id(data.hotel_id)
        self.users.get_by_id(data.guest_id)

        file_url = None
        if upload is not None:
            filename, content = upload
            file_url = self.storage.upload(content, filename, folder="reviews").url

        review = Review(**data.model_dump(), file=file_url)
        return self.repository.create(review)

    def list_for_hotel(self, hotel_id: int) -> List[Review]:
        reviews = self.repository.find_with_relations(hotel_id)
        if not reviews:
            raise ResourceNotFoundError("Review", message="No reviews found for this hotel")
        return reviews

    def list_all(self) -> List[Review]:
        return self.repository.find_with_relations()

    def update(self, review_id: int, data: ReviewUpdate) -> Review:
        review = self.repository.get_by_id(review_id)
        return self.repository.update(review, data.changes())
