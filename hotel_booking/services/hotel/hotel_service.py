"""
Hotel listing operations.
"""

from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import HotelNotFoundError, UserNotFoundError, ValidationError
from hotel_booking.integrations.storage import StorageClient
from hotel_booking.models.hotel import Hotel, UrlImageHotel
from hotel_booking.repositories.hotel import HotelImageRepository, HotelRepository
from hotel_booking.repositories.user import UserRepository
from hotel_booking.schemas.hotel import HotelCreate, HotelUpdate
from hotel_booking.services.base import BaseService, track_performance
from hotel_booking.services.media import Upload, discard_uploads, store_uploads


class HotelService(BaseService[Hotel, HotelRepository]):

    def __init__(self, db_session: Session, storage: StorageClient):
        super().__init__(HotelRepository(db_session), db_session)
        self.images = HotelImageRepository(db_session)
        self.users = UserRepository(db_session)
        self.storage = storage

    def _check_owner(self, owner_id: Optional[int]) -> None:
        if owner_id is not None and self.users.find_by_id(owner_id) is None:
            raise UserNotFoundError(owner_id)

    @track_performance("create_hotel")
    def create(self, data: HotelCreate, uploads: Sequence[Upload]) -> Hotel:
        """Create a hotel with at least one image."""
        if not uploads:
            raise ValidationError("No files uploaded", field_errors={"files": ["At least one file is required"]})
        self._check_owner(data.owner_id)

        stored = store_uploads(self.storage, uploads, folder="hotels")
        try:
            with self.transaction():
                hotel = self.repository.create(Hotel(**data.model_dump()), commit=False)
                for item in stored:
                    self.images.create(
                        UrlImageHotel(url=item.url, file_name=item.file_name, hotel_id=hotel.id),
                        commit=False,
                    )
        except Exception:
            discard_uploads(self.storage, stored)
            raise

        self.db.refresh(hotel)
        self._logger.info("Hotel created", extra={"hotel_id": hotel.id, "images": len(stored)})
        return hotel

    def search(
        self,
        name: Optional[str] = None,
        type_hotel: Optional[str] = None,
        star: Optional[int] = None,
        payment: Optional[str] = None,
    ) -> List[Hotel]:
        return self.repository.search(name=name, type_hotel=type_hotel, star=star, payment=payment)

    def districts(self) -> List[str]:
        """Unique trimmed districts across all hotels, first-seen order."""
        seen = {}
        for raw in self.repository.all_maps():
            for part in raw.split(","):
                district = part.strip()
                if district and district not in seen:
                    seen[district] = None
        return list(seen)

    def find_id_by_name(self, name: str) -> int:
        hotel = self.repository.find_by_name(name.strip())
        if hotel is None:
            raise HotelNotFoundError(message="Hotel not found")
        return hotel.id

    def update(self, hotel_id: int, data: HotelUpdate) -> Hotel:
        hotel = self.repository.get_by_id(hotel_id)
        changes = data.changes()
        self._check_owner(changes.get("owner_id"))
        return self.repository.update(hotel, changes)

    def delete(self, hotel_id: int) -> None:
        """Delete stored images, then the hotel and everything it owns."""
        hotel = self.repository.get_by_id(hotel_id)
        for image in hotel.images:
            self.storage.delete(image.file_name)
        for room in hotel.rooms:
            for image in room.images:
                self.storage.delete(image.file_name)
        self.repository.delete(hotel)
