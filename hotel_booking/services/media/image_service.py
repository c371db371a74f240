"""
Image record bookkeeping for rooms and hotels.

Each record pairs a public URL with the storage reference used to delete
the stored object.
"""

from typing import Iterable, List, Sequence, Tuple

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import ResourceNotFoundError, ValidationError
from hotel_booking.integrations.storage import StorageClient, StoredFile
from hotel_booking.models.hotel import UrlImageHotel
from hotel_booking.models.room import UrlImageRoom
from hotel_booking.repositories.hotel import HotelImageRepository, HotelRepository
from hotel_booking.repositories.room import RoomImageRepository, RoomRepository
from hotel_booking.services.base import BaseService

# (original filename, content)
Upload = Tuple[str, bytes]


def store_uploads(storage: StorageClient, uploads: Sequence[Upload], folder: str) -> List[StoredFile]:
    """Upload every file; on failure remove what was already stored."""
    stored: List[StoredFile] = []
    try:
        for filename, content in uploads:
            stored.append(storage.upload(content, filename, folder=folder))
    except Exception:
        discard_uploads(storage, stored)
        raise
    return stored


def discard_uploads(storage: StorageClient, stored: Iterable[StoredFile]) -> None:
    for item in stored:
        storage.delete(item.file_name)


class RoomImageService(BaseService[UrlImageRoom, RoomImageRepository]):

    def __init__(self, db_session: Session, storage: StorageClient):
        super().__init__(RoomImageRepository(db_session), db_session)
        self.rooms = RoomRepository(db_session)
        self.storage = storage

    def add_images(self, room_id: int, uploads: Sequence[Upload], commit: bool = True) -> List[UrlImageRoom]:
        if not uploads:
            raise ValidationError("No files uploaded", field_errors={"files": ["At least one file is required"]})
        self.rooms.get_by_id(room_id)

        stored = store_uploads(self.storage, uploads, folder="rooms")
        try:
            with self.transaction():
                records = [
                    self.repository.create(
                        UrlImageRoom(url=item.url, file_name=item.file_name, room_id=room_id),
                        commit=False,
                    )
                    for item in stored
                ]
        except Exception:
            discard_uploads(self.storage, stored)
            raise
        return records

    def list_for_room(self, room_id: int) -> List[UrlImageRoom]:
        images = self.repository.find_by_room(room_id)
        if not images:
            raise ResourceNotFoundError("Room image", message="urlRoom not found")
        return images

    def list_all(self) -> List[UrlImageRoom]:
        images = self.repository.find_all()
        if not images:
            raise ResourceNotFoundError("Room image", message="No UrlImageRoom records found")
        return images

    def update(self, image_id: int, url: str, room_id: int) -> UrlImageRoom:
        image = self.repository.get_by_id(image_id)
        self.rooms.get_by_id(room_id)
        return self.repository.update(image, {"url": url, "room_id": room_id})

    def delete(self, image_id: int) -> None:
        image = self.repository.get_by_id(image_id)
        self.storage.delete(image.file_name)
        self.repository.delete(image)


class HotelImageService(BaseService[UrlImageHotel, HotelImageRepository]):

    def __init__(self, db_session: Session, storage: StorageClient):
        super().__init__(HotelImageRepository(db_session), db_session)
        self.hotels = HotelRepository(db_session)
        self.storage = storage

    def add_images(self, hotel_id: int, uploads: Sequence[Upload]) -> List[UrlImageHotel]:
        if not uploads:
            raise ValidationError("No files uploaded", field_errors={"files": ["At least one file is required"]})
        self.hotels.get_by_id(hotel_id)

        stored = store_uploads(self.storage, uploads, folder="hotels")
        try:
            with self.transaction():
                records = [
                    self.repository.create(
                        UrlImageHotel(url=item.url, file_name=item.file_name, hotel_id=hotel_id),
                        commit=False,
                    )
                    for item in stored
                ]
        except Exception:
            discard_uploads(self.storage, stored)
            raise
        return records

    def list_for_hotel(self, hotel_id: int) -> List[UrlImageHotel]:
        images = self.repository.find_by_hotel(hotel_id)
        if not images:
            raise ResourceNotFoundError("Hotel image", message="urlHotel not found")
        return images

    def list_all(self) -> List[UrlImageHotel]:
        images = self.repository.find_all()
        if not images:
            raise ResourceNotFoundError("Hotel image", message="No UrlImageHotel records found")
        return images

    def update(self, image_id: int, url: str, hotel_id: int) -> UrlImageHotel:
        image = self.repository.get_by_id(image_id)
        self.hotels.get_by_id(hotel_id)
        return self.repository.update(image, {"url": url, "hotel_id": hotel_id})

    def delete(self, image_id: int) -> None:
        image = self.repository.get_by_id(image_id)
        self.storage.delete(image.file_name)
        self.repository.delete(image)
