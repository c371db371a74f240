"""
FastAPI dependencies shared by the endpoint modules.

Collaborators (database session, image storage, mailer) are provided
through small factory functions so tests can replace them with
``app.dependency_overrides``.

Example usage in a router:
    @router.get("/me")
    def read_me(current_user: User = Depends(deps.get_current_user)):
        return current_user
"""

from typing import List, Optional, Tuple

from fastapi import Depends, UploadFile
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import AuthenticationError
from hotel_booking.core.logging import user_id as user_id_var
from hotel_booking.core.security import (
    ACCESS_TOKEN,
    JWTManager,
    PasswordHasher,
    get_jwt_manager,
    get_password_hasher,
)
from hotel_booking.db.session import get_db
from hotel_booking.integrations import Mailer, StorageClient
from hotel_booking.models.user import User
from hotel_booking.repositories.user import UserRepository
from hotel_booking.services.amenity import AmenityService
from hotel_booking.services.booking import AvailabilityService, BookingService
from hotel_booking.services.coupon import CouponService
from hotel_booking.services.hotel import HotelService
from hotel_booking.services.media import HotelImageService, RoomImageService
from hotel_booking.services.review import ReviewService
from hotel_booking.services.room import RoomAmenityService, RoomService
from hotel_booking.services.user import AuthService, UserService

bearer_scheme = HTTPBearer(auto_error=False)


# --- Collaborators -------------------------------------------------------------

def get_storage() -> StorageClient:
    return StorageClient()


def get_mailer() -> Mailer:
    return Mailer()


def get_tokens() -> JWTManager:
    return get_jwt_manager()


def get_hasher() -> PasswordHasher:
    return get_password_hasher()


# --- Authentication ------------------------------------------------------------

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    tokens: JWTManager = Depends(get_tokens),
) -> User:
    """
    Resolve the bearer token to a stored user.

    Raises:
        AuthenticationError: No bearer token was sent
        InvalidTokenError / TokenExpiredError: Token failed verification
        AuthenticationError: Token names an email with no account
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication token is missing")

    payload = tokens.verify_token(credentials.credentials, expected_type=ACCESS_TOKEN)
    user = UserRepository(db).find_by_email(payload["email"])
    if user is None:
        raise AuthenticationError("User for this token no longer exists")

    user_id_var.set(str(user.id))
    return user


# --- Uploads -------------------------------------------------------------------

def read_uploads(files: Optional[List[UploadFile]]) -> List[Tuple[str, bytes]]:
    """Read multipart files into (filename, content) pairs."""
    return [(upload.filename or "", upload.file.read()) for upload in files or []]


# --- Service factories ---------------------------------------------------------

def get_user_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: JWTManager = Depends(get_tokens),
    storage: StorageClient = Depends(get_storage),
) -> UserService:
    return UserService(db, hasher, tokens, storage)


def get_auth_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: JWTManager = Depends(get_tokens),
    mailer: Mailer = Depends(get_mailer),
) -> AuthService:
    return AuthService(db, hasher, tokens, mailer)


def get_hotel_service(
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
) -> HotelService:
    return HotelService(db, storage)


def get_room_service(
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
) -> RoomService:
    return RoomService(db, storage)


def get_room_amenity_service(db: Session = Depends(get_db)) -> RoomAmenityService:
    return RoomAmenityService(db)


def get_review_service(
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
) -> ReviewService:
    return ReviewService(db, storage)


def get_amenity_service(db: Session = Depends(get_db)) -> AmenityService:
    return AmenityService(db)


def get_coupon_service(db: Session = Depends(get_db)) -> CouponService:
    return CouponService(db)


def get_room_image_service(
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
) -> RoomImageService:
    return RoomImageService(db, storage)


def get_hotel_image_service(
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage),
) -> HotelImageService:
    return HotelImageService(db, storage)


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    return AvailabilityService(db)


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    return BookingService(db)


__all__ = [
    "get_db",
    "get_storage",
    "get_mailer",
    "get_tokens",
    "get_hasher",
    "get_current_user",
    "read_uploads",
    "get_user_service",
    "get_auth_service",
    "get_hotel_service",
    "get_room_service",
    "get_room_amenity_service",
    "get_review_service",
    "get_amenity_service",
    "get_coupon_service",
    "get_room_image_service",
    "get_hotel_image_service",
    "get_availability_service",
    "get_booking_service",
]
