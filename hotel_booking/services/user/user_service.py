"""
User account operations: registration, login, profile and password changes.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import AuthenticationError, DuplicateEntryError, UserNotFoundError
from hotel_booking.core.security import JWTManager, PasswordHasher
from hotel_booking.integrations.storage import StorageClient
from hotel_booking.models.base import UserType
from hotel_booking.models.user import User
from hotel_booking.repositories.user import UserRepository
from hotel_booking.schemas.user import PasswordUpdate, UserRegister, UserUpdate
from hotel_booking.services.base import BaseService, track_performance


class UserService(BaseService[User, UserRepository]):

    def __init__(
        self,
        db_session: Session,
        hasher: PasswordHasher,
        tokens: JWTManager,
        storage: Optional[StorageClient] = None,
    ):
        super().__init__(UserRepository(db_session), db_session)
        self.hasher = hasher
        self.tokens = tokens
        self.storage = storage

    def _ensure_unique(self, email: Optional[str], number_phone: Optional[str], exclude_id: Optional[int] = None):
        for found in (
            self.repository.find_by_email(email) if email else None,
            self.repository.find_by_phone(number_phone) if number_phone else None,
        ):
            if found is not None and found.id != exclude_id:
                raise DuplicateEntryError("Email or phone number already exists")

    @track_performance("register_user")
    def register(self, data: UserRegister) -> User:
        self._ensure_unique(data.email, data.number_phone)
        user = User(
            name=data.name,
            email=data.email,
            password=self.hasher.hash(data.password),
            number_phone=data.number_phone,
            type=data.type or UserType.USER,
        )
        user = self.repository.create(user)
        self._logger.info("User registered", extra={"user_id": user.id})
        return user

    def login(self, email: str, password: str) -> dict:
        """
        Verify credentials and issue an access token.

        Raises:
            UserNotFoundError: Unknown email
            AuthenticationError: Wrong password
        """
        user = self.repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(message="User not found")
        if not self.hasher.verify(password, user.password):
            self._logger.warning("Login failed: wrong password", extra={"user_id": user.id})
            raise AuthenticationError("Login failed, check your password")

        token = self.tokens.create_access_token(user.email, user_type=user.type.value)
        return {
            "message": "successful",
            "token": token,
            "name": user.name,
            "type": user.type,
            "id": user.id,
        }

    def search(self, name: Optional[str] = None) -> List[User]:
        return self.repository.search_by_name(name)

    def get_by_email(self, email: str) -> User:
        user = self.repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError()
        return user

    def update(self, user_id: int, data: UserUpdate) -> User:
        user = self.repository.get_by_id(user_id)
        changes = data.changes()
        self._ensure_unique(changes.get("email"), changes.get("number_phone"), exclude_id=user.id)
        if "password" in changes:
            changes["password"] = self.hasher.hash(changes["password"])
        return self.repository.update(user, changes)

    def update_password(self, data: PasswordUpdate) -> None:
        user = self.repository.get_by_id(data.user_id)
        if not self.hasher.verify(data.current_password, user.password):
            raise AuthenticationError("Invalid current password")
        self.repository.update(user, {"password": self.hasher.hash(data.new_password)})
        self._logger.info("Password updated", extra={"user_id": user.id})

    def update_avatar(self, user_id: int, filename: str, content: bytes) -> User:
        user = self.repository.get_by_id(user_id)
        stored = self.storage.upload(content, filename, folder="avatars")
        return self.repository.update(user, {"url": stored.url})

    def delete(self, user_id: int) -> None:
        user = self.repository.get_by_id(user_id)
        self.repository.delete(user)
