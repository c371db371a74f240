"""Security module: token issuance and password hashing."""

from functools import lru_cache

from hotel_booking.config.settings import settings

from .jwt_handler import ACCESS_TOKEN, RESET_TOKEN, JWTManager
from .password_hasher import PasswordHasher


@lru_cache()
def get_jwt_manager() -> JWTManager:
    """JWT manager configured from settings"""
    return JWTManager(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    """Password hasher configured from settings"""
    return PasswordHasher(rounds=settings.PASSWORD_BCRYPT_ROUNDS)


__all__ = [
    "ACCESS_TOKEN",
    "RESET_TOKEN",
    "JWTManager",
    "PasswordHasher",
    "get_jwt_manager",
    "get_password_hasher",
]
