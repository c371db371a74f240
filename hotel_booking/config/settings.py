"""
Environment configuration for the hotel booking backend.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
import secrets
import string
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Set

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


def _generate_secret_key() -> str:
    """Generate a default secret key if not provided"""
    alphabet = string.ascii_letters + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(32))


def _split_list(value: str) -> List[str]:
    """Parse a JSON list or a comma-separated string into a list"""
    value = value.strip()
    if value.startswith('[') and value.endswith(']'):
        try:
            return [str(item).strip() for item in json.loads(value)]
        except json.JSONDecodeError:
            pass
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = "Hotel Booking API"
    API_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"

    # Database configuration
    DATABASE_URL: str = "sqlite:///./hotel_booking.db"
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Security configuration
    JWT_SECRET_KEY: str = Field(default_factory=_generate_secret_key)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    PASSWORD_BCRYPT_ROUNDS: int = 10

    # File storage
    STORAGE_PROVIDER: str = "local"
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE: int = 10485760
    ALLOWED_IMAGE_EXTENSIONS: str = "jpg,jpeg,png,gif,webp"
    CLOUDINARY_CLOUD_NAME: Optional[str] = None
    CLOUDINARY_API_KEY: Optional[str] = None
    CLOUDINARY_API_SECRET: Optional[str] = None
    CLOUDINARY_FOLDER: str = "hotel-booking"

    # Email configuration
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    EMAIL_FROM_ADDRESS: Optional[str] = None

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    ENABLE_STRUCTURED_LOGGING: bool = False
    LOG_SQL_QUERIES: bool = False

    # Business logic
    BOOKING_LOCK_ROOM_ON_ADMISSION: bool = True

    # Validators
    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name"""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @field_validator('STORAGE_PROVIDER')
    @classmethod
    def validate_storage_provider(cls, v: str) -> str:
        provider = v.lower()
        if provider not in {"local", "cloudinary"}:
            raise ValueError(f"Unsupported STORAGE_PROVIDER: {v}")
        return provider

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins as a list"""
        return _split_list(self.CORS_ORIGINS) or ["*"]

    @property
    def allowed_image_extensions(self) -> Set[str]:
        """Allowed upload extensions without leading dots"""
        return {ext.lstrip('.').lower() for ext in _split_list(self.ALLOWED_IMAGE_EXTENSIONS)}

    def get_database_url(self) -> str:
        """Get the database URL"""
        return self.DATABASE_URL


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
