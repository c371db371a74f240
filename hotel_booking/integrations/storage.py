"""
Image storage client.

Stores uploaded image bytes with the configured provider and returns the
public URL together with the reference needed to delete it later.
Providers: ``local`` (files under UPLOAD_DIR) and ``cloudinary``.
"""

import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Set

from hotel_booking.config.settings import Settings, settings as default_settings
from hotel_booking.core.exceptions import StorageServiceError, ValidationError
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class StoredFile:
    """Result of an upload."""
    url: str
    file_name: str


class StorageClient:
    """Client for image storage operations"""

    def __init__(self, provider_name: Optional[str] = None, config: Optional[Settings] = None):
        self.config = config or default_settings
        self.provider_name = provider_name or self.config.STORAGE_PROVIDER
        self._cloudinary_ready = False

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @property
    def allowed_extensions(self) -> Set[str]:
        return self.config.allowed_image_extensions

    def validate(self, filename: str, data: bytes) -> str:
        """
        Check extension and size of an upload.

        Returns:
            The normalised extension (without dot)

        Raises:
            ValidationError: If the file is empty, too large or not an image
        """
        extension = Path(filename or "").suffix.lstrip(".").lower()
        if extension not in self.allowed_extensions:
            raise ValidationError(
                f"File type '{extension or 'unknown'}' is not allowed",
                field_errors={"files": [f"Allowed types: {', '.join(sorted(self.allowed_extensions))}"]},
            )
        if not data:
            raise ValidationError("Uploaded file is empty", field_errors={"files": ["Empty file"]})
        if len(data) > self.config.MAX_UPLOAD_SIZE:
            raise ValidationError(
                "Uploaded file is too large",
                field_errors={"files": [f"Maximum size is {self.config.MAX_UPLOAD_SIZE} bytes"]},
            )
        return extension

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def upload(self, data: bytes, filename: str, folder: str = "images") -> StoredFile:
        """Upload an image and return its URL and storage reference"""
        extension = self.validate(filename, data)
        reference = f"{folder}/{uuid.uuid4().hex}.{extension}"

        try:
            if self.provider_name == "cloudinary":
                stored = self._upload_cloudinary(data, reference)
            else:
                stored = self._upload_local(data, reference)
        except (OSError, RuntimeError) as e:
            logger.error(f"File upload error: {e}")
            raise StorageServiceError(f"Failed to upload file: {e}") from e

        logger.info("File uploaded", extra={"provider": self.provider_name, "file_name": stored.file_name})
        return stored

    def delete(self, file_name: Optional[str]) -> bool:
        """
        Delete a stored object by reference.

        Returns False when there was nothing to delete.
        """
        if not file_name:
            return False

        try:
            if self.provider_name == "cloudinary":
                deleted = self._delete_cloudinary(file_name)
            else:
                deleted = self._delete_local(file_name)
        except (OSError, RuntimeError) as e:
            logger.error(f"File delete error: {e}")
            raise StorageServiceError(f"Failed to delete file: {e}") from e

        logger.info("File deleted", extra={"provider": self.provider_name, "file_name": file_name})
        return deleted

    # -------------------------------------------------------------------------
    # Local provider
    # -------------------------------------------------------------------------

    def _local_path(self, reference: str) -> Path:
        root = Path(self.config.UPLOAD_DIR).resolve()
        path = (root / reference).resolve()
        if root not in path.parents:
            raise ValidationError("Invalid file reference")
        return path

    def _upload_local(self, data: bytes, reference: str) -> StoredFile:
        path = self._local_path(reference)
        os.makedirs(path.parent, exist_ok=True)
        path.write_bytes(data)
        url = f"{self.config.UPLOAD_URL_PREFIX.rstrip('/')}/{reference}"
        return StoredFile(url=url, file_name=reference)

    def _delete_local(self, reference: str) -> bool:
        path = self._local_path(reference)
        if not path.exists():
            return False
        path.unlink()
        return True

    # -------------------------------------------------------------------------
    # Cloudinary provider
    # -------------------------------------------------------------------------

    def _init_cloudinary(self):
        import cloudinary

        if not self._cloudinary_ready:
            cloudinary.config(
                cloud_name=self.config.CLOUDINARY_CLOUD_NAME,
                api_key=self.config.CLOUDINARY_API_KEY,
                api_secret=self.config.CLOUDINARY_API_SECRET,
                secure=True,
            )
            self._cloudinary_ready = True

    def _upload_cloudinary(self, data: bytes, reference: str) -> StoredFile:
        import cloudinary.exceptions
        import cloudinary.uploader

        self._init_cloudinary()
        public_id = f"{self.config.CLOUDINARY_FOLDER}/{reference.rsplit('.', 1)[0]}"
        try:
            result = cloudinary.uploader.upload(data, public_id=public_id, resource_type="image")
        except cloudinary.exceptions.Error as e:
            raise RuntimeError(str(e)) from e
        return StoredFile(url=result["secure_url"], file_name=result["public_id"])

    def _delete_cloudinary(self, public_id: str) -> bool:
        import cloudinary.exceptions
        import cloudinary.uploader

        self._init_cloudinary()
        try:
            result = cloudinary.uploader.destroy(public_id)
        except cloudinary.exceptions.Error as e:
            raise RuntimeError(str(e)) from e
        return result.get("result") == "ok"
