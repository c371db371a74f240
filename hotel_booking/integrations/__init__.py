"""External collaborators: image storage and mail delivery."""

from hotel_booking.integrations.mailer import EmailConfig, EmailMessage, Mailer, send_email
from hotel_booking.integrations.storage import StorageClient, StoredFile

__all__ = [
    "EmailConfig",
    "EmailMessage",
    "Mailer",
    "send_email",
    "StorageClient",
    "StoredFile",
]
