"""
Email utilities: configuration, message structure, and SMTP-based sending.
"""

from __future__ import annotations

import smtplib
from dataclasses import dataclass, field
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import List, Optional

from hotel_booking.config.settings import Settings, settings as default_settings
from hotel_booking.core.exceptions import EmailServiceError
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class EmailMessage:
    """Email message structure with validation."""
    subject: str
    to: List[str]
    body_text: Optional[str] = None
    body_html: Optional[str] = None
    from_email: Optional[str] = None
    headers: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.subject.strip():
            raise EmailServiceError("Subject cannot be empty")
        if not self.to:
            raise EmailServiceError("At least one recipient is required")
        if not self.body_text and not self.body_html:
            raise EmailServiceError("Either body_text or body_html must be provided")


@dataclass
class EmailConfig:
    """SMTP configuration."""
    smtp_host: str
    smtp_port: int
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True
    from_email: Optional[str] = None

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "EmailConfig":
        config = config or default_settings
        return cls(
            smtp_host=config.SMTP_HOST,
            smtp_port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
            from_email=config.EMAIL_FROM_ADDRESS,
        )


def build_message(message: EmailMessage, config: EmailConfig) -> MIMEMultipart:
    msg = MIMEMultipart('alternative')
    msg['Subject'] = message.subject
    msg['From'] = message.from_email or config.from_email or config.username or "no-reply@localhost"
    msg['To'] = ', '.join(message.to)
    for key, value in message.headers.items():
        msg[key] = value

    if message.body_text:
        msg.attach(MIMEText(message.body_text, 'plain'))
    if message.body_html:
        msg.attach(MIMEText(message.body_html, 'html'))
    return msg


def send_email(message: EmailMessage, config: Optional[EmailConfig] = None) -> None:
    """Send an email using SMTP."""
    config = config or EmailConfig.from_settings()
    msg = build_message(message, config)

    try:
        with smtplib.SMTP(config.smtp_host, config.smtp_port, timeout=30) as server:
            if config.use_tls:
                server.starttls()
            if config.username and config.password:
                server.login(config.username, config.password)
            server.send_message(msg, to_addrs=message.to)
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email: {e}")
        raise EmailServiceError(f"Failed to send email: {e}") from e

    logger.info(f"Email sent successfully to {len(message.to)} recipients")


class Mailer:
    """Mail collaborator used by services."""

    def __init__(self, config: Optional[EmailConfig] = None):
        self.config = config or EmailConfig.from_settings()

    def send(self, to: str, subject: str, body_text: str) -> None:
        send_email(EmailMessage(subject=subject, to=[to], body_text=body_text), self.config)
