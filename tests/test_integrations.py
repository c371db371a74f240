"""Tests for the image storage and mail collaborators."""

import smtplib

import pytest

from hotel_booking.core.exceptions import EmailServiceError, ValidationError
from hotel_booking.integrations import EmailConfig, EmailMessage, Mailer


class TestStorageClient:
    """Tests for StorageClient with the local provider."""

    def test_upload_then_delete(self, storage, tmp_path) -> None:
        """Should write the object under the upload dir and remove it on delete."""
        stored = storage.upload(b"png bytes", "room.PNG", folder="rooms")

        path = tmp_path / "uploads" / stored.file_name
        assert stored.file_name.startswith("rooms/")
        assert stored.file_name.endswith(".png")
        assert stored.url == f"/uploads/{stored.file_name}"
        assert path.read_bytes() == b"png bytes"

        assert storage.delete(stored.file_name) is True
        assert not path.exists()
        assert storage.delete(stored.file_name) is False

    def test_rejects_empty_file(self, storage) -> None:
        """Should refuse an empty upload."""
        with pytest.raises(ValidationError):
            storage.upload(b"", "empty.jpg")

    def test_rejects_escaping_reference(self, storage) -> None:
        """Should refuse references that point outside the upload dir."""
        with pytest.raises(ValidationError):
            storage.delete("../../etc/passwd")


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.sent = []
        self.logged_in = None
        self.tls = False
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def starttls(self):
        self.tls = True

    def login(self, username, password):
        self.logged_in = username

    def send_message(self, msg, to_addrs=None):
        self.sent.append((msg, to_addrs))


class TestMailer:
    """Tests for Mailer and the SMTP helpers."""

    @pytest.fixture(autouse=True)
    def fake_smtp(self, monkeypatch):
        FakeSMTP.instances = []
        monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)

    def test_send(self) -> None:
        """Should deliver the message through SMTP with TLS and login."""
        config = EmailConfig(
            smtp_host="smtp.test", smtp_port=587, username="bot", password="pw", from_email="noreply@test"
        )

        Mailer(config).send("guest@example.com", "Password Reset Request", "Your password reset token is: t")

        [server] = FakeSMTP.instances
        msg, recipients = server.sent[0]
        assert server.tls
        assert server.logged_in == "bot"
        assert recipients == ["guest@example.com"]
        assert msg["Subject"] == "Password Reset Request"

    def test_smtp_failure(self, monkeypatch) -> None:
        """Should wrap SMTP errors in EmailServiceError."""
        def refuse(*args, **kwargs):
            raise smtplib.SMTPConnectError(421, "busy")

        monkeypatch.setattr(smtplib, "SMTP", refuse)

        with pytest.raises(EmailServiceError):
            Mailer(EmailConfig(smtp_host="smtp.test", smtp_port=25)).send("a@example.com", "Hi", "body")

    def test_message_needs_recipient(self) -> None:
        """Should refuse a message without recipients."""
        with pytest.raises(EmailServiceError):
            EmailMessage(subject="Hi", to=[], body_text="body")
