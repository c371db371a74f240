"""Tests for token issuance and password hashing."""

from datetime import timedelta

import jwt
import pytest

from hotel_booking.core.exceptions import InvalidTokenError, TokenExpiredError
from hotel_booking.core.security import ACCESS_TOKEN, RESET_TOKEN, JWTManager, PasswordHasher


class TestJWTManager:
    """Tests for JWTManager."""

    def test_reset_token_claims(self, tokens) -> None:
        """Should carry the email and the reset type."""
        payload = tokens.verify_token(tokens.create_reset_token("a@example.com"), expected_type=RESET_TOKEN)

        assert payload["email"] == "a@example.com"
        assert payload["type"] == "reset"
        assert payload["exp"] - payload["iat"] == 3600

    def test_expired_token(self, tokens) -> None:
        """Should raise TokenExpiredError once the expiry has passed."""
        token = tokens.create_token("a@example.com", ACCESS_TOKEN, expires_delta=timedelta(seconds=-5))

        with pytest.raises(TokenExpiredError):
            tokens.verify_token(token)

    def test_wrong_secret(self, tokens) -> None:
        """Should reject a token signed with another key."""
        other = JWTManager(secret_key="someone-else", algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            tokens.verify_token(other.create_access_token("a@example.com"))

    def test_type_mismatch(self, tokens) -> None:
        """Should reject an access token where a reset token is expected."""
        with pytest.raises(InvalidTokenError):
            tokens.verify_token(tokens.create_access_token("a@example.com"), expected_type=RESET_TOKEN)

    def test_token_without_email(self, tokens) -> None:
        """Should reject a well-signed token with no email claim."""
        token = jwt.encode({"type": ACCESS_TOKEN}, "test-secret", algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            tokens.verify_token(token)


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_hash_and_verify(self, hasher) -> None:
        """Should verify the original password and nothing else."""
        hashed = hasher.hash("secret123")

        assert hashed != "secret123"
        assert hasher.verify("secret123", hashed)
        assert not hasher.verify("secret124", hashed)

    def test_verify_handles_garbage(self, hasher) -> None:
        """Should return False for empty input or a malformed hash."""
        assert not hasher.verify("", "")
        assert not hasher.verify("secret123", "not-a-bcrypt-hash")

    def test_rounds_are_bounded(self) -> None:
        """Should refuse cost factors bcrypt does not accept."""
        with pytest.raises(ValueError):
            PasswordHasher(rounds=3)
