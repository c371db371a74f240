"""
JWT token management utilities.

Tokens carry the user's email and a token type ("access" or "reset")
and expire after a fixed window (one hour by default).
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from hotel_booking.core.exceptions import InvalidTokenError, TokenExpiredError
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)

ACCESS_TOKEN = "access"
RESET_TOKEN = "reset"


class JWTManager:
    """
    JWT token manager for authentication.

    Issues signed tokens carrying ``{email, type}`` and verifies them,
    failing closed with a 401 exception on any defect.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_EXPIRE_MINUTES = 60

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: str = DEFAULT_ALGORITHM,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
    ):
        """
        Initialize JWT manager.

        Args:
            secret_key: Secret key for signing tokens (auto-generated if None)
            algorithm: JWT algorithm (default: HS256)
            expire_minutes: Token lifetime in minutes
        """
        self.secret_key = secret_key or secrets.token_urlsafe(32)
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_token(
        self,
        email: str,
        token_type: str = ACCESS_TOKEN,
        additional_claims: Optional[Dict[str, Any]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a signed token.

        Args:
            email: Subject email address
            token_type: "access" or "reset"
            additional_claims: Extra claims to include
            expires_delta: Custom expiration time

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))

        payload = {
            "email": email,
            "type": token_type,
            "iat": now,
            "exp": expire,
        }
        if additional_claims:
            payload.update(additional_claims)

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"{token_type} token created")
        return token

    def create_access_token(self, email: str, **claims: Any) -> str:
        return self.create_token(email, ACCESS_TOKEN, claims or None)

    def create_reset_token(self, email: str) -> str:
        return self.create_token(email, RESET_TOKEN)

    def verify_token(self, token: str, expected_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Verify and decode a token.

        Args:
            token: JWT token to verify
            expected_type: Reject tokens whose "type" claim differs

        Returns:
            Decoded token payload

        Raises:
            TokenExpiredError: If the token is expired
            InvalidTokenError: If the token is malformed, tampered or of the wrong type
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError(token_type=expected_type or ACCESS_TOKEN)
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token verification failed: {type(e).__name__}")
            raise InvalidTokenError(token_type=expected_type or ACCESS_TOKEN)

        if expected_type and payload.get("type") != expected_type:
            raise InvalidTokenError(token_type=expected_type)
        if not payload.get("email"):
            raise InvalidTokenError(token_type=expected_type or ACCESS_TOKEN)
        return payload
