"""
bcrypt password hashing.
"""

import bcrypt

from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


class PasswordHasher:
    """
    Hashes passwords with a per-password salt and checks them later.

    ``rounds`` is bcrypt's cost factor; tests use the minimum to stay fast.
    """

    ROUNDS_RANGE = range(4, 32)

    def __init__(self, rounds: int = 10):
        if rounds not in self.ROUNDS_RANGE:
            raise ValueError(
                f"bcrypt rounds must be in [{self.ROUNDS_RANGE.start}, "
                f"{self.ROUNDS_RANGE.stop - 1}], got {rounds}"
            )
        self.rounds = rounds

    def hash(self, password: str) -> str:
        if not isinstance(password, str):
            raise TypeError("Password must be a string")
        if not password:
            raise ValueError("Password cannot be empty")
        digest = bcrypt.hashpw(password.encode(ENCODING), bcrypt.gensalt(rounds=self.rounds))
        return digest.decode(ENCODING)

    def verify(self, password: str, hashed_password: str) -> bool:
        """True when ``password`` matches ``hashed_password``; False for anything unusable."""
        if not (password and hashed_password):
            return False
        try:
            return bcrypt.checkpw(password.encode(ENCODING), hashed_password.encode(ENCODING))
        except ValueError:
            logger.warning("Stored password is not a valid bcrypt hash")
            return False
