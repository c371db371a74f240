"""
Password reset by emailed token.
"""

from sqlalchemy.orm import Session

from hotel_booking.core.exceptions import UserNotFoundError
from hotel_booking.core.security import RESET_TOKEN, JWTManager, PasswordHasher
from hotel_booking.integrations.mailer import Mailer
from hotel_booking.models.user import User
from hotel_booking.repositories.user import UserRepository
from hotel_booking.services.base import BaseService

RESET_SUBJECT = "Password Reset Request"


class AuthService(BaseService[User, UserRepository]):

    def __init__(self, db_session: Session, hasher: PasswordHasher, tokens: JWTManager, mailer: Mailer):
        super().__init__(UserRepository(db_session), db_session)
        self.hasher = hasher
        self.tokens = tokens
        self.mailer = mailer

    def forgot_password(self, email: str) -> None:
        """Mail a one-hour reset token to a registered address."""
        user = self.repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(message="User not found")

        token = self.tokens.create_reset_token(user.email)
        self.mailer.send(
            to=user.email,
            subject=RESET_SUBJECT,
            body_text=f"Your password reset token is: {token}",
        )
        self._logger.info("Password reset email sent", extra={"user_id": user.id})

    def reset_password(self, token: str, new_password: str) -> None:
        """
        Set a new password for the email carried by a reset token.

        Raises:
            TokenExpiredError / InvalidTokenError: Bad token (401)
            UserNotFoundError: Token names an unknown email
        """
        payload = self.tokens.verify_token(token, expected_type=RESET_TOKEN)
        user = self.repository.find_by_email(payload["email"])
        if user is None:
            raise UserNotFoundError(message="User not found")

        self.repository.update(user, {"password": self.hasher.hash(new_password)})
        self._logger.info("Password reset", extra={"user_id": user.id})
