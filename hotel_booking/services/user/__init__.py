from hotel_booking.services.user.auth_service import AuthService
from hotel_booking.services.user.user_service import UserService

__all__ = ["AuthService", "UserService"]
