from hotel_booking.repositories.user.user_repository import UserRepository

__all__ = ["UserRepository"]
