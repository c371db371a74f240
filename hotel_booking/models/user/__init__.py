from hotel_booking.models.user.user import User

__all__ = ["User"]
