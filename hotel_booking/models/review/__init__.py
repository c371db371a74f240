from hotel_booking.models.review.review import Review

__all__ = ["Review"]
