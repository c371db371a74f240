from hotel_booking.repositories.review.review_repository import ReviewRepository

__all__ = ["ReviewRepository"]
