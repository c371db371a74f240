from hotel_booking.schemas.review.review import HotelReview, ReviewCreate, ReviewResponse, ReviewUpdate

__all__ = ["ReviewCreate", "ReviewUpdate", "ReviewResponse", "HotelReview"]
