from hotel_booking.repositories.amenity.amenity_repository import AmenityRepository

__all__ = ["AmenityRepository"]
