from hotel_booking.services.amenity.amenity_service import AmenityService

__all__ = ["AmenityService"]
