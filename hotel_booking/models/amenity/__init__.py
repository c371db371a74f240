from hotel_booking.models.amenity.amenity import Amenity

__all__ = ["Amenity"]
