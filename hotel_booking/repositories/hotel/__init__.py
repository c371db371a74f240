from hotel_booking.repositories.hotel.hotel_repository import HotelImageRepository, HotelRepository

__all__ = ["HotelRepository", "HotelImageRepository"]
