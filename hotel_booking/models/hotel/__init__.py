from hotel_booking.models.hotel.hotel import Hotel, UrlImageHotel

__all__ = ["Hotel", "UrlImageHotel"]
