from hotel_booking.models.coupon.coupon import Coupon

__all__ = ["Coupon"]
