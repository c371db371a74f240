from hotel_booking.repositories.coupon.coupon_repository import CouponRepository

__all__ = ["CouponRepository"]
