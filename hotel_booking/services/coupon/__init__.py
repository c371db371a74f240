from hotel_booking.services.coupon.coupon_service import CouponService

__all__ = ["CouponService"]
