from hotel_booking.schemas.coupon.coupon import CouponCreate, CouponResponse, CouponUpdate

__all__ = ["CouponCreate", "CouponUpdate", "CouponResponse"]
