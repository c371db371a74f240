"""Discount coupon endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from hotel_booking.api import deps
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.schemas.coupon import CouponCreate, CouponResponse, CouponUpdate
from hotel_booking.services.coupon import CouponService

router = APIRouter(prefix="/coupons", tags=["Coupons"])


@router.post("", response_model=CouponResponse, status_code=status.HTTP_201_CREATED)
def create_coupon(payload: CouponCreate, service: CouponService = Depends(deps.get_coupon_service)):
    return service.create(payload)


@router.get("", response_model=List[CouponResponse])
def list_coupons(service: CouponService = Depends(deps.get_coupon_service)):
    return service.list_all()


@router.get("/code/{code}", response_model=CouponResponse)
def get_coupon_by_code(code: str, service: CouponService = Depends(deps.get_coupon_service)):
    return service.get_by_code(code)


@router.get("/{coupon_id}", response_model=CouponResponse)
def get_coupon(coupon_id: int, service: CouponService = Depends(deps.get_coupon_service)):
    return service.get(coupon_id)


@router.put("/{coupon_id}", response_model=CouponResponse)
def update_coupon(coupon_id: int, payload: CouponUpdate, service: CouponService = Depends(deps.get_coupon_service)):
    return service.update(coupon_id, payload)


@router.delete("/{coupon_id}", response_model=MessageResponse)
def delete_coupon(coupon_id: int, service: CouponService = Depends(deps.get_coupon_service)):
    service.delete(coupon_id)
    return MessageResponse(message="Coupon deleted successfully")
