"""
Booking endpoints.

Creation goes through the availability check; a request that exceeds the
free units for its dates is rejected without writing anything.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hotel_booking.api import deps
from hotel_booking.core.exceptions import InsufficientCapacityError
from hotel_booking.models.base import BookingStatus
from hotel_booking.schemas.booking import (
    AvailabilityResponse,
    BookingCreate,
    BookingDetail,
    BookingFilter,
    BookingResponse,
)
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.services.booking import AvailabilityService, BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    availability: AvailabilityService = Depends(deps.get_availability_service),
):
    return availability.admit_booking(payload)


@router.get("", response_model=List[BookingResponse])
def list_bookings(
    room_id: Optional[int] = Query(default=None),
    user_id: Optional[int] = Query(default=None),
    hotel_id: Optional[int] = Query(default=None),
    check_in_date: Optional[date] = Query(default=None),
    check_out_date: Optional[date] = Query(default=None),
    booking_status: Optional[BookingStatus] = Query(default=None, alias="status"),
    service: BookingService = Depends(deps.get_booking_service),
):
    filters = BookingFilter(
        room_id=room_id,
        user_id=user_id,
        hotel_id=hotel_id,
        check_in_date=check_in_date,
        check_out_date=check_out_date,
        status=booking_status,
    )
    return service.search(filters)


@router.get("/availability", response_model=AvailabilityResponse)
def check_availability(
    room_id: int = Query(..., alias="roomId"),
    check_in_date: date = Query(..., alias="checkInDate"),
    check_out_date: date = Query(..., alias="checkOutDate"),
    quantity: Optional[int] = Query(default=None, gt=0),
    availability: AvailabilityService = Depends(deps.get_availability_service),
):
    available = availability.available_quantity(room_id, check_in_date, check_out_date)
    if quantity is not None and quantity > available:
        raise InsufficientCapacityError(room_id=room_id, requested=quantity, available=available)
    return AvailabilityResponse(available_quantity=available)


@router.get("/{booking_id}", response_model=BookingDetail)
def get_booking(booking_id: int, service: BookingService = Depends(deps.get_booking_service)):
    return BookingDetail.from_booking(service.get_detail(booking_id))


@router.delete("/{booking_id}", response_model=MessageResponse)
def delete_booking(booking_id: int, service: BookingService = Depends(deps.get_booking_service)):
    service.delete(booking_id)
    return MessageResponse(message="Booking deleted successfully")
