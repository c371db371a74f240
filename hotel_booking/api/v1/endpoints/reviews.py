"""Hotel review endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from hotel_booking.api import deps
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.schemas.review import HotelReview, ReviewCreate, ReviewResponse, ReviewUpdate
from hotel_booking.services.review import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def create_review(
    rating: int = Form(...),
    description: str = Form(...),
    hotel_id: int = Form(..., alias="hotelId"),
    guest_id: int = Form(..., alias="guestId"),
    file: Optional[UploadFile] = File(default=None),
    service: ReviewService = Depends(deps.get_review_service),
):
    payload = ReviewCreate(rating=rating, description=description, hotel_id=hotel_id, guest_id=guest_id)
    upload = deps.read_uploads([file])[0] if file is not None and file.filename else None
    return service.create(payload, upload)


@router.get("", response_model=List[HotelReview])
def reviews_for_hotel(
    hotel_id: int = Query(..., alias="hotelId"),
    service: ReviewService = Depends(deps.get_review_service),
):
    return [HotelReview.from_review(review) for review in service.list_for_hotel(hotel_id)]


@router.get("/all", response_model=List[ReviewResponse])
def all_reviews(service: ReviewService = Depends(deps.get_review_service)):
    return service.list_all()


@router.get("/{review_id}", response_model=ReviewResponse)
def get_review(review_id: int, service: ReviewService = Depends(deps.get_review_service)):
    return service.get(review_id)


@router.put("/{review_id}", response_model=ReviewResponse)
def update_review(review_id: int, payload: ReviewUpdate, service: ReviewService = Depends(deps.get_review_service)):
    return service.update(review_id, payload)


@router.delete("/{review_id}", response_model=MessageResponse)
def delete_review(review_id: int, service: ReviewService = Depends(deps.get_review_service)):
    service.delete(review_id)
    return MessageResponse(message="Review deleted successfully")
