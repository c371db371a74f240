"""Amenity catalogue endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hotel_booking.api import deps
from hotel_booking.schemas.amenity import AmenityCreate, AmenityResponse, AmenityUpdate
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.services.amenity import AmenityService

router = APIRouter(prefix="/amenities", tags=["Amenities"])


@router.post("", response_model=AmenityResponse, status_code=status.HTTP_201_CREATED)
def create_amenity(payload: AmenityCreate, service: AmenityService = Depends(deps.get_amenity_service)):
    return service.create(payload)


@router.get("", response_model=List[AmenityResponse])
def list_amenities(
    name: Optional[str] = Query(default=None),
    amenity_class: Optional[str] = Query(default=None, alias="Aclass"),
    service: AmenityService = Depends(deps.get_amenity_service),
):
    return service.search(name=name, amenity_class=amenity_class)


@router.get("/{amenity_id}", response_model=AmenityResponse)
def get_amenity(amenity_id: int, service: AmenityService = Depends(deps.get_amenity_service)):
    return service.get(amenity_id)


@router.put("/{amenity_id}", response_model=AmenityResponse)
def update_amenity(
    amenity_id: int,
    payload: AmenityUpdate,
    service: AmenityService = Depends(deps.get_amenity_service),
):
    return service.update(amenity_id, payload)


@router.delete("/{amenity_id}", response_model=MessageResponse)
def delete_amenity(amenity_id: int, service: AmenityService = Depends(deps.get_amenity_service)):
    service.delete(amenity_id)
    return MessageResponse(message="Amenity deleted successfully")
