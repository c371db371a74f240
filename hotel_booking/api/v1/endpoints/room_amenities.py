"""Room-amenity link endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from hotel_booking.api import deps
from hotel_booking.schemas.amenity import RoomServiceCreate, RoomServiceResponse, RoomServiceUpdate
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.services.room import RoomAmenityService

router = APIRouter(prefix="/room-amenities", tags=["Room Amenities"])


@router.post("", response_model=RoomServiceResponse, status_code=status.HTTP_201_CREATED)
def create_link(payload: RoomServiceCreate, service: RoomAmenityService = Depends(deps.get_room_amenity_service)):
    return service.create(payload)


@router.get("/{service_id}", response_model=List[RoomServiceResponse])
def links_for_amenity(service_id: int, service: RoomAmenityService = Depends(deps.get_room_amenity_service)):
    return service.links_for_amenity(service_id)


@router.put("/{link_id}", response_model=RoomServiceResponse)
def update_link(
    link_id: int,
    payload: RoomServiceUpdate,
    service: RoomAmenityService = Depends(deps.get_room_amenity_service),
):
    return service.update(link_id, payload)


@router.delete("/{link_id}", response_model=MessageResponse)
def delete_link(link_id: int, service: RoomAmenityService = Depends(deps.get_room_amenity_service)):
    service.delete(link_id)
    return MessageResponse(message="Room amenity deleted successfully")
