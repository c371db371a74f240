"""Room endpoints, including the room side of room-amenity links."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from hotel_booking.api import deps
from hotel_booking.schemas.amenity import AmenityFilter, RoomServiceResponse
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from hotel_booking.services.room import RoomAmenityService, RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    name: str = Form(...),
    price: float = Form(...),
    quantity: int = Form(...),
    hotel_id: int = Form(..., alias="hotelId"),
    status_: bool = Form(default=True, alias="status"),
    quantity_people: int = Form(default=1),
    type_bed: Optional[str] = Form(default=None),
    files: List[UploadFile] = File(default=[]),
    service: RoomService = Depends(deps.get_room_service),
):
    payload = RoomCreate(
        name=name,
        status=status_,
        price=price,
        quantity=quantity,
        quantity_people=quantity_people,
        hotel_id=hotel_id,
        type_bed=type_bed,
    )
    return service.create(payload, deps.read_uploads(files))


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    hotel_id: Optional[int] = Query(default=None, alias="hotelId"),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.list_rooms(hotel_id)


@router.post("/amenities", response_model=List[RoomResponse])
def rooms_with_amenities(
    payload: AmenityFilter,
    service: RoomAmenityService = Depends(deps.get_room_amenity_service),
):
    return service.rooms_with_amenities(payload.amenities)


@router.get("/{room_id}/services", response_model=List[RoomServiceResponse])
def room_services(room_id: int, service: RoomAmenityService = Depends(deps.get_room_amenity_service)):
    return service.services_for_room(room_id)


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, service: RoomService = Depends(deps.get_room_service)):
    return service.get(room_id)


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(room_id: int, payload: RoomUpdate, service: RoomService = Depends(deps.get_room_service)):
    return service.update(room_id, payload)


@router.delete("/{room_id}", response_model=MessageResponse)
def delete_room(room_id: int, service: RoomService = Depends(deps.get_room_service)):
    service.delete(room_id)
    return MessageResponse(message="Room deleted successfully")
