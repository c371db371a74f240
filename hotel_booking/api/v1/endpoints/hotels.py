"""Hotel endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from hotel_booking.api import deps
from hotel_booking.schemas.common import MessageResponse
from hotel_booking.schemas.hotel import (
    HotelCreate,
    HotelIdResponse,
    HotelNameSearch,
    HotelResponse,
    HotelUpdate,
)
from hotel_booking.services.hotel import HotelService

router = APIRouter(prefix="/hotels", tags=["Hotels"])


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
def create_hotel(
    name: str = Form(...),
    star: int = Form(...),
    district_map: Optional[str] = Form(default=None, alias="map"),
    type_hotel: Optional[str] = Form(default=None, alias="TypeHotel"),
    payment: Optional[str] = Form(default=None),
    owner_id: Optional[int] = Form(default=None, alias="ownerId"),
    files: List[UploadFile] = File(default=[]),
    service: HotelService = Depends(deps.get_hotel_service),
):
    payload = HotelCreate(
        name=name, star=star, map=district_map, type_hotel=type_hotel, payment=payment, owner_id=owner_id
    )
    return service.create(payload, deps.read_uploads(files))


@router.get("", response_model=List[HotelResponse])
def list_hotels(
    name: Optional[str] = Query(default=None),
    type_hotel: Optional[str] = Query(default=None, alias="TypeHotel"),
    star: Optional[int] = Query(default=None),
    payment: Optional[str] = Query(default=None),
    service: HotelService = Depends(deps.get_hotel_service),
):
    return service.search(name=name, type_hotel=type_hotel, star=star, payment=payment)


@router.get("/maps", response_model=List[str])
def list_districts(service: HotelService = Depends(deps.get_hotel_service)):
    return service.districts()


@router.post("/search-by-name", response_model=HotelIdResponse)
def search_by_name(payload: HotelNameSearch, service: HotelService = Depends(deps.get_hotel_service)):
    return HotelIdResponse(hotel_id=service.find_id_by_name(payload.hotel_name))


@router.get("/{hotel_id}", response_model=HotelResponse)
def get_hotel(hotel_id: int, service: HotelService = Depends(deps.get_hotel_service)):
    return service.get(hotel_id)


@router.put("/{hotel_id}", response_model=HotelResponse)
def update_hotel(hotel_id: int, payload: HotelUpdate, service: HotelService = Depends(deps.get_hotel_service)):
    return service.update(hotel_id, payload)


@router.delete("/{hotel_id}", response_model=MessageResponse)
def delete_hotel(hotel_id: int, service: HotelService = Depends(deps.get_hotel_service)):
    service.delete(hotel_id)
    return MessageResponse(message="Hotel deleted successfully")
