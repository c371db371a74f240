"""
Image record endpoints for rooms and hotels.

Deleting a record also deletes the stored object.
"""

from typing import List

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from hotel_booking.api import deps
from hotel_booking.schemas.media import (
    HotelImageResponse,
    HotelImageUpdate,
    RoomImageResponse,
    RoomImageUpdate,
)
from hotel_booking.services.media import HotelImageService, RoomImageService

room_images_router = APIRouter(prefix="/room-images", tags=["Room Images"])
hotel_images_router = APIRouter(prefix="/hotel-images", tags=["Hotel Images"])


# --- Room images ---------------------------------------------------------------

@room_images_router.post("", response_model=List[RoomImageResponse], status_code=status.HTTP_201_CREATED)
def upload_room_images(
    room_id: int = Form(..., alias="IdRoom"),
    files: List[UploadFile] = File(default=[]),
    service: RoomImageService = Depends(deps.get_room_image_service),
):
    return service.add_images(room_id, deps.read_uploads(files))


@room_images_router.get("", response_model=List[RoomImageResponse])
def room_images(
    room_id: int = Query(..., alias="IdRoom"),
    service: RoomImageService = Depends(deps.get_room_image_service),
):
    return service.list_for_room(room_id)


@room_images_router.get("/all", response_model=List[RoomImageResponse])
def all_room_images(service: RoomImageService = Depends(deps.get_room_image_service)):
    return service.list_all()


@room_images_router.put("/{image_id}", response_model=RoomImageResponse)
def update_room_image(
    image_id: int,
    payload: RoomImageUpdate,
    service: RoomImageService = Depends(deps.get_room_image_service),
):
    return service.update(image_id, payload.url, payload.room_id)


@room_images_router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room_image(image_id: int, service: RoomImageService = Depends(deps.get_room_image_service)):
    service.delete(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Hotel images --------------------------------------------------------------

@hotel_images_router.post("", response_model=List[HotelImageResponse], status_code=status.HTTP_201_CREATED)
def upload_hotel_images(
    hotel_id: int = Form(..., alias="HotelId"),
    files: List[UploadFile] = File(default=[]),
    service: HotelImageService = Depends(deps.get_hotel_image_service),
):
    return service.add_images(hotel_id, deps.read_uploads(files))


@hotel_images_router.get("", response_model=List[HotelImageResponse])
def hotel_images(
    hotel_id: int = Query(..., alias="HotelId"),
    service: HotelImageService = Depends(deps.get_hotel_image_service),
):
    return service.list_for_hotel(hotel_id)


@hotel_images_router.get("/all", response_model=List[HotelImageResponse])
def all_hotel_images(service: HotelImageService = Depends(deps.get_hotel_image_service)):
    return service.list_all()


@hotel_images_router.put("/{image_id}", response_model=HotelImageResponse)
def update_hotel_image(
    image_id: int,
    payload: HotelImageUpdate,
    service: HotelImageService = Depends(deps.get_hotel_image_service),
):
    return service.update(image_id, payload.url, payload.hotel_id)


@hotel_images_router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hotel_image(image_id: int, service: HotelImageService = Depends(deps.get_hotel_image_service)):
    service.delete(image_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
