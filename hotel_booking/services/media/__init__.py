from hotel_booking.services.media.image_service import (
    HotelImageService,
    RoomImageService,
    Upload,
    discard_uploads,
    store_uploads,
)

__all__ = ["HotelImageService", "RoomImageService", "Upload", "store_uploads", "discard_uploads"]
