"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints for the hotel booking service
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from hotel_booking.api.v1.endpoints import (
    amenities,
    auth,
    bookings,
    coupons,
    hotels,
    images,
    reviews,
    room_amenities,
    rooms,
    users,
)
from hotel_booking.config.settings import settings
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        404: {"description": "Not Found"},
        500: {"description": "Internal Server Error"}
    }
)

for module_router in (
    users.router,
    auth.router,
    hotels.router,
    rooms.router,
    room_amenities.router,
    reviews.router,
    amenities.router,
    coupons.router,
    images.room_images_router,
    images.hotel_images_router,
    bookings.router,
):
    router.include_router(module_router)


@router.get("/health", tags=["System"])
def health_check():
    """Liveness check."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.API_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


logger.debug(f"API v1 router assembled with {len(router.routes)} routes")
