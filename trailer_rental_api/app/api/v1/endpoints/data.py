"""
Data maintenance endpoints for API v1.

``POST /data/reset`` restores the demo data set: three available
trailers, one active booking and two notifications.  It is meant for
demos and test environments.
"""

from typing import Dict

from fastapi import APIRouter

from trailer_rental_api.app.services.booking_service import BookingService
from trailer_rental_api.app.services.notification_service import NotificationService
from trailer_rental_api.app.services.trailer_service import TrailerService

router = APIRouter()


@router.post("/reset", response_model=Dict[str, int])
async def reset_data() -> Dict[str, int]:
    """Reseed all three data files and return the number of records written."""
    trailers = await TrailerService.reset_data()
    bookings = await BookingService.reset_data()
    notifications = await NotificationService.reset_data()
    return {
        "trailers": len(trailers),
        "bookings": len(bookings),
        "notifications": len(notifications),
    }
