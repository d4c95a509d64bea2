"""
Notification endpoints for API v1.

Customers read their notifications newest first and mark them as
read.  Staff tools may also post a notification directly, e.g. a
return reminder.
"""

from typing import List

from fastapi import APIRouter, Path, Response, status

from trailer_rental_api.app.schemas.notification import Notification
from trailer_rental_api.app.services.notification_service import NotificationService

router = APIRouter()


@router.get("/", response_model=List[Notification])
async def list_notifications() -> List[Notification]:
    return await NotificationService.get_all_notifications()


@router.get("/customer/{customer_id}", response_model=List[Notification])
async def list_customer_notifications(
    customer_id: str = Path(..., description="ID of the customer"),
) -> List[Notification]:
    return await NotificationService.get_customer_notifications(customer_id)


@router.post("/", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def create_notification(notification: Notification) -> Notification:
    """Store a notification exactly as supplied by the caller."""
    return await NotificationService.create_notification(notification)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notification_read(
    notification_id: str = Path(..., description="ID of the notification"),
) -> Response:
    """Mark a notification as read.

    Unknown ids are ignored, so the call always answers 204.
    """
    await NotificationService.mark_as_read(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
