"""
Service layer for customer notifications.

Notifications are stored in ``notifications.json`` as an append-only
log.  ``BookingService`` records a notification for every booking
and return; the API exposes them per customer, newest first, and lets
the customer mark them as read.
"""

import logging
import uuid
from datetime import datetime, time
from typing import List, Optional

from trailer_rental_api.app.core.storage import JsonCollection, get_collection
from trailer_rental_api.app.schemas.notification import (
    Notification,
    NotificationPriority,
    NotificationType,
)

logger = logging.getLogger(__name__)


def generate_notification_id() -> str:
    return f"NOTIF{uuid.uuid4().hex[:12].upper()}"


class NotificationService:
    """Service for recording and reading customer notifications."""

    collection_name = "notifications"

    @classmethod
    def collection(cls) -> JsonCollection[Notification]:
        return get_collection(cls.collection_name, Notification)

    @staticmethod
    def build_notification(
        customer_id: str,
        type: NotificationType,
        title: str,
        message: str,
        priority: NotificationPriority,
    ) -> Notification:
        """Create an unread notification stamped with a fresh id and the current time."""
        return Notification(
            id=generate_notification_id(),
            customer_id=customer_id,
            type=type,
            title=title,
            message=message,
            timestamp=datetime.now(),
            is_read=False,
            priority=priority,
        )

    @classmethod
    async def get_all_notifications(cls) -> List[Notification]:
        return cls.collection().load()

    @classmethod
    async def get_customer_notifications(cls, customer_id: str) -> List[Notification]:
        """Return the notifications of one customer, newest first."""
        notifications = await cls.get_all_notifications()
        own = [n for n in notifications if n.customer_id == customer_id]
        return sorted(own, key=lambda n: n.timestamp, reverse=True)

    @classmethod
    async def create_notification(cls, notification: Notification) -> Notification:
        """Append ``notification`` as given and return it unchanged."""
        collection = cls.collection()
        with collection.lock:
            notifications = collection.load()
            notifications.append(notification)
            collection.save(notifications)
        logger.info("Created notification %s for customer %s", notification.id, notification.customer_id)
        return notification

    @classmethod
    async def mark_as_read(cls, notification_id: str) -> Optional[Notification]:
        """Flag a notification as read.

        An unknown id is ignored and ``None`` is returned.
        """
        collection = cls.collection()
        with collection.lock:
            notifications = collection.load()
            notification = next((n for n in notifications if n.id == notification_id), None)
            if notification is None:
                return None
            notification.is_read = True
            collection.save(notifications)
        logger.info("Marked notification %s as read", notification_id)
        return notification

    @classmethod
    async def reset_data(cls) -> List[Notification]:
        today = datetime.now().date()
        notifications = [
            Notification(
                id="NOTIF001",
                customer_id="CUST001",
                type=NotificationType.BOOKING_CONFIRMATION,
                title="Booking Confirmed",
                message=(
                    "Your trailer booking for Jem og Fix Nørrebro - Trailer #1 has been confirmed. "
                    "Please return by 23:59 to avoid excess fees."
                ),
                timestamp=datetime.combine(today, time(13, 45)),
                is_read=False,
                priority=NotificationPriority.HIGH,
            ),
            Notification(
                id="NOTIF002",
                customer_id="CUST001",
                type=NotificationType.BOOKING_REMINDER,
                title="Return Reminder",
                message="Remember to return your trailer by 23:59 tonight to avoid excess fees.",
                timestamp=datetime.combine(today, time(20, 0)),
                is_read=False,
                priority=NotificationPriority.MEDIUM,
            ),
        ]
        cls.collection().save(notifications)
        logger.info("Reset notifications data to default")
        return notifications
