"""
Pydantic models for customer notifications.

Notifications are an append-only log of messages shown to customers.
The only change a stored notification ever sees is ``is_read``
flipping to true.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from .common import PascalModel


class NotificationType(str, Enum):
    BOOKING_CONFIRMATION = "BookingConfirmation"
    BOOKING_REMINDER = "BookingReminder"
    RETURN_CONFIRMATION = "ReturnConfirmation"
    LATE_FEE = "LateFee"


class NotificationPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Notification(PascalModel):
    id: str = Field(..., examples=["NOTIF001"])
    customer_id: str = Field(..., examples=["CUST001"])
    type: NotificationType
    title: str = ""
    message: str = ""
    timestamp: datetime
    is_read: bool = False
    priority: NotificationPriority = NotificationPriority.MEDIUM
