"""
Pydantic models for trailer bookings.

A booking reserves one trailer for one customer until ``return_time``.
It is created ``Active`` and becomes ``Completed`` when the trailer is
returned.  ``total_cost`` starts at the insurance fee and grows by the
excess fee when the return is late.

The lateness helpers on ``Booking`` are plain queries.  They take the
current time as an argument so callers (and tests) decide what "now"
means.
"""

from datetime import datetime, time, timedelta
from enum import Enum
from typing import Optional

from pydantic import Field

from .common import PascalModel


class BookingStatus(str, Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


def default_return_time() -> datetime:
    """Today at 23:59, the latest return time offered to walk-in customers."""
    return datetime.combine(datetime.now().date(), time(23, 59))


class Booking(PascalModel):
    id: str = Field(..., examples=["BOOK001"])
    customer_id: str = ""
    customer_name: str = ""
    customer_email: str = ""
    trailer_id: str = ""
    # Copied from the trailer when the booking is made.
    location_name: str = ""
    trailer_number: int = 0
    booking_time: datetime
    return_time: datetime
    actual_return_time: Optional[datetime] = None
    status: BookingStatus = BookingStatus.ACTIVE
    has_insurance: bool = False
    insurance_fee: float = 0.0
    excess_fee: float = 0.0
    total_cost: float = 0.0
    created_at: datetime

    def is_late(self, current_time: datetime) -> bool:
        """True when the trailer has been returned after ``return_time``."""
        return self.actual_return_time is not None and self.actual_return_time > self.return_time

    def is_overdue(self, current_time: datetime) -> bool:
        """True when the trailer is still out and ``return_time`` has passed."""
        return self.actual_return_time is None and current_time > self.return_time

    def get_lateness_duration(self, current_time: datetime) -> timedelta:
        if self.is_late(current_time):
            return self.actual_return_time - self.return_time
        if self.is_overdue(current_time):
            return current_time - self.return_time
        return timedelta(0)


class CreateBookingRequest(PascalModel):
    """Schema for booking a trailer.

    Customer fields default to the demo customer so that a kiosk
    client only has to send ``TrailerId``.
    """

    customer_id: str = Field("CUST001", examples=["CUST001"])
    customer_name: str = Field("John Doe", examples=["John Doe"])
    customer_email: str = Field("john.doe@email.com", examples=["john.doe@email.com"])
    trailer_id: str = Field(..., examples=["LOC001-001"])
    booking_time: datetime = Field(default_factory=datetime.now)
    return_time: datetime = Field(default_factory=default_return_time)
    has_insurance: bool = False


class ReturnTrailerRequest(PascalModel):
    """Schema for returning the trailer of an active booking."""

    booking_id: str = Field(..., examples=["BOOK001"])
    return_time: datetime = Field(default_factory=datetime.now)
