"""
Pydantic models for trailers.

A trailer is a rentable unit parked at a location.  Its ``status``
decides whether it can be booked; only ``Available`` trailers accept
new bookings.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from .common import PascalModel


class TrailerStatus(str, Enum):
    AVAILABLE = "Available"
    BOOKED = "Booked"
    MAINTENANCE = "Maintenance"


class GPSCoordinates(PascalModel):
    latitude: float = 0.0
    longitude: float = 0.0


class Trailer(PascalModel):
    id: str = Field(..., examples=["LOC001-001"])
    location_id: str = Field("", examples=["LOC001"])
    trailer_number: int = Field(0, examples=[1])
    location_name: str = Field("", examples=["Jem og Fix Nørrebro"])
    address: str = ""
    status: TrailerStatus = TrailerStatus.AVAILABLE
    last_maintenance: datetime
    gps: GPSCoordinates = Field(default_factory=GPSCoordinates, alias="GPS")


class TrailerStatusUpdate(PascalModel):
    """Schema for changing the status of a trailer."""

    status: TrailerStatus
