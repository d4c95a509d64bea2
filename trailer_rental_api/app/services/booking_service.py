"""
Business logic for trailer bookings.

The ``BookingService`` creates bookings for available trailers and
processes returns, including the excess fee for late returns.  It
keeps the trailer inventory in step (``Booked`` while a booking is
active, ``Available`` again after the return) and records a
notification for the customer after each step.

Pricing:

* insurance is a flat ``settings.insurance_fee`` charged at booking time;
* a late return costs ``settings.excess_fee_per_hour`` for every started
  hour past ``return_time`` (90 minutes late is billed as 2 hours).

``total_cost`` therefore always equals ``insurance_fee + excess_fee``.
"""

import logging
import math
import uuid
from datetime import datetime, time
from typing import List, Optional

from trailer_rental_api.app.core.config import settings
from trailer_rental_api.app.core.exceptions import InvalidStateError, NotFoundError
from trailer_rental_api.app.core.storage import JsonCollection, get_collection
from trailer_rental_api.app.schemas.booking import (
    Booking,
    BookingStatus,
    CreateBookingRequest,
    ReturnTrailerRequest,
)
from trailer_rental_api.app.schemas.notification import NotificationPriority, NotificationType
from trailer_rental_api.app.schemas.trailer import TrailerStatus
from trailer_rental_api.app.services.notification_service import NotificationService
from trailer_rental_api.app.services.trailer_service import TrailerService

logger = logging.getLogger(__name__)


def generate_booking_id() -> str:
    return f"BOOK{uuid.uuid4().hex[:12].upper()}"


def calculate_excess_fee(booking: Booking, returned_at: datetime) -> float:
    """Return the late fee owed for returning ``booking`` at ``returned_at``."""
    lateness = returned_at - booking.return_time
    if lateness.total_seconds() <= 0:
        return 0.0
    late_hours = math.ceil(lateness.total_seconds() / 3600)
    return late_hours * settings.excess_fee_per_hour


class BookingService:
    """Service for the booking lifecycle."""

    collection_name = "bookings"

    @classmethod
    def collection(cls) -> JsonCollection[Booking]:
        return get_collection(cls.collection_name, Booking)

    @classmethod
    async def get_all_bookings(cls) -> List[Booking]:
        return cls.collection().load()

    @classmethod
    async def get_customer_bookings(cls, customer_id: str) -> List[Booking]:
        """Return the bookings of one customer, most recently created first."""
        bookings = await cls.get_all_bookings()
        own = [b for b in bookings if b.customer_id == customer_id]
        return sorted(own, key=lambda b: b.created_at, reverse=True)

    @classmethod
    async def get_booking(cls, booking_id: str) -> Optional[Booking]:
        bookings = await cls.get_all_bookings()
        return next((b for b in bookings if b.id == booking_id), None)

    @classmethod
    async def create_booking(cls, request: CreateBookingRequest) -> Booking:
        """Book an available trailer.

        Raises ``NotFoundError`` when the trailer does not exist and
        ``InvalidStateError`` when it is not ``Available``; in both
        cases nothing is written.  On success the booking is stored,
        the trailer is flipped to ``Booked`` and a confirmation
        notification is recorded.
        """
        # The trailer lock is held from the availability check until the
        # trailer is marked Booked.  None of the awaited service calls
        # below suspend; they only perform blocking file I/O.
        with TrailerService.lock():
            trailer = await TrailerService.get_trailer(request.trailer_id)
            if trailer is None:
                raise NotFoundError(f"Trailer {request.trailer_id} not found")
            if trailer.status != TrailerStatus.AVAILABLE:
                raise InvalidStateError(f"Trailer {request.trailer_id} is not available")

            insurance_fee = settings.insurance_fee if request.has_insurance else 0.0
            booking = Booking(
                id=generate_booking_id(),
                customer_id=request.customer_id,
                customer_name=request.customer_name,
                customer_email=request.customer_email,
                trailer_id=request.trailer_id,
                location_name=trailer.location_name,
                trailer_number=trailer.trailer_number,
                booking_time=request.booking_time,
                return_time=request.return_time,
                status=BookingStatus.ACTIVE,
                has_insurance=request.has_insurance,
                insurance_fee=insurance_fee,
                excess_fee=0.0,
                total_cost=insurance_fee,
                created_at=datetime.now(),
            )

            collection = cls.collection()
            with collection.lock:
                bookings = collection.load()
                bookings.append(booking)
                collection.save(bookings)

            await TrailerService.update_trailer_status(request.trailer_id, TrailerStatus.BOOKED)

        await NotificationService.create_notification(
            NotificationService.build_notification(
                customer_id=booking.customer_id,
                type=NotificationType.BOOKING_CONFIRMATION,
                title="Booking Confirmed",
                message=(
                    f"Your trailer booking for {trailer.location_name} - Trailer #{trailer.trailer_number} "
                    f"has been confirmed. Please return by {booking.return_time:%H:%M} to avoid excess fees."
                ),
                priority=NotificationPriority.HIGH,
            )
        )

        logger.info("Created booking %s for trailer %s", booking.id, request.trailer_id)
        return booking

    @classmethod
    async def return_trailer(cls, request: ReturnTrailerRequest) -> Booking:
        """Complete an active booking and charge any excess fee.

        Raises ``NotFoundError`` for an unknown booking and
        ``InvalidStateError`` when the booking is not ``Active``.
        """
        collection = cls.collection()
        with collection.lock:
            bookings = collection.load()
            index = next((i for i, b in enumerate(bookings) if b.id == request.booking_id), None)
            if index is None:
                raise NotFoundError(f"Booking {request.booking_id} not found")
            booking = bookings[index]
            if booking.status != BookingStatus.ACTIVE:
                raise InvalidStateError(f"Booking {request.booking_id} is not active")

            booking.actual_return_time = request.return_time
            booking.status = BookingStatus.COMPLETED
            if booking.is_late(request.return_time):
                booking.excess_fee = calculate_excess_fee(booking, request.return_time)
                booking.total_cost += booking.excess_fee

            bookings[index] = booking
            collection.save(bookings)

        currency = settings.currency
        if booking.is_late(request.return_time):
            hours_late = booking.get_lateness_duration(request.return_time).total_seconds() / 3600
            notification = NotificationService.build_notification(
                customer_id=booking.customer_id,
                type=NotificationType.LATE_FEE,
                title="Late Return Fee Applied",
                message=(
                    f"Your trailer was returned {hours_late:.1f} hours late. "
                    f"An excess fee of {booking.excess_fee:.2f} {currency} has been applied. "
                    "Please contact Customer Service for payment."
                ),
                priority=NotificationPriority.HIGH,
            )
        else:
            notification = NotificationService.build_notification(
                customer_id=booking.customer_id,
                type=NotificationType.RETURN_CONFIRMATION,
                title="Trailer Returned Successfully",
                message=(
                    f"Thank you for returning your trailer on time! "
                    f"Total cost: {booking.total_cost:.2f} {currency}."
                ),
                priority=NotificationPriority.MEDIUM,
            )
        await NotificationService.create_notification(notification)

        await TrailerService.update_trailer_status(booking.trailer_id, TrailerStatus.AVAILABLE)

        logger.info("Returned trailer for booking %s, excess fee: %.2f", booking.id, booking.excess_fee)
        return booking

    @classmethod
    async def reset_data(cls) -> List[Booking]:
        """Overwrite the bookings with one active demo booking for today."""
        today = datetime.now().date()
        bookings = [
            Booking(
                id="BOOK001",
                customer_id="CUST001",
                customer_name="John Doe",
                customer_email="john.doe@email.com",
                trailer_id="LOC001-001",
                location_name="Jem og Fix Nørrebro",
                trailer_number=1,
                booking_time=datetime.combine(today, time(14, 0)),
                return_time=datetime.combine(today, time(23, 59)),
                status=BookingStatus.ACTIVE,
                has_insurance=True,
                insurance_fee=50.0,
                excess_fee=0.0,
                total_cost=50.0,
                created_at=datetime.combine(today, time(13, 45)),
            )
        ]
        cls.collection().save(bookings)
        logger.info("Reset bookings data to default")
        return bookings
