"""
Booking endpoints for API v1.

These routes create bookings, process returns and list bookings.
They rely on ``BookingService`` for the availability checks and fee
calculation and map its errors onto HTTP status codes: an unknown
trailer or booking is a 404, a trailer that is not available or a
booking that is not active is a 409.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Path, status

from trailer_rental_api.app.core.exceptions import InvalidStateError, NotFoundError
from trailer_rental_api.app.schemas.booking import Booking, CreateBookingRequest, ReturnTrailerRequest
from trailer_rental_api.app.services.booking_service import BookingService

router = APIRouter()


@router.get("/", response_model=List[Booking])
async def list_bookings() -> List[Booking]:
    return await BookingService.get_all_bookings()


@router.get("/customer/{customer_id}", response_model=List[Booking])
async def list_customer_bookings(
    customer_id: str = Path(..., description="ID of the customer"),
) -> List[Booking]:
    """List a customer's bookings, most recently created first."""
    return await BookingService.get_customer_bookings(customer_id)


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(booking_id: str = Path(..., description="ID of the booking")) -> Booking:
    booking = await BookingService.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post("/", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(request: CreateBookingRequest) -> Booking:
    """Book a trailer.

    Only ``TrailerId`` is required; the customer fields, booking time
    and return time fall back to the demo customer, now and today
    23:59 respectively.
    """
    try:
        return await BookingService.create_booking(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/return", response_model=Booking)
async def return_trailer(request: ReturnTrailerRequest) -> Booking:
    """Return the trailer of an active booking.

    The response carries the final ``ExcessFee`` and ``TotalCost``.
    """
    try:
        return await BookingService.return_trailer(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
