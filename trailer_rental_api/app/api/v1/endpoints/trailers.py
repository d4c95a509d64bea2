"""
Trailer endpoints for API v1.

Customers browse the inventory and the available trailers; staff
change a trailer's status, e.g. to take it out for maintenance.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Path, status

from trailer_rental_api.app.schemas.trailer import Trailer, TrailerStatusUpdate
from trailer_rental_api.app.services.trailer_service import TrailerService

router = APIRouter()


@router.get("/", response_model=List[Trailer])
async def list_trailers() -> List[Trailer]:
    return await TrailerService.get_all_trailers()


@router.get("/available", response_model=List[Trailer])
async def list_available_trailers() -> List[Trailer]:
    """List trailers that can be booked right now."""
    return await TrailerService.get_available_trailers()


@router.get("/{trailer_id}", response_model=Trailer)
async def get_trailer(trailer_id: str = Path(..., description="ID of the trailer")) -> Trailer:
    trailer = await TrailerService.get_trailer(trailer_id)
    if trailer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trailer not found")
    return trailer


@router.put("/{trailer_id}/status", response_model=Trailer)
async def update_trailer_status(
    body: TrailerStatusUpdate,
    trailer_id: str = Path(..., description="ID of the trailer"),
) -> Trailer:
    """Set the status of a trailer.

    Returns the updated trailer, or 404 when the id is unknown.
    """
    trailer = await TrailerService.update_trailer_status(trailer_id, body.status)
    if trailer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trailer not found")
    return trailer
