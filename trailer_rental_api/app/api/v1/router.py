"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import bookings, data, notifications, trailers

router = APIRouter()

router.include_router(trailers.router, prefix="/trailers", tags=["trailers"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
router.include_router(data.router, prefix="/data", tags=["data"])
