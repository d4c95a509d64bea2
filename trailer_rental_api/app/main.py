"""
Main entrypoint for the Trailer Rental API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn trailer_rental_api.app.main:app --reload
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.exceptions import StorageError
from .core.logging_config import setup_logging
from .services.booking_service import BookingService
from .services.notification_service import NotificationService
from .services.trailer_service import TrailerService

logger = logging.getLogger(__name__)


async def seed_missing_data() -> List[str]:
    """Write the default records for every data file that does not exist yet.

    Existing files are left alone, even when empty.  Returns the names
    of the collections that were seeded.
    """
    seeded = []
    for service in (TrailerService, BookingService, NotificationService):
        if not service.collection().exists():
            await service.reset_data()
            seeded.append(service.collection_name)
    if seeded:
        logger.info("Seeded missing data files: %s", ", ".join(seeded))
    return seeded


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")
    app.add_exception_handler(StorageError, storage_error_handler)

    @app.get("/health", response_model=Dict[str, str])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event() -> None:
        if settings.seed_on_startup:
            await seed_missing_data()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
