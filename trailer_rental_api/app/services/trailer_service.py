"""
Business logic for the trailer inventory.

Trailers are seeded by ``reset_data`` and afterwards only change
through ``update_trailer_status``.  They are never deleted.
"""

import logging
from datetime import datetime, timedelta
from threading import RLock
from typing import List, Optional

from trailer_rental_api.app.core.storage import JsonCollection, get_collection
from trailer_rental_api.app.schemas.trailer import GPSCoordinates, Trailer, TrailerStatus

logger = logging.getLogger(__name__)


class TrailerService:
    """Service for reading trailers and changing their status."""

    collection_name = "trailers"

    @classmethod
    def collection(cls) -> JsonCollection[Trailer]:
        return get_collection(cls.collection_name, Trailer)

    @classmethod
    def lock(cls) -> RLock:
        """Lock guarding the inventory file; hold it to check and change status atomically."""
        return cls.collection().lock

    @classmethod
    async def get_all_trailers(cls) -> List[Trailer]:
        return cls.collection().load()

    @classmethod
    async def get_trailer(cls, trailer_id: str) -> Optional[Trailer]:
        """Return the trailer with ``trailer_id`` or ``None``."""
        trailers = await cls.get_all_trailers()
        return next((t for t in trailers if t.id == trailer_id), None)

    @classmethod
    async def get_available_trailers(cls) -> List[Trailer]:
        trailers = await cls.get_all_trailers()
        return [t for t in trailers if t.status == TrailerStatus.AVAILABLE]

    @classmethod
    async def update_trailer_status(cls, trailer_id: str, status: TrailerStatus) -> Optional[Trailer]:
        """Set the status of a trailer and persist the inventory.

        Returns the updated trailer, or ``None`` when no trailer has
        ``trailer_id``.  An unknown id leaves the file untouched.
        """
        collection = cls.collection()
        with collection.lock:
            trailers = collection.load()
            trailer = next((t for t in trailers if t.id == trailer_id), None)
            if trailer is None:
                logger.warning("Cannot update status of unknown trailer %s", trailer_id)
                return None
            trailer.status = status
            collection.save(trailers)
        logger.info("Updated trailer %s status to %s", trailer_id, status.value)
        return trailer

    @classmethod
    async def reset_data(cls) -> List[Trailer]:
        """Overwrite the inventory with the default trailers, all available."""
        now = datetime.now()
        norrebro = GPSCoordinates(latitude=55.6868, longitude=12.5606)
        osterbro = GPSCoordinates(latitude=55.7008, longitude=12.5751)
        trailers = [
            Trailer(
                id="LOC001-001",
                location_id="LOC001",
                trailer_number=1,
                location_name="Jem og Fix Nørrebro",
                address="Nørrebrogade 123, Copenhagen",
                status=TrailerStatus.AVAILABLE,
                last_maintenance=now - timedelta(days=14),
                gps=norrebro,
            ),
            Trailer(
                id="LOC001-002",
                location_id="LOC001",
                trailer_number=2,
                location_name="Jem og Fix Nørrebro",
                address="Nørrebrogade 123, Copenhagen",
                status=TrailerStatus.AVAILABLE,
                last_maintenance=now - timedelta(days=14),
                gps=norrebro,
            ),
            Trailer(
                id="LOC002-001",
                location_id="LOC002",
                trailer_number=1,
                location_name="Fog Østerbro",
                address="Østerbrogade 456, Copenhagen",
                status=TrailerStatus.AVAILABLE,
                last_maintenance=now - timedelta(days=17),
                gps=osterbro,
            ),
        ]
        cls.collection().save(trailers)
        logger.info("Reset trailers data to default")
        return trailers
