import asyncio

import pytest

from trailer_rental_api.app.core import storage
from trailer_rental_api.app.core.config import settings
from trailer_rental_api.app.services.booking_service import BookingService
from trailer_rental_api.app.services.notification_service import NotificationService
from trailer_rental_api.app.services.trailer_service import TrailerService


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point every collection at a fresh temporary data directory."""
    monkeypatch.setattr(settings, "content_root", str(tmp_path))
    monkeypatch.setattr(settings, "data_dir", "Data")
    monkeypatch.setattr(settings, "strict_storage", True)
    monkeypatch.setattr(settings, "seed_on_startup", False)
    monkeypatch.setattr(settings, "insurance_fee", 50.0)
    monkeypatch.setattr(settings, "excess_fee_per_hour", 100.0)
    monkeypatch.setattr(settings, "currency", "DKK")
    storage.clear_collections()
    yield tmp_path / "Data"
    storage.clear_collections()


@pytest.fixture
def seeded(data_dir):
    asyncio.run(TrailerService.reset_data())
    asyncio.run(BookingService.reset_data())
    asyncio.run(NotificationService.reset_data())
    return data_dir
