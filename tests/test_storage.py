import json

import pytest

from trailer_rental_api.app.core.config import settings
from trailer_rental_api.app.core.exceptions import StorageError
from trailer_rental_api.app.core.storage import JsonCollection, get_collection, get_data_dir
from trailer_rental_api.app.schemas.booking import Booking
from trailer_rental_api.app.schemas.trailer import Trailer, TrailerStatus


def test_data_dir_follows_settings(data_dir):
    assert get_data_dir() == data_dir.resolve()


def test_missing_file_loads_empty(data_dir):
    collection = get_collection("trailers", Trailer)
    assert not collection.exists()
    assert collection.load() == []


def test_null_document_loads_empty(data_dir):
    data_dir.mkdir()
    (data_dir / "trailers.json").write_text("null", encoding="utf-8")
    assert get_collection("trailers", Trailer).load() == []


def test_get_collection_is_shared_per_file():
    first = get_collection("bookings", Booking)
    second = get_collection("bookings", Booking)
    assert first is second
    assert first.lock is second.lock


def test_corrupt_file_raises_in_strict_mode(data_dir):
    data_dir.mkdir()
    (data_dir / "trailers.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        get_collection("trailers", Trailer).load()


def test_corrupt_file_is_empty_in_lenient_mode(data_dir, monkeypatch):
    monkeypatch.setattr(settings, "strict_storage", False)
    data_dir.mkdir()
    (data_dir / "trailers.json").write_text("{not json", encoding="utf-8")
    assert get_collection("trailers", Trailer).load() == []


def test_incompatible_document_raises(data_dir):
    data_dir.mkdir()
    (data_dir / "trailers.json").write_text(json.dumps({"Id": "LOC001-001"}), encoding="utf-8")
    with pytest.raises(StorageError):
        get_collection("trailers", Trailer).load()


def test_field_names_are_read_case_insensitively(data_dir):
    data_dir.mkdir()
    records = [
        {
            "id": "LOC009-001",
            "LOCATIONID": "LOC009",
            "trailer_number": 3,
            "locationName": "Bauhaus Valby",
            "Status": "Maintenance",
            "lastmaintenance": "2024-05-01T08:00:00",
            "gps": {"latitude": 55.66, "LONGITUDE": 12.51},
        }
    ]
    (data_dir / "trailers.json").write_text(json.dumps(records), encoding="utf-8")

    [trailer] = get_collection("trailers", Trailer).load()

    assert trailer.id == "LOC009-001"
    assert trailer.location_id == "LOC009"
    assert trailer.trailer_number == 3
    assert trailer.location_name == "Bauhaus Valby"
    assert trailer.status is TrailerStatus.MAINTENANCE
    assert trailer.gps.longitude == 12.51


def test_save_writes_pretty_pascal_case_json(data_dir):
    collection = get_collection("trailers", Trailer)
    collection.save(
        [
            Trailer(
                id="LOC001-001",
                location_id="LOC001",
                trailer_number=1,
                location_name="Jem og Fix Nørrebro",
                last_maintenance="2024-05-01T08:00:00",
            )
        ]
    )

    text = (data_dir / "trailers.json").read_text(encoding="utf-8")
    assert "\n  " in text
    assert "Nørrebro" in text
    [record] = json.loads(text)
    assert record["Id"] == "LOC001-001"
    assert record["LocationId"] == "LOC001"
    assert record["Status"] == "Available"
    assert record["GPS"] == {"Latitude": 0.0, "Longitude": 0.0}
    assert not (data_dir / "trailers.json.tmp").exists()


def test_write_failure_raises_in_strict_mode(data_dir):
    (data_dir / "trailers.json.tmp").mkdir(parents=True)
    collection = JsonCollection("trailers", data_dir / "trailers.json", Trailer)
    with pytest.raises(StorageError):
        collection.save([])


def test_write_failure_is_logged_in_lenient_mode(data_dir, monkeypatch, caplog):
    monkeypatch.setattr(settings, "strict_storage", False)
    (data_dir / "trailers.json.tmp").mkdir(parents=True)
    collection = JsonCollection("trailers", data_dir / "trailers.json", Trailer)

    collection.save([])

    assert not (data_dir / "trailers.json").exists()
    assert "Error writing trailers data" in caplog.text
