import json
from datetime import datetime

import requests

from trailer_rental_client import TrailerRentalAPI


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.content = json.dumps(payload).encode() if payload is not None else b""
        self.text = text or self.content.decode()

    def json(self):
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_client(*responses, **kwargs):
    session = FakeSession(*responses)
    return TrailerRentalAPI(base_url="http://rental.local/", session=session, **kwargs), session


def test_list_available_trailers():
    client, session = make_client(FakeResponse(payload=[{"Id": "LOC001-001"}]))

    trailers, error = client.list_available_trailers()

    assert error is None
    assert trailers == [{"Id": "LOC001-001"}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://rental.local/api/v1/trailers/available"
    assert session.calls[0]["timeout"] == 15


def test_create_booking_payload():
    client, session = make_client(FakeResponse(status_code=201, payload={"Id": "BOOK1"}))

    booking, error = client.create_booking(
        "LOC002-001",
        customer_id="CUST002",
        return_time=datetime(2024, 6, 1, 18, 0),
        has_insurance=True,
    )

    assert error is None
    assert booking == {"Id": "BOOK1"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"].endswith("/api/v1/bookings/")
    assert call["json"] == {
        "TrailerId": "LOC002-001",
        "HasInsurance": True,
        "CustomerId": "CUST002",
        "ReturnTime": "2024-06-01T18:00:00",
    }


def test_conflict_is_returned_as_error():
    client, _ = make_client(FakeResponse(status_code=409, payload={"detail": "Trailer LOC002-001 is not available"}))

    booking, error = client.create_booking("LOC002-001")

    assert booking is None
    assert error == {"status_code": 409, "message": "Trailer LOC002-001 is not available"}


def test_return_trailer_without_time_lets_server_decide():
    client, session = make_client(FakeResponse(payload={"Id": "BOOK1", "Status": "Completed"}))

    booking, error = client.return_trailer("BOOK1")

    assert error is None
    assert booking["Status"] == "Completed"
    assert session.calls[0]["json"] == {"BookingId": "BOOK1"}


def test_mark_notification_read_handles_empty_response():
    client, session = make_client(FakeResponse(status_code=204))

    ok, error = client.mark_notification_read("NOTIF001")

    assert ok is True
    assert error is None
    assert session.calls[0]["url"].endswith("/notifications/NOTIF001/read")


def test_api_key_header():
    client, session = make_client(FakeResponse(payload=[]), api_key="secret")
    client.get_customer_bookings("CUST001")
    assert session.calls[0]["headers"] == {"Authorization": "Bearer secret"}


def test_connection_error():
    client, _ = make_client(requests.ConnectionError("refused"))

    notifications, error = client.get_customer_notifications("CUST001")

    assert notifications == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
