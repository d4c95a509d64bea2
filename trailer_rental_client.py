"""Trailer rental API client.

This module defines a small client wrapper around the Trailer Rental
REST API (``/api/v1``).  It is meant for kiosk front ends and scripts
that book and return trailers on behalf of customers.  The client uses
the ``requests`` library internally to make HTTP calls.

The client exposes high‑level methods for the operations a front end
needs:

* :meth:`list_trailers` / :meth:`list_available_trailers` – browse the inventory.
* :meth:`create_booking` – book a trailer.
* :meth:`return_trailer` – return the trailer of a booking.
* :meth:`get_customer_bookings` / :meth:`get_customer_notifications` –
  the customer's history, newest first.
* :meth:`mark_notification_read` – acknowledge a notification.
* :meth:`reset_data` – restore the demo data set.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  A booking that
cannot be made because the trailer is already booked therefore comes
back as ``(None, {"status_code": 409, "message": "..."})``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]


class TrailerRentalAPI:
    """Client for interacting with the trailer rental API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
                The ``/api/v1`` prefix is added by the client.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests (for deployments behind a
                gateway).
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/") + "/api/v1"
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``).
            path: Path relative to the API prefix (e.g. ``/trailers/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Trailers
    # ------------------------------------------------------------------
    def list_trailers(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/trailers/")

    def list_available_trailers(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/trailers/available")

    def get_trailer(self, trailer_id: str) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", f"/trailers/{trailer_id}")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(
        self,
        trailer_id: str,
        *,
        customer_id: Optional[str] = None,
        customer_name: Optional[str] = None,
        customer_email: Optional[str] = None,
        return_time: Optional[datetime] = None,
        has_insurance: bool = False,
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Book a trailer.

        Fields left as ``None`` are omitted so the server defaults apply
        (demo customer, return by 23:59 today).
        """
        payload: Dict[str, Any] = {"TrailerId": trailer_id, "HasInsurance": has_insurance}
        if customer_id is not None:
            payload["CustomerId"] = customer_id
        if customer_name is not None:
            payload["CustomerName"] = customer_name
        if customer_email is not None:
            payload["CustomerEmail"] = customer_email
        if return_time is not None:
            payload["ReturnTime"] = return_time.isoformat()
        return self._request("POST", "/bookings/", json_body=payload)

    def return_trailer(
        self, booking_id: str, return_time: Optional[datetime] = None
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Return the trailer of ``booking_id``; the server uses "now" when no time is given."""
        payload: Dict[str, Any] = {"BookingId": booking_id}
        if return_time is not None:
            payload["ReturnTime"] = return_time.isoformat()
        return self._request("POST", "/bookings/return", json_body=payload)

    def get_booking(self, booking_id: str) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._request("GET", f"/bookings/{booking_id}")

    def get_customer_bookings(self, customer_id: str) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list(f"/bookings/customer/{customer_id}")

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    def get_customer_notifications(self, customer_id: str) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list(f"/notifications/customer/{customer_id}")

    def mark_notification_read(self, notification_id: str) -> Tuple[bool, Error]:
        _, error = self._request("POST", f"/notifications/{notification_id}/read")
        return error is None, error

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------
    def reset_data(self) -> Tuple[Optional[Dict[str, int]], Error]:
        return self._request("POST", "/data/reset")
