"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (trailers, bookings, notifications) has a
schema module, a service and a router defined in
``api/v1/endpoints``.  The services persist their records in JSON
files through ``core.storage``; the API layer only translates HTTP
requests into service calls.
"""

from .main import app  # noqa: F401
