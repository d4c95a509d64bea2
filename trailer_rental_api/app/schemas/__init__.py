"""
Pydantic schema definitions for stored records and API payloads.

Each domain (trailers, bookings, notifications) defines its own
models.  The same models are persisted to the JSON data files and
returned by the API, so field names are written in PascalCase
(``Id``, ``CustomerId``) and read case-insensitively.
"""
