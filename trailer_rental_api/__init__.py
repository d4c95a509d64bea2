"""Trailer rental booking backend: trailers, bookings and customer notifications."""
