"""
Domain routers for API v1: trailers, bookings, notifications and data
maintenance.
"""
