"""
Service layer abstraction.

Each service encapsulates business logic for a domain and persists
its records through ``core.storage``.  ``BookingService`` orchestrates
the other two: it reads and flips trailer status through
``TrailerService`` and records customer messages through
``NotificationService``.
"""
