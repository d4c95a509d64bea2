"""
Exception types raised by the service layer.

Two domain errors are part of the booking contract: ``NotFoundError``
when a trailer or booking id does not resolve and
``InvalidStateError`` when the trailer or booking is not in the state
an operation requires.  ``StorageError`` is kept separate so callers
can tell a broken data file apart from a rejected request.
"""


class TrailerRentalError(Exception):
    """Base class for all errors raised by the trailer rental services."""


class NotFoundError(TrailerRentalError):
    """A trailer or booking id did not resolve."""


class InvalidStateError(TrailerRentalError):
    """The target record is not in a state that allows the operation."""


class StorageError(TrailerRentalError):
    """A data file could not be read, decoded or written."""
