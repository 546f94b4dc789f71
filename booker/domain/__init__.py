"""
Domain layer.

Plain entities and the client's exception hierarchy, with no framework
dependencies.

Layout:
- entities/: Booking, BookingDates, BookingPatch
- errors.py: BookerError and its subclasses
"""

from booker.domain.entities import Booking, BookingDates, BookingPatch
from booker.domain.errors import (
    ApplicationError,
    BookerError,
    MalformedResponseError,
    RetryExhausted,
    TransportError,
)

__all__ = [
    # Entities
    "Booking",
    "BookingDates",
    "BookingPatch",
    # Errors
    "BookerError",
    "TransportError",
    "ApplicationError",
    "MalformedResponseError",
    "RetryExhausted",
]
