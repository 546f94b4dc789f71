"""Domain entities."""

from booker.domain.entities.booking import Booking, BookingDates, BookingPatch

__all__ = [
    "Booking",
    "BookingDates",
    "BookingPatch",
]
