"""Infrastructure services."""

from booker.infrastructure.services.booking_generator import BookingGenerator

__all__ = [
    "BookingGenerator",
]
