"""Wire DTOs for the booking API."""

from booker.application.dtos.booking_payload import (
    AuthRequest,
    BookingDatesPayload,
    BookingIdEntry,
    BookingPatchPayload,
    BookingPayload,
    CreateBookingResponse,
    to_calendar_date,
)

__all__ = [
    "AuthRequest",
    "BookingDatesPayload",
    "BookingIdEntry",
    "BookingPatchPayload",
    "BookingPayload",
    "CreateBookingResponse",
    "to_calendar_date",
]
