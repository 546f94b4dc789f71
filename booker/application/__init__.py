"""
Application layer.

Contracts the infrastructure implements and the wire DTOs it exchanges.

Layout:
- interfaces/: ports (BookingClient, Transport)
- dtos/: pydantic models for request and response bodies
"""

from booker.application.dtos import (
    AuthRequest,
    BookingDatesPayload,
    BookingIdEntry,
    BookingPatchPayload,
    BookingPayload,
    CreateBookingResponse,
)
from booker.application.interfaces import (
    NETWORK_FAILURE_STATUS,
    BookingClient,
    Transport,
    TransportResponse,
)

__all__ = [
    # DTOs
    "AuthRequest",
    "BookingDatesPayload",
    "BookingIdEntry",
    "BookingPatchPayload",
    "BookingPayload",
    "CreateBookingResponse",
    # Interfaces
    "BookingClient",
    "Transport",
    "TransportResponse",
    "NETWORK_FAILURE_STATUS",
]
