"""Ports implemented by the infrastructure layer."""

from booker.application.interfaces.booking_client import BookingClient
from booker.application.interfaces.transport import (
    NETWORK_FAILURE_STATUS,
    Transport,
    TransportResponse,
)

__all__ = [
    "BookingClient",
    "Transport",
    "TransportResponse",
    "NETWORK_FAILURE_STATUS",
]
