"""In-memory booking service for tests and local runs."""

from booker.infrastructure.in_memory.booker_service import (
    InMemoryBookingStore,
    create_app,
    inject_faults,
)

__all__ = [
    "InMemoryBookingStore",
    "create_app",
    "inject_faults",
]
