"""Booking entity and its stay dates."""

from dataclasses import dataclass, field, fields, replace
from datetime import date


@dataclass(frozen=True)
class BookingDates:
    """
    Check-in and check-out calendar dates of a stay.

    checkin <= checkout is expected but not enforced here; the remote
    service decides what to accept.
    """

    checkin: date
    checkout: date

    @property
    def nights(self) -> int:
        return (self.checkout - self.checkin).days

    def __str__(self) -> str:
        return f"{self.checkin.isoformat()} -> {self.checkout.isoformat()}"


@dataclass(frozen=True)
class Booking:
    """
    A booking as seen by the client.

    booking_id is assigned by the remote service and is never sent on
    create. It is excluded from equality so a booking read back from the
    service compares equal to the one that was submitted.
    """

    first_name: str
    last_name: str
    total_price: int
    deposit_paid: bool
    booking_dates: BookingDates
    additional_needs: str | None = None
    booking_id: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.total_price < 0:
            raise ValueError(f"total_price must be >= 0: {self.total_price}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def with_id(self, booking_id: int) -> "Booking":
        """Return a copy carrying the id assigned by the service."""
        return replace(self, booking_id=booking_id)


@dataclass(frozen=True)
class BookingPatch:
    """Subset of booking fields for a partial update. Unset fields are not sent."""

    first_name: str | None = None
    last_name: str | None = None
    total_price: int | None = None
    deposit_paid: bool | None = None
    booking_dates: BookingDates | None = None
    additional_needs: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def apply_to(self, booking: Booking) -> Booking:
        """Return booking with the set fields of this patch merged in."""
        changes = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return replace(booking, **changes)
