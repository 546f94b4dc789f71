"""Random booking data for API tests."""

import random
from datetime import date, timedelta

from booker.domain.entities import Booking, BookingDates, BookingPatch


class BookingGenerator:
    """
    Generates plausible bookings.

    Pass a seed for a reproducible sequence and a fixed today for
    deterministic dates.
    """

    FIRST_NAMES = (
        "Sally", "James", "Mary", "Eric", "Susan", "Jim", "Mark", "Olivia",
        "Noah", "Emma", "Liam", "Ava", "Lucas", "Mia", "Ethan", "Sofia",
    )
    LAST_NAMES = (
        "Brown", "Wilson", "Jackson", "Smith", "Ericsson", "Jones", "Taylor",
        "Martin", "Garcia", "Lopez", "Walker", "Young", "Allen", "King",
    )
    ADDITIONAL_NEEDS = ("Breakfast", "Airport Transfer", "Extra Towels", "Late Checkout", None)

    MIN_PRICE = 100
    MAX_PRICE = 1000
    MAX_DAYS_IN_PAST = 365
    MAX_NIGHTS = 14

    def __init__(self, seed: int | None = None, today: date | None = None) -> None:
        self._rng = random.Random(seed)
        self._today = today

    def _reference_day(self) -> date:
        return self._today or date.today()

    def generate_dates(self) -> BookingDates:
        """
        Checkout falls within the past year (yesterday at the latest);
        checkin is 1 to 14 days before checkout.
        """
        yesterday = self._reference_day() - timedelta(days=1)
        checkout = yesterday - timedelta(days=self._rng.randint(0, self.MAX_DAYS_IN_PAST - 1))
        checkin = checkout - timedelta(days=self._rng.randint(1, self.MAX_NIGHTS))
        return BookingDates(checkin=checkin, checkout=checkout)

    def generate_booking(self) -> Booking:
        return Booking(
            first_name=self._rng.choice(self.FIRST_NAMES),
            last_name=self._rng.choice(self.LAST_NAMES),
            total_price=self._rng.randint(self.MIN_PRICE, self.MAX_PRICE),
            deposit_paid=self._rng.random() < 0.5,
            booking_dates=self.generate_dates(),
            additional_needs=self._rng.choice(self.ADDITIONAL_NEEDS),
        )

    def generate_bookings(self, count: int) -> list[Booking]:
        return [self.generate_booking() for _ in range(count)]

    def generate_patch(self) -> BookingPatch:
        """A patch touching names and price only."""
        return BookingPatch(
            first_name=self._rng.choice(self.FIRST_NAMES),
            last_name=self._rng.choice(self.LAST_NAMES),
            total_price=self._rng.randint(self.MIN_PRICE, self.MAX_PRICE),
        )
