from abc import ABC, abstractmethod

from booker.domain.entities import Booking, BookingPatch


class BookingClient(ABC):
    """
    Operations exposed by the booking API.

    Only authenticate raises on failure. Every other operation reports
    failure through its return value (None, False or an empty list) and
    logs the cause.
    """

    @abstractmethod
    async def authenticate(self, username: str, password: str) -> str:
        """
        Returns a non-empty auth token.
        """
        pass

    @abstractmethod
    async def create_booking(self, booking: Booking) -> int | None:
        pass

    @abstractmethod
    async def get_booking(self, booking_id: int) -> Booking | None:
        pass

    @abstractmethod
    async def list_booking_ids(self) -> list[int]:
        pass

    @abstractmethod
    async def update_booking(self, booking_id: int, booking: Booking, token: str) -> bool:
        pass

    @abstractmethod
    async def partial_update_booking(
        self, booking_id: int, patch: BookingPatch, token: str
    ) -> bool:
        pass

    @abstractmethod
    async def delete_booking(self, booking_id: int, token: str) -> bool:
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        pass
