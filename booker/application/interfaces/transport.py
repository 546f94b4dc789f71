from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

# Status reported when no HTTP response was received (timeout, refused connection).
NETWORK_FAILURE_STATUS = 0


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: str = ""
    is_successful: bool = False
    error_message: str | None = None

    @classmethod
    def network_failure(cls, error_message: str) -> "TransportResponse":
        return cls(
            status_code=NETWORK_FAILURE_STATUS,
            body="",
            is_successful=False,
            error_message=error_message,
        )


class Transport(ABC):
    @abstractmethod
    async def send(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        """
        Performs one HTTP exchange against the configured base URL.

        May raise for failures the implementation does not map to a response.
        """
        pass

    async def aclose(self) -> None:
        """Releases pooled connections, if any."""
        return None
