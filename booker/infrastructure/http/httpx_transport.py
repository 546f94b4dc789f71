import logging
from typing import Any

import httpx

from booker.application.interfaces.transport import Transport, TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


class HttpxTransport(Transport):
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Transport over one pooled httpx.AsyncClient.

        Args:
            base_url: Base URL of the booking API
            timeout_seconds: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.ASGITransport for in-process tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout_seconds,
            headers=DEFAULT_HEADERS,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def send(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        """
        Timeouts and connection errors come back as a status-0 response
        instead of raising, so callers see one shape for every failure.
        """
        try:
            response = await self._client.request(method, path, headers=headers, json=json_body)
        except httpx.TimeoutException as exc:
            logger.warning(
                "Booking API request timeout",
                extra={"method": method, "path": path, "timeout": self._timeout},
            )
            return TransportResponse.network_failure(str(exc) or "Request timed out")
        except httpx.HTTPError as exc:
            logger.warning(
                "Booking API transport error",
                extra={"method": method, "path": path, "error": str(exc)},
            )
            return TransportResponse.network_failure(str(exc) or type(exc).__name__)

        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            is_successful=response.is_success,
            error_message=None if response.is_success else response.reason_phrase,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
