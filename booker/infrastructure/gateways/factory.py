import logging

import httpx

from booker.config import Settings
from booker.infrastructure.gateways.restful_booker_client import RestfulBookerClient
from booker.infrastructure.http.httpx_transport import HttpxTransport
from booker.infrastructure.http.retry import RetryPolicy


class BookerClientFactory:
    """
    Builds the shared transport and retry policy once, then hands out
    independent client handles (one per test or scenario).

    Example:
        async with BookerClientFactory(get_settings()) as factory:
            client = factory.create_client()
            assert await client.health_check()
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._retry_policy = RetryPolicy.from_settings(settings)
        self._transport = HttpxTransport(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            transport=transport,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    def create_client(self, logger: logging.Logger | None = None) -> RestfulBookerClient:
        return RestfulBookerClient(
            transport=self._transport,
            retry_policy=self._retry_policy,
            logger=logger,
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "BookerClientFactory":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
