"""
Shared fixtures.

Every client talks to the in-memory booking service through
httpx.ASGITransport, so the suite runs without network access.
"""

from datetime import date

import httpx
import pytest
import pytest_asyncio

from booker.config import Settings, get_settings
from booker.domain.entities import Booking, BookingDates
from booker.infrastructure.gateways.factory import BookerClientFactory
from booker.infrastructure.in_memory.booker_service import create_app
from booker.infrastructure.services.booking_generator import BookingGenerator
from booker.logging_config import configure_logging

TEST_BASE_URL = "http://booker.test"


def pytest_configure(config):
    # BOOKER_LOG_DIR=logs writes one log file per test.
    configure_logging(get_settings())


@pytest.fixture
def settings() -> Settings:
    # Tiny delays keep the retry tests fast.
    return Settings(
        base_url=TEST_BASE_URL,
        username="admin",
        password="password123",
        max_retries=2,
        retry_delay_ms=1,
        timeout_seconds=5.0,
        _env_file=None,
    )


@pytest.fixture
def booker_app(settings):
    return create_app(username=settings.username, password=settings.password)


@pytest_asyncio.fixture
async def client_factory(settings, booker_app):
    factory = BookerClientFactory(settings, transport=httpx.ASGITransport(app=booker_app))
    yield factory
    await factory.aclose()


@pytest.fixture
def client(client_factory):
    return client_factory.create_client()


@pytest_asyncio.fixture
async def auth_token(client, settings) -> str:
    return await client.authenticate(settings.username, settings.password)


@pytest.fixture
def generator() -> BookingGenerator:
    return BookingGenerator(seed=42, today=date(2024, 6, 15))


@pytest.fixture
def sample_booking() -> Booking:
    return Booking(
        first_name="Sally",
        last_name="Brown",
        total_price=111,
        deposit_paid=True,
        booking_dates=BookingDates(checkin=date(2024, 1, 1), checkout=date(2024, 1, 5)),
        additional_needs="Breakfast",
    )
