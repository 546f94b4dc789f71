"""
Infrastructure layer.

Concrete adapters behind the application interfaces.

Layout:
- http/: httpx transport and the retry executor
- gateways/: Restful Booker client and its factory
- in_memory/: FastAPI stand-in for the remote service
- services/: test data generation
"""

from booker.infrastructure.gateways.factory import BookerClientFactory
from booker.infrastructure.gateways.restful_booker_client import RestfulBookerClient
from booker.infrastructure.http.httpx_transport import HttpxTransport
from booker.infrastructure.http.retry import RetryPolicy, execute_with_retry, with_retry
from booker.infrastructure.services.booking_generator import BookingGenerator

__all__ = [
    # HTTP
    "HttpxTransport",
    "RetryPolicy",
    "execute_with_retry",
    "with_retry",
    # Gateways
    "BookerClientFactory",
    "RestfulBookerClient",
    # Services
    "BookingGenerator",
]
