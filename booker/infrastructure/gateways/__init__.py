"""Booking API client implementation and its factory."""

from booker.infrastructure.gateways.factory import BookerClientFactory
from booker.infrastructure.gateways.restful_booker_client import (
    RestfulBookerClient,
    classify_token_response,
)

__all__ = [
    "BookerClientFactory",
    "RestfulBookerClient",
    "classify_token_response",
]
