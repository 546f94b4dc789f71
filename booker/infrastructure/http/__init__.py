"""HTTP transport and retry policy."""

from booker.infrastructure.http.httpx_transport import HttpxTransport
from booker.infrastructure.http.retry import (
    RETRYABLE_STATUS_CODES,
    CallOutcome,
    RetryPolicy,
    execute_with_retry,
    is_retryable_response,
    with_retry,
)

__all__ = [
    "HttpxTransport",
    "RETRYABLE_STATUS_CODES",
    "CallOutcome",
    "RetryPolicy",
    "execute_with_retry",
    "is_retryable_response",
    "with_retry",
]
