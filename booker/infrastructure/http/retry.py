"""
Retry utilities for outbound HTTP calls.

Wraps a single zero-argument async call with bounded retries and
exponential backoff. Both raised exceptions and transient status codes
are retried; the executor knows nothing about what the call does.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import wraps
from typing import Awaitable, Callable

from booker.application.interfaces.transport import NETWORK_FAILURE_STATUS, TransportResponse
from booker.domain.errors import RetryExhausted

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

Call = Callable[[], Awaitable[TransportResponse]]


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable retry configuration, safe to share across concurrent calls.

    Attributes:
        max_attempts: Total attempts, the first one included (>= 1).
        base_delay: Seconds to wait before the first retry. Each further
            retry doubles it.
    """

    max_attempts: int = 4
    base_delay: float = 1.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1: {self.max_attempts}")
        if self.base_delay < 0:
            raise ValueError(f"base_delay must be >= 0: {self.base_delay}")

    def delay_before(self, attempt: int) -> float:
        """
        Seconds to wait before the given 1-based attempt.

        attempt 1 -> 0, attempt 2 -> base_delay, attempt 3 -> 2 * base_delay, ...
        """
        if attempt < 2:
            return 0.0
        return self.base_delay * (2 ** (attempt - 2))

    @classmethod
    def from_settings(cls, settings) -> "RetryPolicy":
        return cls(
            max_attempts=settings.max_retries + 1,
            base_delay=settings.retry_delay_ms / 1000,
        )


def is_retryable_response(response: TransportResponse | None) -> bool:
    if response is None or response.status_code is None:
        return True
    return (
        response.status_code == NETWORK_FAILURE_STATUS
        or response.status_code in RETRYABLE_STATUS_CODES
    )


@dataclass(frozen=True)
class CallOutcome:
    """Result of one attempt: either a response or the exception it raised."""

    response: TransportResponse | None = None
    error: Exception | None = None

    @property
    def should_retry(self) -> bool:
        return self.error is not None or is_retryable_response(self.response)

    def describe(self) -> dict:
        if self.error is not None:
            return {"error_type": type(self.error).__name__, "error": str(self.error)}
        status_code = getattr(self.response, "status_code", None)
        if status_code == NETWORK_FAILURE_STATUS:
            return {"status_code": status_code, "error_message": self.response.error_message}
        return {"status_code": status_code}


async def _attempt(call: Call) -> CallOutcome:
    try:
        return CallOutcome(response=await call())
    except Exception as e:
        return CallOutcome(error=e)


async def execute_with_retry(
    call: Call,
    policy: RetryPolicy,
    log: logging.Logger | None = None,
    strict: bool = False,
) -> TransportResponse:
    """
    Run call until it yields a non-retryable outcome or the budget runs out.

    Uses exponential backoff: base_delay * 2 ** (attempt - 2) before each retry.

    Args:
        call: Zero-argument coroutine function performing one HTTP attempt.
        policy: Attempt budget and base delay.
        log: Logger for retry warnings (defaults to this module's logger).
        strict: Raise RetryExhausted instead of returning a still-retryable
            final response.

    Returns:
        The last response observed.

    Raises:
        The exception raised by the last attempt, if it raised.
        RetryExhausted: Only in strict mode.

    Example:
        response = await execute_with_retry(
            lambda: transport.send("GET", "/ping"), RetryPolicy(3, 0.5)
        )
    """
    log = log or logger
    outcome = CallOutcome()

    for attempt in range(1, policy.max_attempts + 1):
        outcome = await _attempt(call)
        if not outcome.should_retry:
            return outcome.response

        if attempt < policy.max_attempts:
            delay = policy.delay_before(attempt + 1)
            details = outcome.describe()
            if outcome.error is not None:
                message = "Request failed with %s: %s. Retrying after %.3fs (attempt %d of %d)"
                args = (details["error_type"], details["error"])
            elif "error_message" in details:
                message = "Request failed without a response: %s. Retrying after %.3fs (attempt %d of %d)"
                args = (details["error_message"],)
            else:
                message = "Request failed with status code %s. Retrying after %.3fs (attempt %d of %d)"
                args = (details["status_code"],)
            log.warning(
                message,
                *args,
                delay,
                attempt,
                policy.max_attempts,
                extra={
                    "attempt": attempt,
                    "max_attempts": policy.max_attempts,
                    "retry_delay": delay,
                    **details,
                },
            )
            await asyncio.sleep(delay)

    log.error(
        "Request still failing after max attempts",
        extra={"attempts": policy.max_attempts, **outcome.describe()},
    )
    if outcome.error is not None:
        raise outcome.error
    if strict:
        raise RetryExhausted(policy.max_attempts, outcome.response)
    return outcome.response


def with_retry(policy: RetryPolicy, log: logging.Logger | None = None, strict: bool = False):
    """
    Decorator applying execute_with_retry to an async transport call.

    Example:
        @with_retry(RetryPolicy(max_attempts=3, base_delay=0.2))
        async def ping():
            return await transport.send("GET", "/ping")
    """
    def decorator(func: Callable[..., Awaitable[TransportResponse]]):
        @wraps(func)
        async def wrapper(*args, **kwargs) -> TransportResponse:
            async def execute():
                return await func(*args, **kwargs)

            return await execute_with_retry(execute, policy, log=log, strict=strict)

        return wrapper
    return decorator
