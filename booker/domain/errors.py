"""Exceptions raised by the booking API client."""


class BookerError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Transport ===


class TransportError(BookerError):
    """Non-2xx response, or no response at all (network failure)."""

    def __init__(self, status_code: int | None, error_message: str | None = None):
        super().__init__(
            message=f"Request failed with status {status_code}: {error_message}",
            code="TRANSPORT_ERROR",
        )
        self.status_code = status_code
        self.error_message = error_message


class RetryExhausted(BookerError):
    """The retry budget ran out while the last response was still retryable."""

    def __init__(self, attempts: int, last_response=None):
        status = getattr(last_response, "status_code", None)
        super().__init__(
            message=f"Retry budget exhausted after {attempts} attempts (last status: {status})",
            code="RETRY_EXHAUSTED",
        )
        self.attempts = attempts
        self.last_response = last_response


# === Application ===


class ApplicationError(BookerError):
    """2xx response whose body carries a domain-level rejection."""

    def __init__(self, reason: str, message: str | None = None):
        super().__init__(
            message=message or f"Request rejected: {reason}",
            code="APPLICATION_ERROR",
        )
        self.reason = reason


class MalformedResponseError(BookerError):
    """2xx response that matches neither the success nor the error shape."""

    def __init__(self, raw_body: str | None, message: str | None = None):
        super().__init__(
            message=message or f"Unexpected response body: {raw_body}",
            code="MALFORMED_RESPONSE",
        )
        self.raw_body = raw_body
