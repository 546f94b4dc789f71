import json
import logging
from typing import Any

from pydantic import ValidationError

from booker.application.dtos.booking_payload import (
    AuthRequest,
    BookingIdEntry,
    BookingPatchPayload,
    BookingPayload,
    CreateBookingResponse,
)
from booker.application.interfaces.booking_client import BookingClient
from booker.application.interfaces.transport import Transport, TransportResponse
from booker.domain.entities import Booking, BookingPatch
from booker.domain.errors import ApplicationError, MalformedResponseError, TransportError
from booker.infrastructure.http.retry import RetryPolicy, execute_with_retry


def classify_token_response(response: TransportResponse) -> str:
    """
    Decide the outcome of POST /auth from both the status and the body.

    The service answers bad credentials with HTTP 200 and a "reason" field,
    so the status alone cannot tell a token from a rejection:

    1. transport failure           -> TransportError
    2. body carries "reason"       -> ApplicationError
    3. body carries a token        -> the token
    4. anything else               -> MalformedResponseError
    """
    if not response.is_successful:
        raise TransportError(response.status_code, response.error_message)

    malformed = f"Unexpected response from token endpoint: {response.body}"
    try:
        body = json.loads(response.body)
    except (json.JSONDecodeError, TypeError):
        raise MalformedResponseError(response.body, message=malformed) from None

    if isinstance(body, dict):
        if "reason" in body:
            reason = str(body["reason"])
            raise ApplicationError(reason, message=f"Failed to create token: {reason}")
        token = body.get("token")
        if isinstance(token, str) and token:
            return token

    raise MalformedResponseError(response.body, message=malformed)


def _auth_cookie(token: str) -> dict[str, str]:
    return {"Cookie": f"token={token}"}


class RestfulBookerClient(BookingClient):
    """
    Booking API operations over a Transport, each call wrapped in the retry policy.

    Instances hold no mutable state; create one per test from a shared
    BookerClientFactory.
    """

    def __init__(
        self,
        transport: Transport,
        retry_policy: RetryPolicy,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transport = transport
        self._retry_policy = retry_policy
        self._logger = logger or logging.getLogger(__name__)

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    async def _send(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        async def _make_request():
            return await self._transport.send(method, path, headers=headers, json_body=json_body)

        return await execute_with_retry(_make_request, self._retry_policy, log=self._logger)

    async def _send_or_failure(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> TransportResponse:
        # Operations other than authenticate never raise; an exception that
        # outlived the retries becomes a failed response.
        try:
            return await self._send(method, path, headers=headers, json_body=json_body)
        except Exception as exc:
            self._logger.error(
                "Booking API call raised after retries",
                exc_info=exc,
                extra={"method": method, "path": path},
            )
            return TransportResponse.network_failure(str(exc) or type(exc).__name__)

    def _log_failure(self, message: str, response: TransportResponse, **fields: Any) -> None:
        self._logger.error(
            message,
            extra={
                "status_code": response.status_code,
                "error_message": response.error_message,
                **fields,
            },
        )

    async def authenticate(self, username: str, password: str) -> str:
        self._logger.info("Creating authentication token", extra={"username": username})
        payload = AuthRequest(username=username, password=password).model_dump()

        try:
            response = await self._send("POST", "/auth", json_body=payload)
        except Exception as exc:
            self._logger.error("Failed to create token", exc_info=exc, extra={"username": username})
            raise TransportError(None, str(exc)) from exc

        try:
            token = classify_token_response(response)
        except TransportError:
            self._log_failure("Failed to create token", response, username=username)
            raise
        except ApplicationError as exc:
            self._logger.error(
                "Failed to create token", extra={"username": username, "reason": exc.reason}
            )
            raise
        except MalformedResponseError:
            self._logger.error(
                "Unexpected response from token endpoint",
                extra={"username": username, "body": response.body},
            )
            raise

        self._logger.info("Successfully created authentication token", extra={"username": username})
        return token

    async def create_booking(self, booking: Booking) -> int | None:
        self._logger.info(
            "Creating new booking",
            extra={"guest": booking.full_name, "nights": booking.booking_dates.nights},
        )
        payload = BookingPayload.from_domain(booking).to_wire()
        self._logger.debug("Booking data being sent", extra={"payload": payload})

        response = await self._send_or_failure("POST", "/booking", json_body=payload)
        if not response.is_successful:
            self._log_failure("Failed to create booking", response)
            return None

        try:
            created = CreateBookingResponse.model_validate_json(response.body)
        except ValidationError as exc:
            self._logger.error(
                "Unreadable create booking response",
                extra={"body": response.body, "error": str(exc)},
            )
            return None

        self._logger.info("Successfully created booking", extra={"booking_id": created.bookingid})
        return created.bookingid

    async def get_booking(self, booking_id: int) -> Booking | None:
        self._logger.info("Getting booking", extra={"booking_id": booking_id})

        response = await self._send_or_failure("GET", f"/booking/{booking_id}")
        if not response.is_successful:
            self._log_failure("Failed to get booking", response, booking_id=booking_id)
            return None

        try:
            booking = BookingPayload.model_validate_json(response.body).to_domain(booking_id)
        except (ValidationError, ValueError) as exc:
            self._logger.error(
                "Unreadable booking response",
                extra={"booking_id": booking_id, "body": response.body, "error": str(exc)},
            )
            return None

        self._logger.info("Successfully retrieved booking", extra={"booking_id": booking_id})
        return booking

    async def list_booking_ids(self) -> list[int]:
        self._logger.info("Getting all booking IDs")

        response = await self._send_or_failure("GET", "/booking")
        if not response.is_successful:
            self._log_failure("Failed to get booking IDs", response)
            return []

        try:
            entries = json.loads(response.body)
            booking_ids = [BookingIdEntry.model_validate(entry).bookingid for entry in entries]
        except (json.JSONDecodeError, TypeError, ValidationError) as exc:
            self._logger.error(
                "Unreadable booking ID list", extra={"body": response.body, "error": str(exc)}
            )
            return []

        self._logger.info("Successfully retrieved booking IDs", extra={"count": len(booking_ids)})
        return booking_ids

    async def update_booking(self, booking_id: int, booking: Booking, token: str) -> bool:
        self._logger.info("Updating booking", extra={"booking_id": booking_id})
        payload = BookingPayload.from_domain(booking).to_wire()
        self._logger.debug(
            "Update booking data being sent", extra={"booking_id": booking_id, "payload": payload}
        )

        response = await self._send_or_failure(
            "PUT", f"/booking/{booking_id}", headers=_auth_cookie(token), json_body=payload
        )
        if not response.is_successful:
            self._log_failure("Failed to update booking", response, booking_id=booking_id)
            return False

        self._logger.info("Successfully updated booking", extra={"booking_id": booking_id})
        return True

    async def partial_update_booking(
        self, booking_id: int, patch: BookingPatch, token: str
    ) -> bool:
        self._logger.info("Partially updating booking", extra={"booking_id": booking_id})
        if patch.is_empty():
            self._logger.warning("Empty patch, nothing to send", extra={"booking_id": booking_id})
            return False
        payload = BookingPatchPayload.from_domain(patch).to_wire()

        response = await self._send_or_failure(
            "PATCH", f"/booking/{booking_id}", headers=_auth_cookie(token), json_body=payload
        )
        if not response.is_successful:
            self._log_failure("Failed to partially update booking", response, booking_id=booking_id)
            return False

        self._logger.info("Successfully partially updated booking", extra={"booking_id": booking_id})
        return True

    async def delete_booking(self, booking_id: int, token: str) -> bool:
        self._logger.info("Deleting booking", extra={"booking_id": booking_id})

        response = await self._send_or_failure(
            "DELETE", f"/booking/{booking_id}", headers=_auth_cookie(token)
        )
        if not response.is_successful:
            self._log_failure("Failed to delete booking", response, booking_id=booking_id)
            return False

        self._logger.info("Successfully deleted booking", extra={"booking_id": booking_id})
        return True

    async def health_check(self) -> bool:
        self._logger.info("Performing health check")

        response = await self._send_or_failure("GET", "/ping")
        if not response.is_successful:
            self._log_failure("Health check failed", response)
            return False

        self._logger.info("Health check successful")
        return True
