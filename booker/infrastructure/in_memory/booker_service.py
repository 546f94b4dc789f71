"""
In-memory stand-in for the remote Restful Booker service.

Implements the same wire contract (paths, status codes, JSON shapes,
cookie-token auth) over a dict, so the client and the test suite can run
without network access. Drive it through httpx.ASGITransport.
"""

import base64
import logging
import secrets
from collections import deque
from itertools import count

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from booker.application.dtos.booking_payload import AuthRequest, BookingPatchPayload, BookingPayload

logger = logging.getLogger(__name__)


class InMemoryBookingStore:
    """Bookings and issued tokens for one service instance."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password
        self._bookings: dict[int, BookingPayload] = {}
        self._tokens: set[str] = set()
        self._ids = count(1)

    def issue_token(self, username: str, password: str) -> str | None:
        if username != self._username or password != self._password:
            return None
        token = secrets.token_hex(8)
        self._tokens.add(token)
        return token

    def is_authorized(self, request: Request) -> bool:
        token = request.cookies.get("token")
        if token and token in self._tokens:
            return True
        authorization = request.headers.get("Authorization", "")
        if authorization.startswith("Basic "):
            expected = base64.b64encode(f"{self._username}:{self._password}".encode()).decode()
            return authorization[len("Basic "):] == expected
        return False

    def add(self, booking: BookingPayload) -> int:
        booking_id = next(self._ids)
        self._bookings[booking_id] = booking
        return booking_id

    def get(self, booking_id: int) -> BookingPayload | None:
        return self._bookings.get(booking_id)

    def replace(self, booking_id: int, booking: BookingPayload) -> None:
        self._bookings[booking_id] = booking

    def remove(self, booking_id: int) -> bool:
        return self._bookings.pop(booking_id, None) is not None

    def ids(self) -> list[int]:
        return list(self._bookings)


def _store(request: Request) -> InMemoryBookingStore:
    return request.app.state.store


async def _json_body(request: Request):
    try:
        return await request.json()
    except ValueError:
        return None


router = APIRouter()


@router.post("/auth")
async def create_token(request: Request):
    try:
        credentials = AuthRequest.model_validate(await _json_body(request))
    except ValidationError:
        return JSONResponse({"reason": "Bad credentials"})

    token = _store(request).issue_token(credentials.username, credentials.password)
    if token is None:
        # The real service reports bad credentials with HTTP 200.
        return JSONResponse({"reason": "Bad credentials"})
    return JSONResponse({"token": token})


@router.get("/booking")
async def list_bookings(request: Request):
    return JSONResponse([{"bookingid": booking_id} for booking_id in _store(request).ids()])


@router.post("/booking")
async def create_booking(request: Request):
    try:
        booking = BookingPayload.model_validate(await _json_body(request))
    except ValidationError as exc:
        logger.warning("Rejected booking payload", extra={"error": str(exc)})
        return PlainTextResponse("Internal Server Error", status_code=500)

    booking_id = _store(request).add(booking)
    return JSONResponse({"bookingid": booking_id, "booking": booking.to_wire()})


@router.get("/booking/{booking_id}")
async def get_booking(booking_id: int, request: Request):
    booking = _store(request).get(booking_id)
    if booking is None:
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse(booking.to_wire())


@router.put("/booking/{booking_id}")
async def update_booking(booking_id: int, request: Request):
    store = _store(request)
    if not store.is_authorized(request):
        return PlainTextResponse("Forbidden", status_code=403)
    if store.get(booking_id) is None:
        return PlainTextResponse("Method Not Allowed", status_code=405)
    try:
        booking = BookingPayload.model_validate(await _json_body(request))
    except ValidationError:
        return PlainTextResponse("Bad Request", status_code=400)

    store.replace(booking_id, booking)
    return JSONResponse(booking.to_wire())


@router.patch("/booking/{booking_id}")
async def partial_update_booking(booking_id: int, request: Request):
    store = _store(request)
    if not store.is_authorized(request):
        return PlainTextResponse("Forbidden", status_code=403)
    current = store.get(booking_id)
    if current is None:
        return PlainTextResponse("Method Not Allowed", status_code=405)
    try:
        patch = BookingPatchPayload.model_validate(await _json_body(request))
        merged = BookingPayload.model_validate(current.to_wire() | patch.to_wire())
    except ValidationError:
        return PlainTextResponse("Bad Request", status_code=400)

    store.replace(booking_id, merged)
    return JSONResponse(merged.to_wire())


@router.delete("/booking/{booking_id}")
async def delete_booking(booking_id: int, request: Request):
    store = _store(request)
    if not store.is_authorized(request):
        return PlainTextResponse("Forbidden", status_code=403)
    if not store.remove(booking_id):
        return PlainTextResponse("Method Not Allowed", status_code=405)
    return PlainTextResponse("Created", status_code=201)


@router.get("/ping")
async def ping():
    return PlainTextResponse("Created", status_code=201)


def create_app(username: str = "admin", password: str = "password123") -> FastAPI:
    app = FastAPI(title="Restful Booker (in-memory)", version="0.1.0")
    app.state.store = InMemoryBookingStore(username=username, password=password)
    app.state.faults = deque()

    @app.middleware("http")
    async def injected_faults(request: Request, call_next):
        faults: deque = request.app.state.faults
        if faults:
            status_code = faults.popleft()
            logger.info(
                "Answering with injected fault",
                extra={"status_code": status_code, "path": request.url.path},
            )
            return PlainTextResponse("Injected fault", status_code=status_code)
        return await call_next(request)

    app.include_router(router)
    return app


def inject_faults(app: FastAPI, *status_codes: int) -> None:
    """Make the next len(status_codes) requests fail with these statuses, in order."""
    app.state.faults.extend(status_codes)
