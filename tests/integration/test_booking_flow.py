"""End-to-end booking operations through the client and the in-memory service."""

from datetime import date

import pytest

from booker.domain.entities import Booking, BookingDates, BookingPatch
from booker.infrastructure.in_memory.booker_service import inject_faults


class TestBookingFlow:
    @pytest.mark.asyncio
    async def test_health_check(self, client):
        assert await client.health_check()

    @pytest.mark.asyncio
    async def test_create_and_read_back(self, client, sample_booking):
        booking_id = await client.create_booking(sample_booking)

        fetched = await client.get_booking(booking_id)

        assert booking_id is not None
        assert fetched == sample_booking
        assert fetched.booking_id == booking_id

    @pytest.mark.asyncio
    async def test_generated_booking_round_trip(self, client, generator):
        booking = generator.generate_booking()

        booking_id = await client.create_booking(booking)

        assert await client.get_booking(booking_id) == booking

    @pytest.mark.asyncio
    async def test_created_ids_are_listed(self, client, generator):
        created = [await client.create_booking(b) for b in generator.generate_bookings(3)]

        assert set(created) <= set(await client.list_booking_ids())

    @pytest.mark.asyncio
    async def test_list_is_empty_on_fresh_service(self, client):
        assert await client.list_booking_ids() == []

    @pytest.mark.asyncio
    async def test_update_replaces_every_field(self, client, auth_token, sample_booking):
        booking_id = await client.create_booking(sample_booking)
        replacement = Booking(
            first_name="Eric",
            last_name="Ericsson",
            total_price=999,
            deposit_paid=False,
            booking_dates=BookingDates(checkin=date(2023, 7, 10), checkout=date(2023, 7, 20)),
            additional_needs=None,
        )

        assert await client.update_booking(booking_id, replacement, auth_token)
        assert await client.get_booking(booking_id) == replacement

    @pytest.mark.asyncio
    async def test_partial_update_keeps_untouched_fields(self, client, auth_token, sample_booking):
        booking_id = await client.create_booking(sample_booking)
        patch = BookingPatch(first_name="James", total_price=450)

        assert await client.partial_update_booking(booking_id, patch, auth_token)
        assert await client.get_booking(booking_id) == patch.apply_to(sample_booking)

    @pytest.mark.asyncio
    async def test_delete_then_get_returns_none(self, client, auth_token, sample_booking):
        booking_id = await client.create_booking(sample_booking)

        assert await client.delete_booking(booking_id, auth_token)
        assert await client.get_booking(booking_id) is None
        assert booking_id not in await client.list_booking_ids()

    @pytest.mark.asyncio
    async def test_mutations_with_invalid_token_fail_without_raising(self, client, sample_booking):
        booking_id = await client.create_booking(sample_booking)

        assert not await client.update_booking(booking_id, sample_booking, "invalid")
        assert not await client.partial_update_booking(booking_id, BookingPatch(first_name="X"), "invalid")
        assert not await client.delete_booking(booking_id, "invalid")
        assert await client.get_booking(booking_id) == sample_booking

    @pytest.mark.asyncio
    async def test_missing_booking_is_none(self, client):
        assert await client.get_booking(424242) is None


class TestTransientFailures:
    @pytest.mark.asyncio
    async def test_recovers_from_transient_errors(self, client, booker_app, sample_booking):
        # max_retries=2 in the test settings: three attempts in total.
        inject_faults(booker_app, 503, 502)

        booking_id = await client.create_booking(sample_booking)

        assert booking_id is not None
        assert await client.get_booking(booking_id) == sample_booking

    @pytest.mark.asyncio
    async def test_gives_up_when_errors_outlast_the_budget(self, client, booker_app):
        inject_faults(booker_app, 500, 500, 500, 500)

        assert not await client.health_check()
        # The fourth fault is still queued; the next call consumes it and retries past it.
        assert await client.health_check()

    @pytest.mark.asyncio
    async def test_client_errors_are_not_retried(self, client, booker_app):
        inject_faults(booker_app, 404, 503)

        assert not await client.health_check()
        assert list(booker_app.state.faults) == [503]
