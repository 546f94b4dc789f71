"""Concurrent tests share one factory but never share client state."""

import asyncio

import pytest

from booker.domain.entities import BookingPatch


async def _lifecycle(client, booking, token):
    booking_id = await client.create_booking(booking)
    fetched = await client.get_booking(booking_id)
    patched = await client.partial_update_booking(booking_id, BookingPatch(total_price=1), token)
    deleted = await client.delete_booking(booking_id, token)
    return booking_id, fetched, patched, deleted


class TestParallelExecution:
    @pytest.mark.asyncio
    async def test_concurrent_lifecycles_do_not_interfere(self, client_factory, generator, settings):
        bookings = generator.generate_bookings(10)
        clients = [client_factory.create_client() for _ in bookings]
        tokens = await asyncio.gather(
            *(c.authenticate(settings.username, settings.password) for c in clients)
        )

        results = await asyncio.gather(
            *(_lifecycle(c, b, t) for c, b, t in zip(clients, bookings, tokens))
        )

        booking_ids = [booking_id for booking_id, _, _, _ in results]
        assert len(set(booking_ids)) == len(bookings)
        for booking, (_, fetched, patched, deleted) in zip(bookings, results):
            assert fetched == booking
            assert patched and deleted
        assert await client_factory.create_client().list_booking_ids() == []

    @pytest.mark.asyncio
    async def test_each_client_gets_its_own_token(self, client_factory, settings):
        clients = [client_factory.create_client() for _ in range(5)]

        tokens = await asyncio.gather(
            *(c.authenticate(settings.username, settings.password) for c in clients)
        )

        assert len(set(tokens)) == len(tokens)

    @pytest.mark.asyncio
    async def test_concurrent_creates_are_all_listed(self, client_factory, generator):
        client = client_factory.create_client()

        created = await asyncio.gather(*(client.create_booking(b) for b in generator.generate_bookings(20)))

        assert sorted(created) == sorted(await client.list_booking_ids())
