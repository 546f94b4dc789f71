from datetime import date, timedelta

from booker.infrastructure.services.booking_generator import BookingGenerator

TODAY = date(2024, 6, 15)


class TestBookingGenerator:
    def test_same_seed_same_bookings(self):
        first = BookingGenerator(seed=7, today=TODAY).generate_bookings(5)
        second = BookingGenerator(seed=7, today=TODAY).generate_bookings(5)

        assert first == second

    def test_dates_are_in_the_past_year(self, generator):
        yesterday = TODAY - timedelta(days=1)

        for _ in range(200):
            dates = generator.generate_dates()
            assert dates.checkout <= yesterday
            assert dates.checkout > TODAY - timedelta(days=BookingGenerator.MAX_DAYS_IN_PAST + 1)
            assert 1 <= dates.nights <= BookingGenerator.MAX_NIGHTS

    def test_field_ranges(self, generator):
        for booking in generator.generate_bookings(100):
            assert booking.first_name in BookingGenerator.FIRST_NAMES
            assert booking.last_name in BookingGenerator.LAST_NAMES
            assert BookingGenerator.MIN_PRICE <= booking.total_price <= BookingGenerator.MAX_PRICE
            assert booking.additional_needs in BookingGenerator.ADDITIONAL_NEEDS
            assert booking.booking_id is None

    def test_generate_bookings_count(self, generator):
        assert len(generator.generate_bookings(3)) == 3
        assert generator.generate_bookings(0) == []

    def test_patch_touches_names_and_price(self, generator):
        patch = generator.generate_patch()

        assert patch.first_name and patch.last_name
        assert patch.total_price is not None
        assert patch.booking_dates is None
        assert patch.deposit_paid is None
