"""Tests for data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from smiles.models import Booking, Customer


class TestCustomer:
    """Tests for the Customer model."""

    def test_create_customer(self):
        """Test creating a customer."""
        customer = Customer(first_name="Klaus", last_name="Heisler")

        assert customer.first_name == "Klaus"
        assert customer.last_name == "Heisler"

    def test_customer_immutable(self):
        """Test that customer is frozen/immutable."""
        customer = Customer(first_name="Klaus", last_name="Heisler")

        with pytest.raises((ValidationError, AttributeError)):
            customer.first_name = "Hans"

    def test_matches_ignores_case_and_whitespace(self):
        """Test name matching."""
        customer = Customer(first_name="Klaus", last_name="Heisler")

        assert customer.matches("klaus", " HEISLER ")
        assert not customer.matches("Klaus", "Wood")


class TestBooking:
    """Tests for the Booking model."""

    def test_create_booking(self, klaus):
        """Test that a booking keeps the values it was built with."""
        booking = Booking(
            booking_number="123-456",
            booking_from=date(2025, 3, 21),
            booking_to=date(2025, 3, 31),
            customer=klaus,
        )

        assert booking.booking_number == "123-456"
        assert booking.booking_from == date(2025, 3, 21)
        assert booking.booking_to == date(2025, 3, 31)
        assert booking.customer == klaus
        # Repeated reads return the same values
        assert booking.booking_number == "123-456"

    def test_booking_immutable(self, klaus):
        """Test that booking is frozen/immutable."""
        booking = Booking(
            booking_number="123-456",
            booking_from=date(2025, 3, 21),
            booking_to=date(2025, 3, 31),
            customer=klaus,
        )

        with pytest.raises((ValidationError, AttributeError)):
            booking.booking_to = date(2025, 4, 30)

        assert booking.booking_to == date(2025, 3, 31)

    def test_no_date_order_check(self, klaus):
        """Test that an end date before the start date is accepted."""
        booking = Booking(
            booking_number="x",
            booking_from=date(2025, 3, 31),
            booking_to=date(2025, 3, 21),
            customer=klaus,
        )

        assert booking.duration_days == -10

    def test_parses_iso_dates(self, klaus):
        """Test that ISO date strings are parsed."""
        booking = Booking(
            booking_number="123-456",
            booking_from="2025-03-21",
            booking_to="2025-03-31",
            customer=klaus,
        )

        assert booking.booking_from == date(2025, 3, 21)
        assert booking.duration_days == 10

    def test_missing_customer(self):
        """Test that every field is required."""
        with pytest.raises(ValidationError):
            Booking(
                booking_number="123-456",
                booking_from=date(2025, 3, 21),
                booking_to=date(2025, 3, 31),
            )
