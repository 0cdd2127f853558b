"""Shared fixtures for the Miles of Smiles tests."""

import os
from datetime import date

import pytest

# Config requires an API key; agents are built but never run against OpenAI.
os.environ.setdefault("OPENAI_API_KEY", "test-key")
for var in ("SMTP_HOST", "SMTP_SENDER", "SMTP_USERNAME", "SMTP_PASSWORD"):
    os.environ.pop(var, None)

from smiles.models import Booking, Customer  # noqa: E402
from smiles.services import booking_service, email_service  # noqa: E402
from smiles.services.booking_service import BookingService  # noqa: E402
from smiles.services.email_service import EmailService  # noqa: E402

TODAY = date(2025, 3, 1)


@pytest.fixture
def klaus():
    return Customer(first_name="Klaus", last_name="Heisler")


@pytest.fixture
def bookings(klaus):
    """Bookings covering each branch of the cancellation policy."""
    return [
        # Starts in 20 days, lasts 10: cancellable
        Booking(
            booking_number="123-456",
            booking_from=date(2025, 3, 21),
            booking_to=date(2025, 3, 31),
            customer=klaus,
        ),
        # Starts in 5 days: too soon
        Booking(
            booking_number="234-567",
            booking_from=date(2025, 3, 6),
            booking_to=date(2025, 3, 13),
            customer=klaus,
        ),
        # Starts in 15 days, lasts 2: too short
        Booking(
            booking_number="345-678",
            booking_from=date(2025, 3, 16),
            booking_to=date(2025, 3, 18),
            customer=klaus,
        ),
    ]


@pytest.fixture
def booking_svc(bookings, monkeypatch):
    """A BookingService with fixed data, installed as the global instance."""
    svc = BookingService(bookings, today=lambda: TODAY)
    monkeypatch.setattr(booking_service, "_booking_service", svc)
    return svc


@pytest.fixture
def email_svc(monkeypatch):
    """A simulated EmailService installed as the global instance."""
    svc = EmailService()
    monkeypatch.setattr(email_service, "_email_service", svc)
    return svc
