"""Backend services for the Miles of Smiles assistants."""

from smiles.services.booking_service import BookingService, get_booking_service
from smiles.services.email_service import EmailService, get_email_service

__all__ = [
    "BookingService",
    "EmailService",
    "get_booking_service",
    "get_email_service",
]
