"""Function tools for the Miles of Smiles agents."""

import logging

from agents import function_tool

from smiles.config import get_config
from smiles.exceptions import (
    BookingCannotBeCancelled,
    BookingNotFound,
    EmailDeliveryError,
)
from smiles.models import Booking
from smiles.services.booking_service import get_booking_service
from smiles.services.email_service import get_email_service

logger = logging.getLogger(__name__)

POEM_SUBJECT = "A poem for you"


def _booking_to_dict(booking: Booking) -> dict:
    return {
        "booking_number": booking.booking_number,
        "booking_from": booking.booking_from.isoformat(),
        "booking_to": booking.booking_to.isoformat(),
        "customer": {
            "first_name": booking.customer.first_name,
            "last_name": booking.customer.last_name,
        },
    }


def lookup_booking(
    booking_number: str, customer_first_name: str, customer_last_name: str
) -> dict:
    """Look up a booking and describe it as a tool result."""
    logger.info(f"Looking up booking: {booking_number}")

    try:
        booking = get_booking_service().get_booking_details(
            booking_number, customer_first_name, customer_last_name
        )
    except BookingNotFound as e:
        return {"success": False, "error": str(e)}

    return {"success": True, "booking": _booking_to_dict(booking)}


def cancel_booking_for_customer(
    booking_number: str, customer_first_name: str, customer_last_name: str
) -> dict:
    """Cancel a booking and describe the outcome as a tool result."""
    logger.info(f"Cancelling booking: {booking_number}")

    try:
        booking = get_booking_service().cancel_booking(
            booking_number, customer_first_name, customer_last_name
        )
    except BookingNotFound as e:
        return {"success": False, "error": str(e)}
    except BookingCannotBeCancelled as e:
        return {"success": False, "error": str(e), "reason": e.reason}

    return {
        "success": True,
        "booking": _booking_to_dict(booking),
        "message": f"Booking {booking.booking_number} has been cancelled",
    }


def email_poem(poem: str) -> dict:
    """E-mail a poem to the configured recipient."""
    recipient = get_config().poem_recipient
    service = get_email_service()

    try:
        service.send_email(to=recipient, subject=POEM_SUBJECT, body=poem)
    except EmailDeliveryError as e:
        return {"success": False, "error": str(e)}

    return {
        "success": True,
        "recipient": recipient,
        "simulated": not service.is_configured(),
    }


@function_tool
def get_booking_details(
    booking_number: str, customer_first_name: str, customer_last_name: str
) -> dict:
    """Get the details of a car-rental booking.

    Args:
        booking_number: The booking number, e.g. 123-456
        customer_first_name: First name of the customer who made the booking
        customer_last_name: Last name of the customer who made the booking

    Returns:
        Dictionary with the booking or an error
    """
    return lookup_booking(booking_number, customer_first_name, customer_last_name)


@function_tool
def cancel_booking(
    booking_number: str, customer_first_name: str, customer_last_name: str
) -> dict:
    """Cancel a car-rental booking.

    Args:
        booking_number: The booking number, e.g. 123-456
        customer_first_name: First name of the customer who made the booking
        customer_last_name: Last name of the customer who made the booking

    Returns:
        Dictionary with the cancelled booking or the reason it was refused
    """
    return cancel_booking_for_customer(
        booking_number, customer_first_name, customer_last_name
    )


@function_tool
def send_poem_by_email(poem: str) -> dict:
    """Send a finished poem by e-mail.

    Args:
        poem: The full text of the poem

    Returns:
        Dictionary describing the delivery
    """
    return email_poem(poem)
