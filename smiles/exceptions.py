"""Exceptions raised by the Miles of Smiles service."""


class SmilesError(Exception):
    """Base class for all service errors."""


class GuardrailViolation(SmilesError):
    """An assistant request or reply was rejected by a guardrail."""

    def __init__(self, guardrail_name: str, message: str | None = None) -> None:
        self.guardrail_name = guardrail_name
        super().__init__(message or f"Guardrail '{guardrail_name}' was triggered")


class BookingNotFound(SmilesError):
    """No booking matches the given number and customer."""

    def __init__(self, booking_number: str) -> None:
        self.booking_number = booking_number
        super().__init__(f"Booking {booking_number} not found")


class BookingCannotBeCancelled(SmilesError):
    """The cancellation policy forbids cancelling this booking."""

    def __init__(self, booking_number: str, reason: str) -> None:
        self.booking_number = booking_number
        self.reason = reason
        super().__init__(f"Booking {booking_number} cannot be cancelled: {reason}")


class EmailDeliveryError(SmilesError):
    """The SMTP server refused or failed to deliver a message."""
