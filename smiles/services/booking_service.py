"""In-memory booking store with the Miles of Smiles cancellation policy."""

import logging
import threading
from collections.abc import Callable, Iterable
from datetime import date, timedelta

from smiles.exceptions import BookingCannotBeCancelled, BookingNotFound
from smiles.models import Booking, Customer

logger = logging.getLogger(__name__)

# Cancellation policy
MIN_DAYS_BEFORE_START = 11
MIN_BOOKING_DAYS = 4


def demo_bookings(today: date) -> list[Booking]:
    """Build the demo bookings, dated relative to ``today``."""
    klaus = Customer(first_name="Klaus", last_name="Heisler")
    david = Customer(first_name="David", last_name="Wood")
    return [
        Booking(
            booking_number="123-456",
            booking_from=today + timedelta(days=20),
            booking_to=today + timedelta(days=30),
            customer=klaus,
        ),
        Booking(
            booking_number="234-567",
            booking_from=today + timedelta(days=5),
            booking_to=today + timedelta(days=12),
            customer=klaus,
        ),
        Booking(
            booking_number="345-678",
            booking_from=today + timedelta(days=15),
            booking_to=today + timedelta(days=17),
            customer=david,
        ),
        Booking(
            booking_number="456-789",
            booking_from=today + timedelta(days=40),
            booking_to=today + timedelta(days=50),
            customer=david,
        ),
    ]


class BookingService:
    """Looks up and cancels bookings.

    Attributes:
        today: Callable returning the current date
    """

    def __init__(
        self,
        bookings: Iterable[Booking] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the booking service.

        Args:
            bookings: Initial bookings (demo bookings when omitted)
            today: Callable returning the current date
        """
        self.today = today
        if bookings is None:
            bookings = demo_bookings(today())
        self._bookings: dict[str, Booking] = {b.booking_number: b for b in bookings}
        # Tools run on worker threads
        self._lock = threading.RLock()

        logger.info("BookingService initialized with %d bookings", len(self._bookings))

    def list_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def get_booking_details(
        self, booking_number: str, first_name: str, last_name: str
    ) -> Booking:
        """Find a booking owned by the named customer.

        Raises:
            BookingNotFound: If the number is unknown or the names do not match
        """
        with self._lock:
            booking = self._bookings.get(booking_number.strip())
        if booking is None or not booking.customer.matches(first_name, last_name):
            logger.info(f"No booking {booking_number} for {first_name} {last_name}")
            raise BookingNotFound(booking_number)
        return booking

    def cancel_booking(
        self, booking_number: str, first_name: str, last_name: str
    ) -> Booking:
        """Cancel a booking if the policy allows it.

        Returns:
            The cancelled booking

        Raises:
            BookingNotFound: If the booking cannot be found
            BookingCannotBeCancelled: If it starts too soon or is too short
        """
        with self._lock:
            booking = self.get_booking_details(booking_number, first_name, last_name)

            cutoff = self.today() + timedelta(days=MIN_DAYS_BEFORE_START)
            if booking.booking_from < cutoff:
                raise BookingCannotBeCancelled(
                    booking.booking_number,
                    f"bookings must be cancelled at least {MIN_DAYS_BEFORE_START} "
                    "days before the start date",
                )

            if booking.duration_days < MIN_BOOKING_DAYS:
                raise BookingCannotBeCancelled(
                    booking.booking_number,
                    f"bookings shorter than {MIN_BOOKING_DAYS} days cannot be cancelled",
                )

            self._bookings.pop(booking.booking_number)

        logger.info(f"Cancelled booking {booking.booking_number}")
        return booking


# Global singleton instance
_booking_service: BookingService | None = None


def get_booking_service() -> BookingService:
    """Get the global BookingService instance.

    Returns:
        BookingService singleton
    """
    global _booking_service
    if _booking_service is None:
        _booking_service = BookingService()
    return _booking_service
