"""Data models for car-rental bookings."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """Customer who owns one or more bookings."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., description="Customer first name")
    last_name: str = Field(..., description="Customer last name")

    def matches(self, first_name: str, last_name: str) -> bool:
        """Case-insensitive name comparison."""
        return (
            self.first_name.casefold() == first_name.strip().casefold()
            and self.last_name.casefold() == last_name.strip().casefold()
        )


class Booking(BaseModel):
    """A car-rental booking.

    Dates are not checked against each other; the record holds whatever
    it was given.
    """

    model_config = ConfigDict(frozen=True)

    booking_number: str = Field(..., description="Booking identifier")
    booking_from: date = Field(..., description="First day of the rental")
    booking_to: date = Field(..., description="Last day of the rental")
    customer: Customer = Field(..., description="Customer holding the booking")

    @property
    def duration_days(self) -> int:
        return (self.booking_to - self.booking_from).days
