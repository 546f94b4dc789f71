"""Wire models for the booking API JSON bodies."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from booker.domain.entities import Booking, BookingDates, BookingPatch


def to_calendar_date(value: Any) -> Any:
    """
    Coerce a date-like value to a plain date, dropping any time component.

    Accepts date, datetime and ISO strings such as "2024-03-01" or
    "2024-03-01T10:30:00.000Z". Anything else is left for pydantic to reject.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10 and text[10] in "T ":
            text = text[:10]
        return date.fromisoformat(text)
    return value


def _lowercase_keys(data: Any) -> Any:
    # Field names in responses are matched case-insensitively.
    if isinstance(data, dict):
        return {str(key).lower(): value for key, value in data.items()}
    return data


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        return _lowercase_keys(data)


class BookingDatesPayload(_WireModel):
    checkin: date
    checkout: date

    @field_validator("checkin", "checkout", mode="before")
    @classmethod
    def drop_time(cls, value: Any) -> Any:
        return to_calendar_date(value)

    @classmethod
    def from_domain(cls, dates: BookingDates) -> "BookingDatesPayload":
        return cls(checkin=dates.checkin, checkout=dates.checkout)

    def to_domain(self) -> BookingDates:
        return BookingDates(checkin=self.checkin, checkout=self.checkout)


class BookingPayload(_WireModel):
    firstname: str
    lastname: str
    totalprice: int = Field(ge=0)
    depositpaid: bool
    bookingdates: BookingDatesPayload
    additionalneeds: str | None = None

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingPayload":
        return cls(
            firstname=booking.first_name,
            lastname=booking.last_name,
            totalprice=booking.total_price,
            depositpaid=booking.deposit_paid,
            bookingdates=BookingDatesPayload.from_domain(booking.booking_dates),
            additionalneeds=booking.additional_needs,
        )

    def to_domain(self, booking_id: int | None = None) -> Booking:
        return Booking(
            first_name=self.firstname,
            last_name=self.lastname,
            total_price=self.totalprice,
            deposit_paid=self.depositpaid,
            booking_dates=self.bookingdates.to_domain(),
            additional_needs=self.additionalneeds,
            booking_id=booking_id,
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class BookingPatchPayload(_WireModel):
    firstname: str | None = None
    lastname: str | None = None
    totalprice: int | None = Field(default=None, ge=0)
    depositpaid: bool | None = None
    bookingdates: BookingDatesPayload | None = None
    additionalneeds: str | None = None

    @classmethod
    def from_domain(cls, patch: BookingPatch) -> "BookingPatchPayload":
        return cls(
            firstname=patch.first_name,
            lastname=patch.last_name,
            totalprice=patch.total_price,
            depositpaid=patch.deposit_paid,
            bookingdates=(
                BookingDatesPayload.from_domain(patch.booking_dates)
                if patch.booking_dates
                else None
            ),
            additionalneeds=patch.additional_needs,
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class CreateBookingResponse(_WireModel):
    bookingid: int
    booking: BookingPayload | None = None


class BookingIdEntry(_WireModel):
    bookingid: int


class AuthRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str
