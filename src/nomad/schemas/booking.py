"""Booking request/response schemas.

GuestInfo and PaymentInfo are the two wizard forms. CompleteBookingPayload is
what the submission handler re-validates before it creates a booking.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from nomad.schemas.fields import (
    Email,
    GuestCount,
    RoomCount,
    check_out_after_check_in,
    matches,
    min_length,
    required,
)

Salutation = Literal["Mr", "Ms", "Mrs", "Dr", "Other"]


class GuestInfo(BaseModel):
    """Guest details step."""

    salutation: Salutation = "Mr"
    first_name: Annotated[str, required("First name is required")]
    last_name: Annotated[str, required("Last name is required")]
    email: Email
    phone_number: Annotated[str, min_length(7, "Phone number is required")]
    special_requests: str | None = None


class BillingAddress(BaseModel):
    street: Annotated[str, required("Street address is required")]
    city: Annotated[str, required("City is required")]
    postal_code: Annotated[str, required("Postal code is required")]
    country: Annotated[str, required("Country is required")]


class PaymentInfo(BaseModel):
    """Payment step. Format checks only; raw card fields are kept out of repr()."""

    card_holder_name: Annotated[str, required("Cardholder name is required")]
    card_number: Annotated[
        str,
        matches(r".{16}", "Card number must be 16 digits"),
        matches(r"[0-9]+", "Card number must be digits"),
    ] = Field(repr=False)
    expiry_date: Annotated[
        str, matches(r"(0[1-9]|1[0-2])/[0-9]{2}", "Expiry date must be MM/YY")
    ] = Field(repr=False)
    cvv: Annotated[str, matches(r"[0-9]{3,4}", "CVV must be 3 or 4 digits")] = Field(repr=False)
    billing_address: BillingAddress


class CompleteBookingPayload(BaseModel):
    """Everything the mock backend needs to create a booking."""

    destination_id: Annotated[str, required("Destination is required")]
    hotel_id: Annotated[str, required("Hotel is required")]
    room_id: Annotated[str, required("Room is required")]
    check_in: date
    check_out: date
    guests: GuestCount
    rooms: RoomCount
    total_price: Decimal = Field(gt=0)
    hotel_name: str
    room_name: str
    guest_info: GuestInfo
    payment_info: PaymentInfo

    @field_validator("check_out")
    @classmethod
    def check_stay_length(cls, value: date, info: ValidationInfo) -> date:
        return check_out_after_check_in(value, info)


class BookingResultResponse(BaseModel):
    """Result of the mock submission entry point."""

    model_config = {"from_attributes": True}

    success: bool
    booking_id: str | None = None
    error: str | None = None


class BookingQuery(BaseModel):
    """Navigation state carried from a room's "Book now" link into the wizard.

    Everything is optional: missing values are reported as missing booking
    information rather than as field errors.
    """

    hotel_id: str | None = None
    room_id: str | None = None
    check_in: date | None = None
    check_out: date | None = None
    guests: GuestCount | None = None
    rooms: RoomCount | None = None


class BookingDraftResponse(BaseModel):
    model_config = {"from_attributes": True}

    destination_id: str
    hotel_id: str
    room_id: str
    check_in: date
    check_out: date
    guests: int
    rooms: int
    nights: int
    price_per_night: Decimal
    total_price: Decimal


class BookingConfirmationResponse(BaseModel):
    """Summary shown on the confirmation view."""

    model_config = {"from_attributes": True}

    booking_id: str
    hotel_name: str
    room_name: str
    check_in: date
    check_out: date
    guests: int
    total_price: Decimal


class WizardResponse(BaseModel):
    """Current state of a booking wizard."""

    id: str
    step: Literal["details", "review", "payment"]
    step_index: int
    hotel_name: str
    room_name: str
    draft: BookingDraftResponse
    guest_info: GuestInfo | None
    confirmation: BookingConfirmationResponse | None


class WizardSubmitResponse(BookingResultResponse):
    wizard: WizardResponse
