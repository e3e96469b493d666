"""Booking business logic.

Resolves booking navigation state against the catalog into a BookingDraft, and
implements the mock submission entry point: re-validate the whole payload,
authorize payment with the gateway, fabricate a booking id, log a masked summary.

Nothing is persisted. The booking exists only as the ``booking_created`` log
line and as the confirmation returned to the caller.
"""

import asyncio
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Protocol

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from nomad.config import settings
from nomad.exceptions import MissingInformationError
from nomad.logging import get_logger
from nomad.repositories.hotel import get_hotel, get_room
from nomad.schemas.booking import CompleteBookingPayload
from nomad.schemas.fields import field_errors
from nomad.services.pricing import nights_between, total_price

logger = get_logger(__name__)

MISSING_BOOKING_INFORMATION = "Missing booking information. Please select a room again."
MISSING_CONFIRMATION = "Booking information missing"
INVALID_BOOKING_DATA = "Invalid booking data provided."
PAYMENT_FAILED = "Payment processing failed."
UNEXPECTED_ERROR = "An unexpected error occurred while creating the booking."


def _timestamp_id(prefix: str) -> str:
    """Fabricated identifier in the style ``bk_1736467200000`` (epoch milliseconds)."""
    return f"{prefix}_{time.time_ns() // 1_000_000}"


def mask_card_number(card_number: str) -> str:
    """Display-safe card number exposing only the last four digits."""
    return "**** **** **** " + card_number[-4:]


@dataclass
class BookingDraft:
    """A not-yet-submitted reservation computed from navigation state and the room rate."""

    destination_id: str
    hotel_id: str
    room_id: str
    check_in: date
    check_out: date
    guests: int
    rooms: int
    price_per_night: Decimal
    total_price: Decimal

    @property
    def nights(self) -> int:
        return nights_between(self.check_in, self.check_out)


@dataclass
class ResolvedBooking:
    draft: BookingDraft
    hotel_name: str
    room_name: str


@dataclass
class BookingResult:
    success: bool
    booking_id: str | None = None
    error: str | None = None


@dataclass
class PaymentAuthorization:
    success: bool
    payment_id: str | None = None


class PaymentGateway(Protocol):
    async def authorize(
        self, amount: Decimal, card_holder_name: str, masked_card_number: str
    ) -> PaymentAuthorization: ...


class MockPaymentGateway:
    """Stand-in for a tokenizing payment provider. Every authorization succeeds."""

    async def authorize(
        self, amount: Decimal, card_holder_name: str, masked_card_number: str
    ) -> PaymentAuthorization:
        return PaymentAuthorization(success=True, payment_id=_timestamp_id("pi"))


async def resolve_booking_draft(
    db: AsyncSession,
    *,
    hotel_id: str | None,
    room_id: str | None,
    check_in: date | None,
    check_out: date | None,
    guests: int | None,
    rooms: int | None,
) -> ResolvedBooking:
    """Turn booking navigation state into a priced draft.

    The nightly rate always comes from the catalog room. Raises
    MissingInformationError when any value is absent, the hotel/room pair does
    not exist, or the stay is shorter than one night.
    """
    if (
        hotel_id is None
        or room_id is None
        or check_in is None
        or check_out is None
        or guests is None
        or rooms is None
    ):
        raise MissingInformationError(MISSING_BOOKING_INFORMATION)

    hotel = await get_hotel(db, hotel_id)
    room = await get_room(db, hotel_id, room_id)
    if hotel is None or room is None:
        raise MissingInformationError(MISSING_BOOKING_INFORMATION)

    nights = nights_between(check_in, check_out)
    if nights <= 0:
        raise MissingInformationError(MISSING_BOOKING_INFORMATION)

    draft = BookingDraft(
        destination_id=hotel.destination_id,
        hotel_id=hotel.id,
        room_id=room.id,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        rooms=rooms,
        price_per_night=room.price_per_night,
        total_price=total_price(nights, room.price_per_night, rooms),
    )
    return ResolvedBooking(draft=draft, hotel_name=hotel.name, room_name=room.name)


async def create_booking(payload: Mapping[str, Any], gateway: PaymentGateway) -> BookingResult:
    """Mock "create booking" backend call.

    Never raises: validation failures, declined payments and unexpected faults
    are all returned as ``BookingResult(success=False, error=...)``.
    """
    try:
        booking = CompleteBookingPayload.model_validate(payload)
    except ValidationError as exc:
        # Field names only; error dicts would carry the rejected input values
        fields = field_errors(exc.errors(include_input=False))
        logger.warning("booking_validation_failed", fields=sorted(fields))
        return BookingResult(success=False, error=INVALID_BOOKING_DATA)

    try:
        return await _place_booking(booking, gateway)
    except Exception:
        logger.exception("booking_failed", hotel_id=booking.hotel_id, room_id=booking.room_id)
        return BookingResult(success=False, error=UNEXPECTED_ERROR)


async def _place_booking(
    booking: CompleteBookingPayload, gateway: PaymentGateway
) -> BookingResult:
    await asyncio.sleep(settings.booking_delay_seconds)

    guest = booking.guest_info
    payment = booking.payment_info
    masked_card_number = mask_card_number(payment.card_number)

    authorization = await gateway.authorize(
        booking.total_price, payment.card_holder_name, masked_card_number
    )
    if not authorization.success:
        logger.warning("payment_declined", hotel_id=booking.hotel_id, room_id=booking.room_id)
        return BookingResult(success=False, error=PAYMENT_FAILED)

    booking_id = _timestamp_id("bk")
    logger.info(
        "booking_created",
        booking_id=booking_id,
        destination_id=booking.destination_id,
        hotel_id=booking.hotel_id,
        room_id=booking.room_id,
        hotel_name=booking.hotel_name,
        room_name=booking.room_name,
        check_in=booking.check_in.isoformat(),
        check_out=booking.check_out.isoformat(),
        guests=booking.guests,
        rooms=booking.rooms,
        total_price=str(booking.total_price),
        guest_first_name=guest.first_name,
        guest_last_name=guest.last_name,
        guest_email=guest.email,
        payment_id=authorization.payment_id,
        masked_card_number=masked_card_number,
    )
    return BookingResult(success=True, booking_id=booking_id)


@dataclass
class BookingConfirmation:
    booking_id: str
    hotel_name: str
    room_name: str
    check_in: date
    check_out: date
    guests: int
    total_price: Decimal


def resolve_confirmation(
    *,
    booking_id: str | None,
    hotel_name: str | None,
    room_name: str | None,
    check_in: date | None,
    check_out: date | None,
    guests: int | None,
    total_price: Decimal | None,
) -> BookingConfirmation:
    """Rebuild the confirmation summary from navigation state.

    Every value is required and the stay must last at least one night.
    """
    if (
        not booking_id
        or not hotel_name
        or not room_name
        or check_in is None
        or check_out is None
        or guests is None
        or total_price is None
    ):
        raise MissingInformationError(MISSING_CONFIRMATION)
    if nights_between(check_in, check_out) <= 0:
        raise MissingInformationError(MISSING_CONFIRMATION)
    return BookingConfirmation(
        booking_id=booking_id,
        hotel_name=hotel_name,
        room_name=room_name,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        total_price=total_price,
    )
