"""Booking submission, confirmation and wizard endpoints."""

from datetime import date
from decimal import Decimal
from functools import partial
from typing import Any

from fastapi import APIRouter, Body, Query

from nomad.dependencies import DB, Gateway, Wizards
from nomad.schemas.booking import (
    BookingConfirmationResponse,
    BookingDraftResponse,
    BookingQuery,
    BookingResultResponse,
    WizardResponse,
    WizardSubmitResponse,
)
from nomad.schemas.fields import MAX_GUESTS, MIN_GUESTS
from nomad.services.booking import create_booking, resolve_booking_draft, resolve_confirmation
from nomad.services.wizard import BookingWizard

router = APIRouter()


def _wizard_response(wizard: BookingWizard) -> WizardResponse:
    return WizardResponse(
        id=wizard.id,
        step=wizard.step.label,
        step_index=int(wizard.step),
        hotel_name=wizard.hotel_name,
        room_name=wizard.room_name,
        draft=BookingDraftResponse.model_validate(wizard.draft),
        guest_info=wizard.guest_info,
        confirmation=(
            BookingConfirmationResponse.model_validate(wizard.confirmation)
            if wizard.confirmation is not None
            else None
        ),
    )


@router.post("/bookings", response_model=BookingResultResponse, status_code=200)
async def submit_booking(
    gateway: Gateway, payload: dict[str, Any] = Body(...)
) -> BookingResultResponse:
    """Mock booking backend. Failures come back as ``success: false``, never as errors."""
    result = await create_booking(payload, gateway)
    return BookingResultResponse.model_validate(result)


@router.get("/bookings/confirmation", response_model=BookingConfirmationResponse)
async def booking_confirmation(
    booking_id: str | None = None,
    hotel_name: str | None = None,
    room_name: str | None = None,
    check_in: date | None = None,
    check_out: date | None = None,
    guests: int | None = Query(None, ge=MIN_GUESTS, le=MAX_GUESTS),
    total_price: Decimal | None = Query(None, gt=0),
) -> BookingConfirmationResponse:
    """Rebuild the confirmation summary from the navigation state."""
    confirmation = resolve_confirmation(
        booking_id=booking_id,
        hotel_name=hotel_name,
        room_name=room_name,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        total_price=total_price,
    )
    return BookingConfirmationResponse.model_validate(confirmation)


@router.post("/bookings/wizard", response_model=WizardResponse, status_code=201)
async def start_wizard(db: DB, wizards: Wizards, query: BookingQuery) -> WizardResponse:
    """Price the selected room and open a wizard on the details step."""
    resolved = await resolve_booking_draft(
        db,
        hotel_id=query.hotel_id,
        room_id=query.room_id,
        check_in=query.check_in,
        check_out=query.check_out,
        guests=query.guests,
        rooms=query.rooms,
    )
    return _wizard_response(wizards.create(resolved))


@router.get("/bookings/wizard/{wizard_id}", response_model=WizardResponse)
async def get_wizard(wizard_id: str, wizards: Wizards) -> WizardResponse:
    """Current step and collected details of a booking wizard."""
    return _wizard_response(wizards.get(wizard_id))


@router.post("/bookings/wizard/{wizard_id}/details", response_model=WizardResponse)
async def submit_details(
    wizard_id: str, wizards: Wizards, data: dict[str, Any] = Body(...)
) -> WizardResponse:
    """Validate guest details and move on to the review step."""
    wizard = wizards.get(wizard_id)
    wizard.submit_details(data)
    return _wizard_response(wizard)


@router.post("/bookings/wizard/{wizard_id}/review", response_model=WizardResponse)
async def confirm_review(wizard_id: str, wizards: Wizards) -> WizardResponse:
    """Confirm the reviewed booking and move on to payment."""
    wizard = wizards.get(wizard_id)
    wizard.confirm_review()
    return _wizard_response(wizard)


@router.post("/bookings/wizard/{wizard_id}/back", response_model=WizardResponse)
async def go_back(wizard_id: str, wizards: Wizards) -> WizardResponse:
    """Return to the previous step, keeping the details already entered."""
    wizard = wizards.get(wizard_id)
    wizard.back()
    return _wizard_response(wizard)


@router.post("/bookings/wizard/{wizard_id}/payment", response_model=WizardSubmitResponse)
async def submit_payment(
    wizard_id: str, wizards: Wizards, gateway: Gateway, data: dict[str, Any] = Body(...)
) -> WizardSubmitResponse:
    """Validate payment details and submit the booking.

    A rejected submission is reported in the body and leaves the wizard on the
    payment step. A completed wizard is discarded once its confirmation is returned.
    """
    wizard = wizards.get(wizard_id)
    result = await wizard.submit_payment(data, partial(create_booking, gateway=gateway))
    if wizard.completed:
        wizards.discard(wizard.id)
    return WizardSubmitResponse(
        success=result.success,
        booking_id=result.booking_id,
        error=result.error,
        wizard=_wizard_response(wizard),
    )
