"""Booking wizard state machine: Details -> Review -> Payment."""

import asyncio
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from nomad.exceptions import InvalidTransitionError, NotFoundError, StepValidationError
from nomad.services.booking import BookingDraft, BookingResult, ResolvedBooking
from nomad.services.wizard import (
    BookingWizard,
    WizardEvent,
    WizardStep,
    WizardStore,
    transition,
)
from tests.factories import GUEST, PAYMENT


class RecordingSubmitter:
    def __init__(self, result: BookingResult) -> None:
        self.result = result
        self.payloads: list[Mapping[str, Any]] = []

    async def __call__(self, payload: Mapping[str, Any]) -> BookingResult:
        self.payloads.append(payload)
        await asyncio.sleep(0)
        return self.result


def make_resolved() -> ResolvedBooking:
    draft = BookingDraft(
        destination_id="paris",
        hotel_id="hotel-paris-1",
        room_id="room-paris-1-std",
        check_in=date(2025, 1, 10),
        check_out=date(2025, 1, 13),
        guests=2,
        rooms=1,
        price_per_night=Decimal("350"),
        total_price=Decimal("1050"),
    )
    return ResolvedBooking(
        draft=draft, hotel_name="Grand Parisian Hotel", room_name="Standard Double Room"
    )


def at_payment_step() -> BookingWizard:
    wizard = WizardStore().create(make_resolved())
    wizard.submit_details(GUEST)
    wizard.confirm_review()
    return wizard


# ---------------------------------------------------------------------------
# Transition function
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "step, event, expected",
    [
        (WizardStep.DETAILS, WizardEvent.NEXT, WizardStep.REVIEW),
        (WizardStep.REVIEW, WizardEvent.NEXT, WizardStep.PAYMENT),
        (WizardStep.REVIEW, WizardEvent.BACK, WizardStep.DETAILS),
        (WizardStep.PAYMENT, WizardEvent.BACK, WizardStep.REVIEW),
    ],
)
def test_transition_allowed(step: WizardStep, event: WizardEvent, expected: WizardStep) -> None:
    assert transition(step, event) is expected


@pytest.mark.parametrize(
    "step, event",
    [(WizardStep.DETAILS, WizardEvent.BACK), (WizardStep.PAYMENT, WizardEvent.NEXT)],
)
def test_transition_rejected(step: WizardStep, event: WizardEvent) -> None:
    with pytest.raises(InvalidTransitionError):
        transition(step, event)


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------
def test_wizard_starts_on_details() -> None:
    wizard = WizardStore().create(make_resolved())
    assert wizard.step is WizardStep.DETAILS
    assert wizard.guest_info is None
    assert not wizard.completed


def test_invalid_details_keep_wizard_on_details() -> None:
    wizard = WizardStore().create(make_resolved())

    with pytest.raises(StepValidationError) as exc_info:
        wizard.submit_details({**GUEST, "email": "nope", "first_name": ""})

    assert exc_info.value.fields == {
        "first_name": "First name is required",
        "email": "Invalid email address",
    }
    assert wizard.step is WizardStep.DETAILS
    assert wizard.guest_info is None


def test_back_from_review_keeps_guest_details() -> None:
    wizard = WizardStore().create(make_resolved())
    wizard.submit_details(GUEST)

    wizard.back()

    assert wizard.step is WizardStep.DETAILS
    assert wizard.guest_info is not None
    assert wizard.guest_info.email == GUEST["email"]


def test_review_cannot_be_confirmed_from_details() -> None:
    wizard = WizardStore().create(make_resolved())
    with pytest.raises(InvalidTransitionError):
        wizard.confirm_review()


@pytest.mark.asyncio
async def test_payment_cannot_be_submitted_from_review() -> None:
    wizard = WizardStore().create(make_resolved())
    wizard.submit_details(GUEST)
    submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_1"))

    with pytest.raises(InvalidTransitionError):
        await wizard.submit_payment(PAYMENT, submit)
    assert submit.payloads == []


@pytest.mark.asyncio
async def test_short_card_number_never_reaches_submitter() -> None:
    wizard = at_payment_step()
    submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_1"))

    with pytest.raises(StepValidationError) as exc_info:
        await wizard.submit_payment({**PAYMENT, "card_number": "424242424242424"}, submit)

    assert exc_info.value.fields == {"card_number": "Card number must be 16 digits"}
    assert submit.payloads == []
    assert wizard.step is WizardStep.PAYMENT


@pytest.mark.asyncio
async def test_successful_payment_completes_wizard() -> None:
    wizard = at_payment_step()
    submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_1736467200000"))

    result = await wizard.submit_payment(PAYMENT, submit)

    assert result.success
    assert wizard.completed
    assert wizard.confirmation is not None
    assert wizard.confirmation.booking_id == "bk_1736467200000"
    assert wizard.confirmation.total_price == Decimal("1050")

    payload = submit.payloads[0]
    assert payload["hotel_id"] == "hotel-paris-1"
    assert payload["total_price"] == Decimal("1050")
    assert payload["guest_info"]["first_name"] == "Jane"
    assert payload["payment_info"]["card_number"] == PAYMENT["card_number"]


@pytest.mark.asyncio
async def test_failed_submission_stays_on_payment() -> None:
    wizard = at_payment_step()
    submit = RecordingSubmitter(BookingResult(success=False, error="Payment processing failed."))

    result = await wizard.submit_payment(PAYMENT, submit)

    assert not result.success
    assert not wizard.completed
    assert wizard.step is WizardStep.PAYMENT

    retry_submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_2"))
    retry = await wizard.submit_payment(PAYMENT, retry_submit)
    assert retry.success
    assert wizard.completed


@pytest.mark.asyncio
async def test_concurrent_payments_submit_once() -> None:
    wizard = at_payment_step()
    submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_1"))

    results = await asyncio.gather(
        wizard.submit_payment(PAYMENT, submit),
        wizard.submit_payment(PAYMENT, submit),
        return_exceptions=True,
    )

    assert len(submit.payloads) == 1
    assert results[0] == BookingResult(success=True, booking_id="bk_1")
    assert isinstance(results[1], InvalidTransitionError)
    assert results[1].message == "Payment is already being processed"
    assert wizard.confirmation is not None
    assert wizard.confirmation.booking_id == "bk_1"


@pytest.mark.asyncio
async def test_back_is_refused_while_payment_is_in_flight() -> None:
    wizard = at_payment_step()
    submit = RecordingSubmitter(BookingResult(success=False, error="Payment processing failed."))

    pending = asyncio.ensure_future(wizard.submit_payment(PAYMENT, submit))
    await asyncio.sleep(0)

    with pytest.raises(InvalidTransitionError, match="already being processed"):
        wizard.back()
    await pending
    assert not wizard.submitting


@pytest.mark.asyncio
async def test_submitter_error_releases_the_payment_step() -> None:
    wizard = at_payment_step()

    async def explode(payload: Mapping[str, Any]) -> BookingResult:
        raise RuntimeError("backend down")

    with pytest.raises(RuntimeError):
        await wizard.submit_payment(PAYMENT, explode)

    assert not wizard.submitting
    assert wizard.step is WizardStep.PAYMENT


@pytest.mark.asyncio
async def test_payment_without_guest_details_is_refused() -> None:
    wizard = BookingWizard(
        id="w1",
        draft=make_resolved().draft,
        hotel_name="Grand Parisian Hotel",
        room_name="Standard Double Room",
        step=WizardStep.PAYMENT,
    )
    submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_1"))

    with pytest.raises(InvalidTransitionError, match="Guest details are missing"):
        await wizard.submit_payment(PAYMENT, submit)
    assert submit.payloads == []


@pytest.mark.asyncio
async def test_completed_wizard_refuses_further_events() -> None:
    wizard = at_payment_step()
    submit = RecordingSubmitter(BookingResult(success=True, booking_id="bk_1"))
    await wizard.submit_payment(PAYMENT, submit)

    with pytest.raises(InvalidTransitionError, match="already been submitted"):
        wizard.back()
    with pytest.raises(InvalidTransitionError, match="already been submitted"):
        await wizard.submit_payment(PAYMENT, submit)
    assert len(submit.payloads) == 1


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------
def test_store_returns_created_wizard() -> None:
    store = WizardStore()
    wizard = store.create(make_resolved())

    assert store.get(wizard.id) is wizard
    assert len(store) == 1


def test_store_unknown_wizard_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        WizardStore().get("missing")


def test_store_clear_drops_every_wizard() -> None:
    store = WizardStore()
    store.create(make_resolved())
    store.create(make_resolved())

    store.clear()

    assert len(store) == 0


def test_store_discard_removes_wizard() -> None:
    store = WizardStore()
    wizard = store.create(make_resolved())

    store.discard(wizard.id)
    store.discard(wizard.id)

    assert len(store) == 0
    with pytest.raises(NotFoundError):
        store.get(wizard.id)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_store_expires_abandoned_wizards() -> None:
    clock = FakeClock()
    store = WizardStore(ttl_seconds=60, clock=clock)
    old = store.create(make_resolved())

    clock.now = 61
    with pytest.raises(NotFoundError):
        store.get(old.id)

    stale = store.create(make_resolved())
    clock.now = 200
    fresh = store.create(make_resolved())

    assert len(store) == 1
    assert store.get(fresh.id) is fresh
    with pytest.raises(NotFoundError):
        store.get(stale.id)
