"""Booking wizard: Details -> Review -> Payment.

The step is an explicit enum and every move goes through transition(), which
rejects anything outside the linear flow. Form data arrives as raw mappings and
is validated here, so a failed step leaves the wizard exactly where it was.

A successful payment submission completes the wizard; it then only carries the
confirmation and refuses further events.
"""

import time
import uuid
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from nomad.exceptions import InvalidTransitionError, NotFoundError, StepValidationError
from nomad.schemas.booking import GuestInfo, PaymentInfo
from nomad.schemas.fields import field_errors
from nomad.services.booking import (
    BookingConfirmation,
    BookingDraft,
    BookingResult,
    ResolvedBooking,
)

BookingSubmitter = Callable[[Mapping[str, Any]], Awaitable[BookingResult]]


class WizardStep(IntEnum):
    DETAILS = 0
    REVIEW = 1
    PAYMENT = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class WizardEvent(StrEnum):
    NEXT = "next"
    BACK = "back"


_TRANSITIONS: dict[tuple[WizardStep, WizardEvent], WizardStep] = {
    (WizardStep.DETAILS, WizardEvent.NEXT): WizardStep.REVIEW,
    (WizardStep.REVIEW, WizardEvent.NEXT): WizardStep.PAYMENT,
    (WizardStep.REVIEW, WizardEvent.BACK): WizardStep.DETAILS,
    (WizardStep.PAYMENT, WizardEvent.BACK): WizardStep.REVIEW,
}


def transition(step: WizardStep, event: WizardEvent) -> WizardStep:
    """Return the step reached from ``step`` on ``event``, or raise InvalidTransitionError."""
    try:
        return _TRANSITIONS[(step, event)]
    except KeyError:
        raise InvalidTransitionError(f"Cannot go {event} from the {step.label} step") from None


def _validate[M: BaseModel](
    model: type[M], data: Mapping[str, Any], message: str
) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise StepValidationError(
            message, field_errors(exc.errors(include_input=False))
        ) from None


@dataclass
class BookingWizard:
    id: str
    draft: BookingDraft
    hotel_name: str
    room_name: str
    step: WizardStep = WizardStep.DETAILS
    guest_info: GuestInfo | None = None
    confirmation: BookingConfirmation | None = None
    submitting: bool = False
    created_at: float = 0.0

    @property
    def completed(self) -> bool:
        return self.confirmation is not None

    def _check_open(self) -> None:
        if self.completed:
            raise InvalidTransitionError("Booking has already been submitted")
        if self.submitting:
            raise InvalidTransitionError("Payment is already being processed")

    def _require(self, step: WizardStep, action: str) -> None:
        self._check_open()
        if self.step is not step:
            raise InvalidTransitionError(f"Cannot {action} from the {self.step.label} step")

    def submit_details(self, data: Mapping[str, Any]) -> None:
        """Validate guest details and move on to the review step."""
        self._require(WizardStep.DETAILS, "submit guest details")
        self.guest_info = _validate(GuestInfo, data, "Please check your details.")
        self.step = transition(self.step, WizardEvent.NEXT)

    def confirm_review(self) -> None:
        self._require(WizardStep.REVIEW, "confirm the review")
        self.step = transition(self.step, WizardEvent.NEXT)

    def back(self) -> None:
        self._check_open()
        self.step = transition(self.step, WizardEvent.BACK)

    async def submit_payment(
        self, data: Mapping[str, Any], submit: BookingSubmitter
    ) -> BookingResult:
        """Validate payment details, then hand the full payload to ``submit``.

        Invalid payment data never reaches ``submit``. While a submission is in
        flight every other event is refused, so a booking is submitted at most
        once. A failed submission keeps the wizard on the payment step so the
        guest can retry.
        """
        self._require(WizardStep.PAYMENT, "submit payment")
        payment = _validate(PaymentInfo, data, "Please check your payment details.")
        if self.guest_info is None:
            raise InvalidTransitionError("Guest details are missing")

        draft = self.draft
        payload = {
            "destination_id": draft.destination_id,
            "hotel_id": draft.hotel_id,
            "room_id": draft.room_id,
            "check_in": draft.check_in,
            "check_out": draft.check_out,
            "guests": draft.guests,
            "rooms": draft.rooms,
            "total_price": draft.total_price,
            "hotel_name": self.hotel_name,
            "room_name": self.room_name,
            "guest_info": self.guest_info.model_dump(),
            "payment_info": payment.model_dump(),
        }

        self.submitting = True
        try:
            result = await submit(payload)
        finally:
            self.submitting = False

        if result.success and result.booking_id is not None:
            self.confirmation = BookingConfirmation(
                booking_id=result.booking_id,
                hotel_name=self.hotel_name,
                room_name=self.room_name,
                check_in=draft.check_in,
                check_out=draft.check_out,
                guests=draft.guests,
                total_price=draft.total_price,
            )
        return result


@dataclass
class WizardStore:
    """In-process registry of open booking wizards, created at application startup.

    Wizards older than ``ttl_seconds`` are dropped as abandoned; completed
    wizards are discarded by the caller once the confirmation has been returned.
    """

    ttl_seconds: float = 1800.0
    clock: Callable[[], float] = time.monotonic
    _wizards: dict[str, BookingWizard] = field(default_factory=dict)

    def _expired(self, wizard: BookingWizard, now: float) -> bool:
        return now - wizard.created_at > self.ttl_seconds

    def _prune(self) -> None:
        now = self.clock()
        for wizard_id in [w.id for w in self._wizards.values() if self._expired(w, now)]:
            del self._wizards[wizard_id]

    def create(self, resolved: ResolvedBooking) -> BookingWizard:
        self._prune()
        wizard = BookingWizard(
            id=uuid.uuid4().hex,
            draft=resolved.draft,
            hotel_name=resolved.hotel_name,
            room_name=resolved.room_name,
            created_at=self.clock(),
        )
        self._wizards[wizard.id] = wizard
        return wizard

    def get(self, wizard_id: str) -> BookingWizard:
        wizard = self._wizards.get(wizard_id)
        if wizard is None or self._expired(wizard, self.clock()):
            self._wizards.pop(wizard_id, None)
            raise NotFoundError("Booking wizard", wizard_id)
        return wizard

    def discard(self, wizard_id: str) -> None:
        self._wizards.pop(wizard_id, None)

    def clear(self) -> None:
        self._wizards.clear()

    def __len__(self) -> int:
        return len(self._wizards)
