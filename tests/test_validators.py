"""Form validators: guest details, payment details, search and auth forms."""

from datetime import date
from typing import Any

import pytest
from pydantic import ValidationError

from nomad.schemas.auth import LoginRequest, SignupRequest
from nomad.schemas.booking import GuestInfo, PaymentInfo
from nomad.schemas.fields import field_errors
from nomad.schemas.search import SearchForm
from tests.factories import GUEST, PAYMENT


def errors_of(model: type, data: dict[str, Any]) -> dict[str, str]:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(data)
    return field_errors(exc_info.value.errors())


# ---------------------------------------------------------------------------
# Guest details
# ---------------------------------------------------------------------------
def test_guest_info_accepts_valid_details() -> None:
    guest = GuestInfo.model_validate(GUEST)
    assert guest.first_name == "Jane"
    assert guest.special_requests is None


def test_guest_info_defaults_salutation() -> None:
    data = {key: value for key, value in GUEST.items() if key != "salutation"}
    assert GuestInfo.model_validate(data).salutation == "Mr"


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("first_name", "", "First name is required"),
        ("last_name", "", "Last name is required"),
        ("email", "not-an-email", "Invalid email address"),
        ("phone_number", "12345", "Phone number is required"),
    ],
)
def test_guest_info_field_messages(field: str, value: str, message: str) -> None:
    assert errors_of(GuestInfo, {**GUEST, field: value}) == {field: message}


def test_guest_info_rejects_unknown_salutation() -> None:
    assert "salutation" in errors_of(GuestInfo, {**GUEST, "salutation": "Sir"})


# ---------------------------------------------------------------------------
# Payment details
# ---------------------------------------------------------------------------
def test_payment_info_accepts_valid_card() -> None:
    payment = PaymentInfo.model_validate(PAYMENT)
    assert payment.billing_address.city == "Paris"


def test_payment_info_keeps_card_data_out_of_repr() -> None:
    text = repr(PaymentInfo.model_validate(PAYMENT))
    assert "4242424242424242" not in text
    assert "12/29" not in text
    assert "Jane Doe" in text


@pytest.mark.parametrize(
    "card_number, message",
    [
        ("424242424242424", "Card number must be 16 digits"),
        ("42424242424242424", "Card number must be 16 digits"),
        ("4242 4242 424242", "Card number must be digits"),
        ("4242abcd42424242", "Card number must be digits"),
    ],
)
def test_payment_info_card_number(card_number: str, message: str) -> None:
    assert errors_of(PaymentInfo, {**PAYMENT, "card_number": card_number}) == {
        "card_number": message
    }


@pytest.mark.parametrize("expiry_date", ["13/29", "1/29", "12-29", "00/30", "12/2029"])
def test_payment_info_rejects_bad_expiry(expiry_date: str) -> None:
    assert errors_of(PaymentInfo, {**PAYMENT, "expiry_date": expiry_date}) == {
        "expiry_date": "Expiry date must be MM/YY"
    }


@pytest.mark.parametrize("cvv", ["12", "12345", "12a"])
def test_payment_info_rejects_bad_cvv(cvv: str) -> None:
    assert errors_of(PaymentInfo, {**PAYMENT, "cvv": cvv}) == {"cvv": "CVV must be 3 or 4 digits"}


def test_payment_info_accepts_four_digit_cvv() -> None:
    assert PaymentInfo.model_validate({**PAYMENT, "cvv": "1234"}).cvv == "1234"


def test_payment_info_reports_nested_billing_fields() -> None:
    data = {**PAYMENT, "billing_address": {**PAYMENT["billing_address"], "city": ""}}
    assert errors_of(PaymentInfo, data) == {"billing_address.city": "City is required"}


# ---------------------------------------------------------------------------
# Search form
# ---------------------------------------------------------------------------
SEARCH: dict[str, Any] = {
    "destination_query": "Paris",
    "check_in": "2025-01-10",
    "check_out": "2025-01-13",
}


def test_search_form_defaults() -> None:
    form = SearchForm.model_validate(SEARCH)
    assert form.guests == 2
    assert form.rooms == 1
    assert form.check_in == date(2025, 1, 10)


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("destination_query", "", "Please enter a destination"),
        ("check_out", "2025-01-10", "Check-out date must be after check-in date."),
        ("guests", 0, "At least 1 guest is required."),
        ("guests", 11, "Max 10 guests."),
        ("rooms", 0, "At least 1 room is required."),
        ("rooms", 6, "Max 5 rooms."),
    ],
)
def test_search_form_field_messages(field: str, value: Any, message: str) -> None:
    assert errors_of(SearchForm, {**SEARCH, field: value}) == {field: message}


@pytest.mark.parametrize("guests", [1, 10])
def test_search_form_accepts_guest_bounds(guests: int) -> None:
    assert SearchForm.model_validate({**SEARCH, "guests": guests}).guests == guests


# ---------------------------------------------------------------------------
# Auth forms
# ---------------------------------------------------------------------------
def test_login_requires_six_character_password() -> None:
    errors = errors_of(LoginRequest, {"email": "user@example.com", "password": "12345"})
    assert errors == {"password": "Password must be at least 6 characters"}


def test_signup_requires_matching_passwords() -> None:
    data = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "password": "secret1",
        "confirm_password": "secret2",
    }
    assert errors_of(SignupRequest, data) == {"confirm_password": "Passwords don't match"}
