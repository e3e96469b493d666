"""Reusable annotated field types with user-facing error messages.

Each type raises a PydanticCustomError whose message is shown verbatim next to
the form field, so messages are written for end users, not developers.
"""

import re
from collections.abc import Callable, Sequence
from datetime import date
from typing import Annotated, Any

from pydantic import AfterValidator, EmailStr, ValidationError, ValidationInfo, WrapValidator
from pydantic_core import PydanticCustomError

MIN_GUESTS, MAX_GUESTS = 1, 10
MIN_ROOMS, MAX_ROOMS = 1, 5


def required(message: str) -> AfterValidator:
    """Reject empty strings with the given message."""

    def check(value: str) -> str:
        if not value:
            raise PydanticCustomError("required", message)
        return value

    return AfterValidator(check)


def min_length(length: int, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if len(value) < length:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def matches(pattern: str, message: str) -> AfterValidator:
    """Require the whole value to match an ASCII regex."""
    compiled = re.compile(pattern, re.ASCII)

    def check(value: str) -> str:
        if not compiled.fullmatch(value):
            raise PydanticCustomError("pattern_mismatch", message)
        return value

    return AfterValidator(check)


def bounded(low: int, high: int, too_low: str, too_high: str) -> AfterValidator:
    def check(value: int) -> int:
        if value < low:
            raise PydanticCustomError("too_low", too_low)
        if value > high:
            raise PydanticCustomError("too_high", too_high)
        return value

    return AfterValidator(check)


def _email_message(value: Any, handler: Callable[[Any], str]) -> str:
    try:
        return handler(value)
    except ValidationError:
        raise PydanticCustomError("invalid_email", "Invalid email address") from None


Email = Annotated[EmailStr, WrapValidator(_email_message)]

GuestCount = Annotated[
    int,
    bounded(MIN_GUESTS, MAX_GUESTS, "At least 1 guest is required.", "Max 10 guests."),
]
RoomCount = Annotated[
    int,
    bounded(MIN_ROOMS, MAX_ROOMS, "At least 1 room is required.", "Max 5 rooms."),
]


def check_out_after_check_in(value: date, info: ValidationInfo) -> date:
    """Field validator body for a ``check_out`` field declared after ``check_in``."""
    check_in = info.data.get("check_in")
    if check_in is not None and value <= check_in:
        raise PydanticCustomError("invalid_stay", "Check-out date must be after check-in date.")
    return value


def field_errors(errors: Sequence[Any], *, skip_prefix: bool = False) -> dict[str, str]:
    """Flatten pydantic error dicts into ``{"billing_address.city": "City is required"}``.

    ``skip_prefix`` drops the leading location element FastAPI adds to request
    errors ("body", "query", ...). Only the first message per field is kept.
    Input values are never copied, so card data cannot leak into the result.
    """
    flattened: dict[str, str] = {}
    for error in errors:
        loc = list(error.get("loc", ()))
        if skip_prefix and loc:
            loc = loc[1:]
        key = ".".join(str(part) for part in loc) or "__root__"
        flattened.setdefault(key, error.get("msg", "Invalid value"))
    return flattened
