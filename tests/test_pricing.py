from datetime import date, timedelta
from decimal import Decimal

import pytest

from nomad.services.pricing import nights_between, total_price


def test_nights_between_counts_whole_days() -> None:
    assert nights_between(date(2025, 1, 10), date(2025, 1, 13)) == 3


def test_nights_between_same_day_is_zero() -> None:
    assert nights_between(date(2025, 1, 10), date(2025, 1, 10)) == 0


def test_nights_between_crosses_month_and_leap_day() -> None:
    assert nights_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


@pytest.mark.parametrize("nights", [1, 3, 14])
@pytest.mark.parametrize("rooms", [1, 2, 5])
def test_total_price_is_exact(nights: int, rooms: int) -> None:
    check_in = date(2025, 6, 1)
    check_out = check_in + timedelta(days=nights)
    price = Decimal("149.99")

    total = total_price(nights_between(check_in, check_out), price, rooms)

    assert total == price * nights * rooms
    assert isinstance(total, Decimal)


def test_total_price_for_the_paris_standard_room() -> None:
    assert total_price(3, Decimal("350"), 1) == Decimal("1050")
