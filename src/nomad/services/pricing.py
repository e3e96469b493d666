"""Stay pricing: nights between two dates times the nightly rate times rooms.

No taxes or fees are modelled.
"""

from datetime import date
from decimal import Decimal


def nights_between(check_in: date, check_out: date) -> int:
    """Whole days from check-in to check-out. Zero or negative means an invalid stay."""
    return (check_out - check_in).days


def total_price(nights: int, price_per_night: Decimal, rooms: int) -> Decimal:
    return nights * price_per_night * rooms
