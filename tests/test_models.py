from datetime import UTC, datetime
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from nomad.models import Destination, Hotel, HotelReview, Room
from tests.factories import make_destination, make_hotel, make_review, make_room


# ---------------------------------------------------------------------------
# 1. Seeded catalog
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "model, expected",
    [(Destination, 10), (Hotel, 6), (Room, 8), (HotelReview, 4)],
)
async def test_seed_loads_the_demo_catalog(
    seeded_db: AsyncSession, model: type, expected: int
) -> None:
    count = (await seeded_db.execute(select(func.count()).select_from(model))).scalar_one()
    assert count == expected


# ---------------------------------------------------------------------------
# 2. Associations
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_hotel_loads_rooms_and_newest_reviews_first(db: AsyncSession) -> None:
    db.add(make_destination())
    db.add(make_hotel(id="alfama"))
    db.add_all(
        [
            make_room(id="alfama-double", hotel_id="alfama"),
            make_room(id="alfama-single", hotel_id="alfama", capacity_adults=1),
            make_review(id="old", hotel_id="alfama", date=datetime(2023, 1, 1, tzinfo=UTC)),
            make_review(id="new", hotel_id="alfama", date=datetime(2024, 1, 1, tzinfo=UTC)),
        ]
    )
    await db.commit()
    db.expunge_all()

    stmt = (
        select(Hotel)
        .options(
            selectinload(Hotel.destination),
            selectinload(Hotel.rooms),
            selectinload(Hotel.reviews),
        )
        .where(Hotel.id == "alfama")
    )
    hotel = (await db.execute(stmt)).scalar_one()

    assert hotel.destination_name == "Lisbon"
    assert [room.id for room in hotel.rooms] == ["alfama-double", "alfama-single"]
    assert [review.id for review in hotel.reviews] == ["new", "old"]


# ---------------------------------------------------------------------------
# 3. Check constraints
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field, value",
    [("star_rating", 0), ("star_rating", 6), ("guest_rating", 10.5)],
    ids=["star_below_min", "star_above_max", "guest_rating_above_max"],
)
async def test_hotel_check_constraints(db: AsyncSession, field: str, value: object) -> None:
    db.add(make_destination())
    hotel = make_hotel(id="bad")
    setattr(hotel, field, value)
    db.add(hotel)

    with pytest.raises(IntegrityError):
        await db.flush()


@pytest.mark.asyncio
@pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1"), Decimal("100000")])
async def test_room_price_constraint(db: AsyncSession, price: Decimal) -> None:
    db.add(make_destination())
    db.add(make_hotel(id="alfama"))
    db.add(make_room(id="bad", hotel_id="alfama", price_per_night=price))

    with pytest.raises(IntegrityError):
        await db.flush()


@pytest.mark.asyncio
async def test_review_rating_constraint(db: AsyncSession) -> None:
    db.add(make_destination())
    db.add(make_hotel(id="alfama"))
    db.add(make_review(id="bad", hotel_id="alfama", rating=6))

    with pytest.raises(IntegrityError):
        await db.flush()


# ---------------------------------------------------------------------------
# 4. Derived attributes
# ---------------------------------------------------------------------------
def test_display_name_includes_country_when_known() -> None:
    assert make_destination().display_name == "Lisbon, Portugal"
    assert make_destination(country=None).display_name == "Lisbon"


def test_policies_need_both_times() -> None:
    assert make_hotel(id="a").policies == {"check_in": "15:00", "check_out": "11:00"}
    assert make_hotel(id="a", check_out_time=None).policies is None


def test_contact_is_absent_without_phone_or_email() -> None:
    assert make_hotel(id="a").contact is None


def test_room_capacity_and_beds() -> None:
    room = make_room(id="r", hotel_id="h")
    assert room.capacity == {"adults": 2, "children": 0}
    assert room.beds == {"type": "Queen", "count": 1}
