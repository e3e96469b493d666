"""Reusable seed data fixtures for integration tests."""

from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from nomad.db.catalog import seed_catalog
from tests.factories import make_destination, make_hotel


@pytest_asyncio.fixture
async def seeded_db(db: AsyncSession) -> AsyncSession:
    """The demo catalog: 10 destinations, 6 hotels, 8 rooms, 4 reviews."""
    await seed_catalog(db)
    await db.commit()
    # Requests must load relationships themselves, not reuse seeded instances
    db.expunge_all()
    return db


@pytest_asyncio.fixture
async def crowded_db(db: AsyncSession) -> AsyncSession:
    """One destination with 12 hotels, enough for two result pages.

    Hotel ``lisbon-NN`` costs 100 + 10 * NN per night; even numbers are 5 stars.
    """
    db.add(make_destination())
    db.add_all(
        make_hotel(
            id=f"lisbon-{n:02d}",
            name=f"Lisbon Hotel {n:02d}",
            star_rating=5 if n % 2 == 0 else 3,
            cheapest_room_price=Decimal(100 + 10 * n),
        )
        for n in range(1, 13)
    )
    await db.commit()
    db.expunge_all()
    return db
