"""Destination data-access layer."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from nomad.models import Destination


async def search_destinations(db: AsyncSession, query: str) -> list[Destination]:
    """Return destinations whose name or country contains the query, case-insensitively."""
    stmt = (
        select(Destination)
        .where(
            or_(
                Destination.name.icontains(query, autoescape=True),
                Destination.country.icontains(query, autoescape=True),
            )
        )
        .order_by(Destination.name)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_destination(db: AsyncSession, destination_id: str) -> Destination | None:
    return await db.get(Destination, destination_id)
