"""Hotel and room data-access layer.

Pure query functions, no business logic, no HTTP concerns.
Each function takes a session and returns models or None.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from nomad.models import Hotel, Room


async def list_hotels_by_destination(db: AsyncSession, destination_id: str) -> list[Hotel]:
    """Return every hotel in a destination, in catalog order."""
    stmt = (
        select(Hotel)
        .options(selectinload(Hotel.destination))
        .where(Hotel.destination_id == destination_id)
        .order_by(Hotel.id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_hotel(db: AsyncSession, hotel_id: str) -> Hotel | None:
    """Return one hotel with its destination, rooms and reviews loaded."""
    stmt = (
        select(Hotel)
        .options(
            selectinload(Hotel.destination),
            selectinload(Hotel.rooms),
            selectinload(Hotel.reviews),
        )
        .where(Hotel.id == hotel_id)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_room(db: AsyncSession, hotel_id: str, room_id: str) -> Room | None:
    """Return a room only if it belongs to the given hotel."""
    stmt = select(Room).where(Room.id == room_id, Room.hotel_id == hotel_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()
