"""Destination autocomplete and home-page search resolution."""

from dataclasses import dataclass
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from nomad.exceptions import MissingInformationError
from nomad.models import Destination
from nomad.repositories.destination import get_destination, search_destinations

MIN_QUERY_LENGTH = 2
NO_DESTINATION_SELECTED = "Please select a destination from the suggestions."


async def suggest_destinations(db: AsyncSession, query: str) -> list[Destination]:
    """Autocomplete suggestions. Name matches rank ahead of country-only matches."""
    query = query.strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []
    destinations = await search_destinations(db, query)
    needle = query.lower()
    return sorted(destinations, key=lambda d: needle not in d.name.lower())


@dataclass
class SearchNavigation:
    destination_id: str
    destination_name: str
    check_in: date
    check_out: date
    guests: int
    rooms: int
    auto_selected: bool


async def resolve_search(
    db: AsyncSession,
    *,
    destination_query: str,
    destination_id: str | None,
    check_in: date,
    check_out: date,
    guests: int,
    rooms: int,
) -> SearchNavigation:
    """Pin the search to a destination.

    A typed query with no selected id falls back to the first suggestion and
    flags it as auto-selected so the client can ask the user to confirm.
    """
    auto_selected = False
    if destination_id:
        destination = await get_destination(db, destination_id)
    else:
        suggestions = await suggest_destinations(db, destination_query)
        destination = suggestions[0] if suggestions else None
        auto_selected = destination is not None

    if destination is None:
        raise MissingInformationError(NO_DESTINATION_SELECTED)

    return SearchNavigation(
        destination_id=destination.id,
        destination_name=destination.name,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        rooms=rooms,
        auto_selected=auto_selected,
    )
