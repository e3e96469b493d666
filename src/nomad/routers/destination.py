"""Destination autocomplete and home-page search endpoints."""

from fastapi import APIRouter, Query

from nomad.dependencies import DB
from nomad.schemas.catalog import DestinationResponse
from nomad.schemas.search import SearchForm, SearchNavigation
from nomad.services.destination import resolve_search, suggest_destinations

router = APIRouter()


@router.get("/destinations", response_model=list[DestinationResponse])
async def list_destinations(
    db: DB, q: str = Query("", max_length=100)
) -> list[DestinationResponse]:
    """Autocomplete suggestions; queries shorter than two characters return nothing."""
    destinations = await suggest_destinations(db, q)
    return [DestinationResponse.model_validate(d) for d in destinations]


@router.post("/search", response_model=SearchNavigation)
async def submit_search(db: DB, form: SearchForm) -> SearchNavigation:
    """Validate the search form and return the hotel-search navigation state."""
    navigation = await resolve_search(
        db,
        destination_query=form.destination_query,
        destination_id=form.destination_id,
        check_in=form.check_in,
        check_out=form.check_out,
        guests=form.guests,
        rooms=form.rooms,
    )
    return SearchNavigation.model_validate(navigation)
