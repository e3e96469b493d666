"""Hotel search and detail endpoints."""

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Query

from nomad.config import settings
from nomad.dependencies import DB
from nomad.exceptions import NotFoundError, StepValidationError
from nomad.models import Hotel
from nomad.repositories.destination import get_destination
from nomad.schemas.catalog import (
    BookingLink,
    HotelDetailResponse,
    HotelPage,
    HotelSearchResponse,
    HotelSummary,
    MapViewResponse,
    ReviewResponse,
    RoomOffer,
    RoomResponse,
    StayResponse,
)
from nomad.schemas.fields import MAX_GUESTS, MAX_ROOMS, MIN_GUESTS, MIN_ROOMS
from nomad.services.hotel import (
    PRICE_RANGE_MAX,
    PRICE_RANGE_MIN,
    HotelFilters,
    HotelSort,
    SortKey,
    SortOrder,
    build_map_view,
    get_hotel_details,
    search_hotels,
)

router = APIRouter()


@router.get("/hotels/search", response_model=HotelSearchResponse, status_code=200)
async def search(
    db: DB,
    destination_id: str,
    check_in: date,
    check_out: date,
    guests: int = Query(..., ge=MIN_GUESTS, le=MAX_GUESTS),
    rooms: int = Query(..., ge=MIN_ROOMS, le=MAX_ROOMS),
    star_ratings: list[int] = Query([]),
    guest_rating_min: float = Query(0, ge=0, le=10),
    price_min: Decimal = Query(PRICE_RANGE_MIN, ge=0),
    price_max: Decimal = Query(PRICE_RANGE_MAX, ge=0),
    sort_by: SortKey = Query("price"),
    sort_order: SortOrder = Query("asc"),
    page: int = Query(1, ge=1),
) -> HotelSearchResponse:
    """Filter, sort and page a destination's hotels; the map covers every match."""
    if check_out <= check_in:
        raise StepValidationError(
            "Please check your dates.",
            {"check_out": "Check-out date must be after check-in date."},
        )
    destination = await get_destination(db, destination_id)
    if destination is None:
        raise NotFoundError("Destination", destination_id)

    filters = HotelFilters(
        star_ratings=frozenset(star_ratings),
        guest_rating_min=guest_rating_min,
        price_min=price_min,
        price_max=price_max,
    )
    result = await search_hotels(
        db, destination.id, filters, HotelSort(sort_by=sort_by, sort_order=sort_order), page
    )
    return HotelSearchResponse(
        stay=StayResponse(
            destination_id=destination.id,
            destination_name=destination.name,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            rooms=rooms,
        ),
        results=HotelPage.model_validate(result.page),
        map=MapViewResponse.model_validate(result.map),
    )


def _room_offers(hotel: Hotel, stay: dict[str, object]) -> list[RoomOffer]:
    """Rooms with the navigation state each "Book now" action carries."""
    offers = []
    for room in hotel.rooms:
        link = BookingLink(
            hotel_id=hotel.id,
            room_id=room.id,
            price_per_night=room.price_per_night,
            destination_id=hotel.destination_id,
            **stay,
        )
        offers.append(RoomOffer(**RoomResponse.model_validate(room).model_dump(), booking=link))
    return offers


@router.get("/hotels/{hotel_id}", response_model=HotelDetailResponse, status_code=200)
async def hotel_detail(
    db: DB,
    hotel_id: str,
    check_in: date | None = None,
    check_out: date | None = None,
    guests: int | None = Query(None, ge=MIN_GUESTS, le=MAX_GUESTS),
    rooms: int | None = Query(None, ge=MIN_ROOMS, le=MAX_ROOMS),
) -> HotelDetailResponse:
    """Hotel detail with rooms, reviews and a single-marker map."""
    hotel = await get_hotel_details(db, hotel_id)
    stay = {"check_in": check_in, "check_out": check_out, "guests": guests, "rooms": rooms}
    return HotelDetailResponse(
        **HotelSummary.model_validate(hotel).model_dump(),
        policies=hotel.policies,
        contact=hotel.contact,
        rooms=_room_offers(hotel, stay),
        reviews=[ReviewResponse.model_validate(review) for review in hotel.reviews],
        map=MapViewResponse.model_validate(build_map_view([hotel], settings.maps_api_key)),
    )
