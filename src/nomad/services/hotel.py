"""Hotel search and detail logic.

Search loads a destination's hotels, then filters, sorts and paginates the list
in memory. Filters are independent predicates ANDed together; sorting is
stable, so ties keep catalog order.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

from sqlalchemy.ext.asyncio import AsyncSession

from nomad.config import settings
from nomad.exceptions import NotFoundError
from nomad.models import Hotel
from nomad.repositories.hotel import get_hotel, list_hotels_by_destination
from nomad.schemas.pagination import Paginated

SortKey = Literal["price", "star_rating", "guest_rating"]
SortOrder = Literal["asc", "desc"]

PRICE_RANGE_MIN = Decimal(0)
PRICE_RANGE_MAX = Decimal(1000)  # per night

MAP_UNAVAILABLE = "Map View Unavailable"


@dataclass(frozen=True)
class HotelFilters:
    star_ratings: frozenset[int] = frozenset()  # empty means any rating
    guest_rating_min: float = 0
    price_min: Decimal = PRICE_RANGE_MIN
    price_max: Decimal = PRICE_RANGE_MAX


@dataclass(frozen=True)
class HotelSort:
    sort_by: SortKey = "price"
    sort_order: SortOrder = "asc"


def filter_hotels(hotels: Sequence[Hotel], filters: HotelFilters) -> list[Hotel]:
    """Keep hotels matching every filter. A missing price passes an open upper bound only."""

    def matches(hotel: Hotel) -> bool:
        if filters.star_ratings and hotel.star_rating not in filters.star_ratings:
            return False
        if (hotel.guest_rating or 0) < filters.guest_rating_min:
            return False
        price = hotel.cheapest_room_price
        low = price if price is not None else Decimal(0)
        high = price if price is not None else Decimal("Infinity")
        return low >= filters.price_min and high <= filters.price_max

    return [hotel for hotel in hotels if matches(hotel)]


def _sort_value(hotel: Hotel, sort_by: SortKey) -> Decimal | float | int:
    match sort_by:
        case "price":
            return hotel.cheapest_room_price or 0
        case "star_rating":
            return hotel.star_rating
        case "guest_rating":
            return hotel.guest_rating or 0


def sort_hotels(hotels: Sequence[Hotel], sort: HotelSort) -> list[Hotel]:
    return sorted(
        hotels,
        key=lambda hotel: _sort_value(hotel, sort.sort_by),
        reverse=sort.sort_order == "desc",
    )


def paginate[T](items: Sequence[T], page: int, page_size: int) -> Paginated[T]:
    """Slice one 1-based page. Pages past the end are empty."""
    start = (page - 1) * page_size
    return Paginated(
        items=list(items[start : start + page_size]),
        total=len(items),
        page=page,
        page_size=page_size,
    )


@dataclass
class MapMarker:
    hotel_id: str
    name: str
    latitude: float
    longitude: float


@dataclass
class MapView:
    available: bool
    center_latitude: float = 20.0
    center_longitude: float = 0.0
    zoom: int = 2
    markers: list[MapMarker] = field(default_factory=list)
    message: str | None = None


def build_map_view(hotels: Sequence[Hotel], api_key: str | None) -> MapView:
    """Center on the average hotel position; world view when there is nothing to show.

    Without a map key the view degrades to a placeholder.
    """
    if not api_key:
        return MapView(available=False, message=MAP_UNAVAILABLE)

    markers = [
        MapMarker(hotel.id, hotel.name, hotel.latitude, hotel.longitude)
        for hotel in hotels
        if hotel.latitude is not None and hotel.longitude is not None
    ]
    if not markers:
        return MapView(available=True)

    return MapView(
        available=True,
        center_latitude=sum(m.latitude for m in markers) / len(markers),
        center_longitude=sum(m.longitude for m in markers) / len(markers),
        zoom=12 if len(markers) == 1 else 6,
        markers=markers,
    )


@dataclass
class HotelSearchResult:
    page: Paginated[Hotel]
    map: MapView


async def search_hotels(
    db: AsyncSession,
    destination_id: str,
    filters: HotelFilters,
    sort: HotelSort,
    page: int = 1,
) -> HotelSearchResult:
    """Mock catalog fetch for a destination plus in-memory filter/sort/paginate.

    The map shows every hotel that survived the filters, not just the current page.
    """
    await asyncio.sleep(settings.catalog_delay_seconds)
    hotels = await list_hotels_by_destination(db, destination_id)
    matching = sort_hotels(filter_hotels(hotels, filters), sort)
    return HotelSearchResult(
        page=paginate(matching, page, settings.page_size),
        map=build_map_view(matching, settings.maps_api_key),
    )


async def get_hotel_details(db: AsyncSession, hotel_id: str) -> Hotel:
    await asyncio.sleep(settings.hotel_detail_delay_seconds)
    hotel = await get_hotel(db, hotel_id)
    if hotel is None:
        raise NotFoundError("Hotel", hotel_id)
    return hotel
