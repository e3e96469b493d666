"""Destination and hotel response schemas.

Built from ORM objects via ``from_attributes``. Nested capacity/beds/policies/
contact objects come from properties on the models.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel

from nomad.schemas.pagination import PaginatedResponse


class DestinationResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    country: str | None
    description: str | None
    display_name: str


class Capacity(BaseModel):
    adults: int
    children: int


class Beds(BaseModel):
    type: str
    count: int


class Policies(BaseModel):
    check_in: str
    check_out: str


class Contact(BaseModel):
    phone: str | None
    email: str | None


class BookingLink(BaseModel):
    """Navigation state for a room's "Book now" action."""

    hotel_id: str
    room_id: str
    price_per_night: Decimal
    destination_id: str
    check_in: date | None = None
    check_out: date | None = None
    guests: int | None = None
    rooms: int | None = None


class RoomResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    hotel_id: str
    name: str
    description: str
    capacity: Capacity
    beds: Beds
    amenities: list[str]
    price_per_night: Decimal
    images: list[str]
    availability: int | None


class RoomOffer(RoomResponse):
    booking: BookingLink


class ReviewResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    author: str
    rating: int
    title: str | None
    comment: str
    date: datetime


class HotelSummary(BaseModel):
    """Hotel card in search results."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    destination_id: str
    destination_name: str
    description: str
    address: str
    latitude: float
    longitude: float
    star_rating: int
    guest_rating: float | None
    amenities: list[str]
    images: list[str]
    cheapest_room_price: Decimal | None


class MapMarker(BaseModel):
    model_config = {"from_attributes": True}

    hotel_id: str
    name: str
    latitude: float
    longitude: float


class MapViewResponse(BaseModel):
    """Map panel state. ``available`` is false when no map key is configured."""

    model_config = {"from_attributes": True}

    available: bool
    message: str | None
    center_latitude: float
    center_longitude: float
    zoom: int
    markers: list[MapMarker]


class HotelDetailResponse(HotelSummary):
    policies: Policies | None
    contact: Contact | None
    rooms: list[RoomOffer]
    reviews: list[ReviewResponse]
    map: MapViewResponse


class StayResponse(BaseModel):
    destination_id: str
    destination_name: str
    check_in: date
    check_out: date
    guests: int
    rooms: int


HotelPage = PaginatedResponse[HotelSummary]


class HotelSearchResponse(BaseModel):
    stay: StayResponse
    results: HotelPage
    map: MapViewResponse
