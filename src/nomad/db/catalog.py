"""Static demo catalog.

The whole catalog is mock data: ten destinations, six hotels with their rooms,
and a handful of reviews. seed_catalog() loads it into a fresh session at
startup; nothing here is ever written back.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from nomad.db.session import async_session, create_schema
from nomad.logging import get_logger
from nomad.models import Destination, Hotel, HotelReview, Room

logger = get_logger(__name__)


def _placeholder(text: str, size: str = "600x400") -> str:
    return f"https://placehold.co/{size}.png?text={text.replace(' ', '+')}"


DESTINATIONS: list[dict[str, Any]] = [
    {"id": "paris", "name": "Paris", "country": "France", "description": "The city of lights and romance."},
    {"id": "tokyo", "name": "Tokyo", "country": "Japan", "description": "A bustling metropolis with a rich culture."},
    {"id": "new-york", "name": "New York", "country": "USA", "description": "The city that never sleeps."},
    {"id": "london", "name": "London", "country": "UK", "description": "Historic city with iconic landmarks."},
    {"id": "rome", "name": "Rome", "country": "Italy", "description": "Ancient ruins and delicious cuisine."},
    {"id": "barcelona", "name": "Barcelona", "country": "Spain", "description": "Art, architecture, and beaches."},
    {"id": "singapore", "name": "Singapore", "country": "Singapore", "description": "A vibrant garden city."},
    {"id": "bali", "name": "Bali", "country": "Indonesia", "description": "Tropical paradise with stunning beaches."},
    {"id": "sydney", "name": "Sydney", "country": "Australia", "description": "Famous for its opera house and harbor."},
    {"id": "amsterdam", "name": "Amsterdam", "country": "Netherlands", "description": "Canals, bicycles, and art."},
]  # fmt: skip

HOTELS: list[dict[str, Any]] = [
    {
        "id": "hotel-paris-1",
        "name": "Grand Parisian Hotel",
        "destination_id": "paris",
        "description": "A luxurious hotel in the heart of Paris, offering stunning views of the Eiffel Tower.",
        "address": "1 Champs-Élysées, 75008 Paris, France",
        "latitude": 48.8699,
        "longitude": 2.3073,
        "star_rating": 5,
        "guest_rating": 9.2,
        "amenities": ["Free WiFi", "Swimming Pool", "Restaurant", "Gym", "Spa"],
        "images": [
            _placeholder("Grand Parisian Hotel Exterior"),
            _placeholder("Grand Parisian Hotel Lobby"),
            _placeholder("Grand Parisian Hotel Room"),
        ],
        "cheapest_room_price": Decimal("350"),
        "check_in_time": "15:00",
        "check_out_time": "12:00",
        "contact_phone": "+33 1 23 45 67 89",
        "contact_email": "info@grandparisian.fr",
    },
    {
        "id": "hotel-paris-2",
        "name": "Chic Montmartre Boutique",
        "destination_id": "paris",
        "description": "A charming boutique hotel located in the artistic Montmartre district.",
        "address": "10 Rue Lepic, 75018 Paris, France",
        "latitude": 48.8867,
        "longitude": 2.3394,
        "star_rating": 4,
        "guest_rating": 8.8,
        "amenities": ["Free WiFi", "Bar", "Pet-friendly", "Air Conditioning"],
        "images": [
            _placeholder("Chic Montmartre Exterior"),
            _placeholder("Chic Montmartre Room"),
        ],
        "cheapest_room_price": Decimal("180"),
        "check_in_time": "14:00",
        "check_out_time": "11:00",
        "contact_phone": "+33 1 98 76 54 32",
        "contact_email": "contact@chicmontmartre.fr",
    },
    {
        "id": "hotel-tokyo-1",
        "name": "Tokyo Imperial Palace View",
        "destination_id": "tokyo",
        "description": "Elegant hotel with breathtaking views of the Imperial Palace gardens.",
        "address": "1-1 Chiyoda, Chiyoda City, Tokyo 100-0001, Japan",
        "latitude": 35.6852,
        "longitude": 139.7528,
        "star_rating": 5,
        "guest_rating": 9.5,
        "amenities": ["Free WiFi", "Fine Dining", "Indoor Pool", "Fitness Center", "Concierge"],
        "images": [
            _placeholder("Tokyo Imperial Hotel"),
            _placeholder("Tokyo Imperial View"),
        ],
        "cheapest_room_price": Decimal("500"),
        "check_in_time": "15:00",
        "check_out_time": "12:00",
        "contact_phone": "+81 3-1234-5678",
        "contact_email": "reservations@tokyoimperial.jp",
    },
    {
        "id": "hotel-tokyo-2",
        "name": "Shinjuku Modern Stay",
        "destination_id": "tokyo",
        "description": (
            "Sleek and contemporary hotel in the vibrant Shinjuku area, "
            "close to transport and entertainment."
        ),
        "address": "2-2-1 Nishi-Shinjuku, Shinjuku City, Tokyo 160-0023, Japan",
        "latitude": 35.6895,
        "longitude": 139.6917,
        "star_rating": 4,
        "guest_rating": 8.5,
        "amenities": ["Free WiFi", "Restaurant", "Bar", "Laundry Service"],
        "images": [
            _placeholder("Shinjuku Modern Exterior"),
            _placeholder("Shinjuku Modern Room"),
        ],
        "cheapest_room_price": Decimal("220"),
        "check_in_time": "15:00",
        "check_out_time": "11:00",
        "contact_phone": "+81 3-8765-4321",
        "contact_email": "stay@shinjukumodern.jp",
    },
    {
        "id": "hotel-singapore-1",
        "name": "Marina Bay Sands",
        "destination_id": "singapore",
        "description": "Iconic hotel with a stunning rooftop infinity pool and panoramic city views.",
        "address": "10 Bayfront Ave, Singapore 018956",
        "latitude": 1.2839,
        "longitude": 103.8606,
        "star_rating": 5,
        "guest_rating": 9.1,
        "amenities": ["Rooftop Pool", "Casino", "Multiple Restaurants", "Shopping Mall", "Museum"],
        "images": [
            _placeholder("Marina Bay Sands Exterior"),
            _placeholder("Marina Bay Sands Pool"),
        ],
        "cheapest_room_price": Decimal("600"),
        "check_in_time": "15:00",
        "check_out_time": "11:00",
        "contact_phone": "+65 6688 8888",
        "contact_email": "room.reservations@marinabaysands.com",
    },
    {
        "id": "hotel-singapore-2",
        "name": "The Fullerton Hotel Singapore",
        "destination_id": "singapore",
        "description": (
            "A grand heritage hotel located in a beautifully restored neoclassical "
            "building by the Singapore River."
        ),
        "address": "1 Fullerton Square, Singapore 049178",
        "latitude": 1.2862,
        "longitude": 103.8538,
        "star_rating": 5,
        "guest_rating": 9.3,
        "amenities": ["Free WiFi", "Outdoor Pool", "Heritage Tours", "Spa", "Fine Dining"],
        "images": [
            _placeholder("Fullerton Hotel Exterior"),
            _placeholder("Fullerton Hotel Lobby"),
        ],
        "cheapest_room_price": Decimal("450"),
        "check_in_time": "15:00",
        "check_out_time": "12:00",
        "contact_phone": "+65 6733 8388",
        "contact_email": "tfs.reservations@fullertonhotels.com",
    },
]

ROOMS: list[dict[str, Any]] = [
    {
        "id": "room-paris-1-std",
        "hotel_id": "hotel-paris-1",
        "name": "Standard Double Room",
        "description": "A comfortable room with a queen-sized bed, perfect for couples.",
        "capacity_adults": 2,
        "capacity_children": 0,
        "bed_type": "Queen",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "TV", "Mini-fridge", "City View"],
        "price_per_night": Decimal("350"),
        "images": [
            _placeholder("Standard Double Room", "400x300"),
            _placeholder("Standard Room View", "400x300"),
        ],
        "availability": 5,
    },
    {
        "id": "room-paris-1-deluxe",
        "hotel_id": "hotel-paris-1",
        "name": "Deluxe Suite with Eiffel Tower View",
        "description": (
            "Spacious suite with a separate living area and a balcony overlooking the Eiffel Tower."
        ),
        "capacity_adults": 2,
        "capacity_children": 1,
        "bed_type": "King",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "Jacuzzi Tub", "TV", "Nespresso Machine", "Balcony"],
        "price_per_night": Decimal("700"),
        "images": [
            _placeholder("Deluxe Suite", "400x300"),
            _placeholder("Eiffel Tower View", "400x300"),
        ],
        "availability": 2,
    },
    {
        "id": "room-paris-2-cozy",
        "hotel_id": "hotel-paris-2",
        "name": "Cozy Single Room",
        "description": "A small, charming room ideal for solo travelers.",
        "capacity_adults": 1,
        "capacity_children": 0,
        "bed_type": "Single",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "TV", "Desk"],
        "price_per_night": Decimal("180"),
        "images": [_placeholder("Cozy Single Room", "400x300")],
        "availability": 3,
    },
    {
        "id": "room-paris-2-artistic",
        "hotel_id": "hotel-paris-2",
        "name": "Artistic Double Room",
        "description": "Uniquely decorated double room with local art.",
        "capacity_adults": 2,
        "capacity_children": 0,
        "bed_type": "Double",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "TV", "Air Conditioning", "Unique Decor"],
        "price_per_night": Decimal("250"),
        "images": [_placeholder("Artistic Double Room", "400x300")],
        "availability": 4,
    },
    {
        "id": "room-tokyo-1-garden",
        "hotel_id": "hotel-tokyo-1",
        "name": "Garden View Twin Room",
        "description": "Elegant twin room with serene views of the Imperial Palace gardens.",
        "capacity_adults": 2,
        "capacity_children": 0,
        "bed_type": "Twin",
        "bed_count": 2,
        "amenities": ["Ensuite Bathroom", "TV", "Seating Area", "Minibar"],
        "price_per_night": Decimal("500"),
        "images": [
            _placeholder("Garden View Twin", "400x300"),
            _placeholder("Imperial Garden View", "400x300"),
        ],
        "availability": 6,
    },
    {
        "id": "room-tokyo-2-city",
        "hotel_id": "hotel-tokyo-2",
        "name": "City View Queen Room",
        "description": "Modern queen room with expansive views of the Shinjuku cityscape.",
        "capacity_adults": 2,
        "capacity_children": 0,
        "bed_type": "Queen",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "TV", "Work Desk", "High-speed Internet"],
        "price_per_night": Decimal("220"),
        "images": [
            _placeholder("City View Queen", "400x300"),
            _placeholder("Shinjuku Cityscape", "400x300"),
        ],
        "availability": 8,
    },
    {
        "id": "room-singapore-1-deluxe",
        "hotel_id": "hotel-singapore-1",
        "name": "Deluxe Room City View",
        "description": "Luxurious room offering stunning views of the Singapore skyline.",
        "capacity_adults": 2,
        "capacity_children": 1,
        "bed_type": "King",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "Large TV", "Minibar", "Floor-to-ceiling windows"],
        "price_per_night": Decimal("600"),
        "images": [
            _placeholder("MBS Deluxe Room", "400x300"),
            _placeholder("MBS City View", "400x300"),
        ],
        "availability": 10,
    },
    {
        "id": "room-singapore-2-heritage",
        "hotel_id": "hotel-singapore-2",
        "name": "Heritage Courtyard Room",
        "description": "Elegantly appointed room overlooking the hotel's sunlit atrium courtyard.",
        "capacity_adults": 2,
        "capacity_children": 0,
        "bed_type": "Queen",
        "bed_count": 1,
        "amenities": ["Ensuite Bathroom", "TV", "Heritage decor", "Complimentary snacks"],
        "price_per_night": Decimal("450"),
        "images": [_placeholder("Fullerton Courtyard Room", "400x300")],
        "availability": 7,
    },
]

REVIEWS: list[dict[str, Any]] = [
    {
        "id": "review-paris-1-1",
        "hotel_id": "hotel-paris-1",
        "author": "John Doe",
        "rating": 5,
        "title": "Absolutely magnificent!",
        "comment": "The views were breathtaking and the service was top-notch. Worth every penny.",
        "date": "2023-10-15T10:00:00+00:00",
    },
    {
        "id": "review-paris-1-2",
        "hotel_id": "hotel-paris-1",
        "author": "Jane Smith",
        "rating": 4,
        "title": "Wonderful stay",
        "comment": (
            "Loved the location and the amenities. The pool was fantastic. "
            "Room was a bit smaller than expected for the price."
        ),
        "date": "2023-09-20T14:30:00+00:00",
    },
    {
        "id": "review-paris-2-1",
        "hotel_id": "hotel-paris-2",
        "author": "Alice Brown",
        "rating": 5,
        "title": "Charming and perfectly located",
        "comment": (
            "Fell in love with this hotel and the Montmartre area. "
            "Staff were incredibly friendly."
        ),
        "date": "2023-11-01T09:15:00+00:00",
    },
    {
        "id": "review-tokyo-1-1",
        "hotel_id": "hotel-tokyo-1",
        "author": "Ken Tanaka",
        "rating": 5,
        "title": "Unforgettable Experience",
        "comment": "The service and views are unparalleled. Truly a 5-star experience in Tokyo.",
        "date": "2023-08-05T12:00:00+00:00",
    },
]


async def seed_catalog(db: AsyncSession) -> None:
    """Insert the static catalog. Expects empty tables."""
    db.add_all(Destination(**row) for row in DESTINATIONS)
    db.add_all(Hotel(**row) for row in HOTELS)
    db.add_all(Room(**row) for row in ROOMS)
    db.add_all(
        HotelReview(**{**row, "date": datetime.fromisoformat(row["date"])}) for row in REVIEWS
    )
    await db.flush()


async def init_catalog() -> None:
    """Build the catalog tables on the application engine and load the static data."""
    await create_schema()
    async with async_session() as session:
        await seed_catalog(session)
        await session.commit()
    logger.info("catalog_seeded", destinations=len(DESTINATIONS), hotels=len(HOTELS))
