"""SQLAlchemy models for the hotel catalog.

Define all ORM models here. They must inherit from Base so that
create_all() at startup can build their tables.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nomad.db.session import Base


class Destination(Base):
    __tablename__ = "destinations"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    country: Mapped[str | None] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(String(300))

    hotels: Mapped[list["Hotel"]] = relationship(back_populates="destination")

    @property
    def display_name(self) -> str:
        """Name as shown in the search box, e.g. ``Paris, France``."""
        return f"{self.name}, {self.country}" if self.country else self.name


class Hotel(Base):
    __tablename__ = "hotels"
    __table_args__ = (
        CheckConstraint("star_rating >= 1 AND star_rating <= 5", name="star_rating_range"),
        CheckConstraint(
            "guest_rating IS NULL OR (guest_rating >= 0 AND guest_rating <= 10)",
            name="guest_rating_range",
        ),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    destination_id: Mapped[str] = mapped_column(ForeignKey("destinations.id"), index=True)
    description: Mapped[str] = mapped_column(String(500), default="")
    address: Mapped[str] = mapped_column(String(200))
    latitude: Mapped[float]
    longitude: Mapped[float]
    star_rating: Mapped[int]
    guest_rating: Mapped[float | None]
    amenities: Mapped[list[str]] = mapped_column(JSON, default=list)
    images: Mapped[list[str]] = mapped_column(JSON, default=list)
    cheapest_room_price: Mapped[Decimal | None] = mapped_column(Numeric(7, 2))
    check_in_time: Mapped[str | None] = mapped_column(String(5))
    check_out_time: Mapped[str | None] = mapped_column(String(5))
    contact_phone: Mapped[str | None] = mapped_column(String(30))
    contact_email: Mapped[str | None] = mapped_column(String(100))

    destination: Mapped["Destination"] = relationship(back_populates="hotels")
    rooms: Mapped[list["Room"]] = relationship(back_populates="hotel", order_by="Room.id")
    reviews: Mapped[list["HotelReview"]] = relationship(
        back_populates="hotel", order_by="HotelReview.date.desc()"
    )

    @property
    def destination_name(self) -> str:
        return self.destination.name

    @property
    def policies(self) -> dict[str, str] | None:
        if self.check_in_time is None or self.check_out_time is None:
            return None
        return {"check_in": self.check_in_time, "check_out": self.check_out_time}

    @property
    def contact(self) -> dict[str, Any] | None:
        if self.contact_phone is None and self.contact_email is None:
            return None
        return {"phone": self.contact_phone, "email": self.contact_email}


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint(
            "price_per_night > 0 AND price_per_night <= 99999",
            name="price_per_night_range",
        ),
        CheckConstraint("capacity_adults >= 1", name="capacity_adults_min"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    hotel_id: Mapped[str] = mapped_column(ForeignKey("hotels.id"), index=True)
    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str] = mapped_column(String(500), default="")
    capacity_adults: Mapped[int]
    capacity_children: Mapped[int] = mapped_column(default=0)
    bed_type: Mapped[str] = mapped_column(String(30))
    bed_count: Mapped[int] = mapped_column(default=1)
    amenities: Mapped[list[str]] = mapped_column(JSON, default=list)
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(7, 2))
    images: Mapped[list[str]] = mapped_column(JSON, default=list)
    availability: Mapped[int | None]

    hotel: Mapped["Hotel"] = relationship(back_populates="rooms")

    @property
    def capacity(self) -> dict[str, int]:
        return {"adults": self.capacity_adults, "children": self.capacity_children}

    @property
    def beds(self) -> dict[str, Any]:
        return {"type": self.bed_type, "count": self.bed_count}


class HotelReview(Base):
    __tablename__ = "hotel_reviews"
    __table_args__ = (CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),)

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    hotel_id: Mapped[str] = mapped_column(ForeignKey("hotels.id"), index=True)
    author: Mapped[str] = mapped_column(String(100))
    rating: Mapped[int]
    title: Mapped[str | None] = mapped_column(String(200))
    comment: Mapped[str] = mapped_column(String(2000))
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    hotel: Mapped["Hotel"] = relationship(back_populates="reviews")
