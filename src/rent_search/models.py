"""Data models for listings, search params and suggestions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

DEFAULT_BARANGAYS: tuple[str, ...] = (
    "RIZAL",
    "TALOLONG",
    "GOMEZ",
    "MAGSAYSAY",
    "BURGOS",
)

DEFAULT_AMENITIES: tuple[str, ...] = (
    "WiFi",
    "Parking",
    "Air Conditioning",
    "Pet-friendly",
    "Balcony",
    "Security",
    "Laundry",
    "Kitchen",
    "Cable TV",
    "Bathroom",
    "Water Supply",
)


def _to_float(value: Any) -> float | None:
    """Parse a price-like value. Returns None if missing or malformed."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            num = float(value)
        else:
            num = float(str(value).replace(",", "").strip())
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(num):
        return None
    return num


def _to_int(value: Any) -> int | None:
    """Parse a count-like value. Returns None if missing or malformed."""
    num = _to_float(value)
    if num is None:
        return None
    return int(num)


def _to_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class OccupantType(str, Enum):
    """Who the tenant is renting for."""

    FAMILY = "Family"
    INDIVIDUAL = "Individual"


class SuggestionKind(str, Enum):
    LOCATION = "location"
    AMENITY = "amenity"
    RECENT = "recent"
    POPULAR = "popular"


@dataclass
class Listing:
    """Rental listing as published on the marketplace.

    Only ``id`` is guaranteed; every other field may be None.
    """

    id: str
    title: str | None = None
    location: str | None = None
    address: str | None = None
    description: str | None = None
    price: float | None = None
    rooms: int | None = None
    bathrooms: int | None = None
    property_type: str | None = None
    barangay: str | None = None
    amenities: list[str] | None = None
    rental_type: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Listing:
        """Build a listing from a marketplace JSON record.

        Accepts both camelCase (``propertyType``, ``rentalType``) and
        snake_case keys. ``monthlyRent`` stands in for a missing ``price``
        and ``bedrooms`` for missing ``rooms``.
        """
        def pick(*keys: str) -> Any:
            for k in keys:
                if data.get(k) is not None:
                    return data[k]
            return None

        amenities = pick("amenities")
        if isinstance(amenities, str):
            amenities = [a.strip() for a in amenities.split(",") if a.strip()]
        elif isinstance(amenities, (list, tuple)):
            amenities = [str(a) for a in amenities if a is not None]
        else:
            amenities = None

        return cls(
            id=_to_str(pick("id")) or "",
            title=_to_str(pick("title")),
            location=_to_str(pick("location")),
            address=_to_str(pick("address")),
            description=_to_str(pick("description")),
            price=_to_float(pick("price", "monthlyRent", "monthly_rent")),
            rooms=_to_int(pick("rooms", "bedrooms")),
            bathrooms=_to_int(pick("bathrooms")),
            property_type=_to_str(pick("property_type", "propertyType")),
            barangay=_to_str(pick("barangay")),
            amenities=amenities,
            rental_type=_to_str(pick("rental_type", "rentalType")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "location": self.location,
            "address": self.address,
            "description": self.description,
            "price": self.price,
            "rooms": self.rooms,
            "bathrooms": self.bathrooms,
            "property_type": self.property_type,
            "barangay": self.barangay,
            "amenities": list(self.amenities) if self.amenities is not None else None,
            "rental_type": self.rental_type,
        }


@dataclass
class SearchParams:
    """Structured search constraints. None means "no constraint"."""

    query: str | None = None
    location: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    rooms: int | None = None
    amenities: list[str] | None = None
    property_type: str | None = None
    occupant_type: OccupantType | None = None

    def merged(self, other: SearchParams | None) -> SearchParams:
        """Return a copy where every field set on ``other`` wins."""
        if other is None:
            return replace(self)
        overrides = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **overrides)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "location": self.location,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "rooms": self.rooms,
            "amenities": self.amenities,
            "property_type": self.property_type,
            "occupant_type": self.occupant_type.value
            if isinstance(self.occupant_type, OccupantType)
            else self.occupant_type,
        }


@dataclass(frozen=True)
class Suggestion:
    """Search-box suggestion."""

    kind: SuggestionKind
    value: str
    label: str


@dataclass
class Vocabulary:
    """Known barangays and amenities. Order matters for first-match lookups."""

    barangays: list[str] = field(default_factory=lambda: list(DEFAULT_BARANGAYS))
    amenities: list[str] = field(default_factory=lambda: list(DEFAULT_AMENITIES))


@dataclass
class RankedListing:
    """A listing that passed filtering, with its relevance score."""

    listing: Listing
    score: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "listing": self.listing.to_dict(),
        }
