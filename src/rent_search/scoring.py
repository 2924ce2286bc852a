"""Relevance scoring for listings that already passed filtering."""

from __future__ import annotations

from typing import Any

from .models import Listing, SearchParams

# Points per signal. Scores only order results; they never exclude.
QUERY_POINTS = 3
BARANGAY_POINTS = 3
LOCATION_POINTS = 2
ADDRESS_POINTS = 1
ROOMS_POINTS = 2
PRICE_BOUND_POINTS = 1
AMENITY_POINTS = 1
PROPERTY_TYPE_POINTS = 2


def is_number(value: Any) -> bool:
    """True for int/float values (bool excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _lower(value: str | None) -> str:
    return (value or "").lower()


def searchable_text(listing: Listing, include_property_type: bool = False) -> str:
    """Lowercased title, location, address and description joined by spaces."""
    parts = [listing.title, listing.location, listing.address, listing.description]
    if include_property_type:
        parts.append(listing.property_type)
    return " ".join(p or "" for p in parts).lower()


def matched_amenities(listing: Listing, wanted: list[str] | None) -> list[str]:
    """Requested amenities the listing has (case-insensitive)."""
    if not wanted:
        return []
    have = {a.lower() for a in (listing.amenities or [])}
    return [a for a in wanted if a.lower() in have]


def location_points(listing: Listing, location: str | None) -> int:
    """Best single location signal: barangay > location label > address."""
    loc = (location or "").strip().lower()
    if not loc:
        return 0
    if _lower(listing.barangay).strip() == loc:
        return BARANGAY_POINTS
    if loc in _lower(listing.location):
        return LOCATION_POINTS
    if loc in _lower(listing.address):
        return ADDRESS_POINTS
    return 0


def score_listing(listing: Listing, params: SearchParams) -> int:
    """Additive relevance score, always >= 0.

    - +3 query found in title/location/address/description/property type
    - +3 / +2 / +1 barangay equal / location contains / address contains
    - +2 rooms requested and listing has at least that many
    - +1 price >= min_price, +1 price <= max_price
    - +1 per requested amenity the listing has
    - +2 property type equal
    """
    score = 0

    if params.query:
        if params.query.lower() in searchable_text(listing, include_property_type=True):
            score += QUERY_POINTS

    score += location_points(listing, params.location)

    if is_number(params.rooms) and params.rooms > 0:
        if (listing.rooms or 0) >= params.rooms:
            score += ROOMS_POINTS

    if is_number(params.min_price) and is_number(listing.price):
        if listing.price >= params.min_price:
            score += PRICE_BOUND_POINTS
    if is_number(params.max_price) and is_number(listing.price):
        if listing.price <= params.max_price:
            score += PRICE_BOUND_POINTS

    score += AMENITY_POINTS * len(matched_amenities(listing, params.amenities))

    if params.property_type and listing.property_type:
        if listing.property_type.lower() == params.property_type.lower():
            score += PROPERTY_TYPE_POINTS

    return score
