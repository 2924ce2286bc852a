"""Listing filters for location, price, rooms, amenities, type and free text."""

from __future__ import annotations

from .models import Listing, OccupantType, RankedListing, SearchParams
from .scoring import is_number, matched_amenities, score_listing, searchable_text

WHOLE_UNIT = "whole unit"


def _matches_location(listing: Listing, location: str) -> bool:
    loc = location.strip().lower()
    return (
        (listing.barangay or "").strip().lower() == loc
        or loc in (listing.location or "").lower()
        or loc in (listing.address or "").lower()
    )


def _matches_occupant(listing: Listing, occupant_type: OccupantType | str) -> bool:
    """Family wants a whole unit; individuals want per room/bed/shared.

    Listings without a rental type pass either way.
    """
    rental_type = (listing.rental_type or "").strip().lower()
    if not rental_type:
        return True
    if occupant_type == OccupantType.FAMILY:
        return rental_type == WHOLE_UNIT
    if occupant_type == OccupantType.INDIVIDUAL:
        return rental_type != WHOLE_UNIT
    return True


def listing_matches(listing: Listing, params: SearchParams) -> bool:
    """
    Return True if the listing passes every active constraint in ``params``.
    - Location: barangay equals, or location/address contains it
    - Price: inclusive bounds, skipped when the listing has no price
    - Rooms: at least ``rooms`` when ``rooms`` > 0
    - Amenities: every requested amenity present
    - Property type: equal (case-insensitive)
    - Occupant type: rental-type heuristic
    - Query: substring of title/location/address/description
    """
    if params.location:
        if not _matches_location(listing, params.location):
            return False

    if is_number(params.min_price) and is_number(listing.price):
        if listing.price < params.min_price:
            return False
    if is_number(params.max_price) and is_number(listing.price):
        if listing.price > params.max_price:
            return False

    if is_number(params.rooms) and params.rooms > 0:
        if (listing.rooms or 0) < params.rooms:
            return False

    if params.amenities:
        if len(matched_amenities(listing, params.amenities)) < len(params.amenities):
            return False

    if params.property_type:
        if (listing.property_type or "").lower() != params.property_type.lower():
            return False

    if params.occupant_type:
        if not _matches_occupant(listing, params.occupant_type):
            return False

    q = (params.query or "").strip().lower()
    if q:
        if q not in searchable_text(listing):
            return False

    return True


def rank_listings(listings: list[Listing], params: SearchParams) -> list[RankedListing]:
    """Filter, score and sort by score desc. Ties keep input order."""
    ranked = [
        RankedListing(listing=l, score=score_listing(l, params))
        for l in listings
        if listing_matches(l, params)
    ]
    return sorted(ranked, key=lambda r: -r.score)


def filter_listings(listings: list[Listing], params: SearchParams) -> list[Listing]:
    """Listings that pass ``params``, most relevant first."""
    return [r.listing for r in rank_listings(listings, params)]
