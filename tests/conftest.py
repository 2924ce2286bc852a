"""Pytest fixtures."""

import pytest

from rent_search.models import Listing, Vocabulary


@pytest.fixture
def vocabulary() -> Vocabulary:
    """Default barangay/amenity vocabulary."""
    return Vocabulary()


@pytest.fixture
def sample_listings() -> list[Listing]:
    """One listing per barangay: two whole units, a bedspace and a room."""
    return [
        Listing(
            id="a",
            title="Cozy Apartment in Talolong",
            address="Talolong, Lopez",
            location="Talolong",
            barangay="TALOLONG",
            price=8000,
            rooms=2,
            property_type="Apartment",
            rental_type="Whole Unit",
        ),
        Listing(
            id="b",
            title="Bedspace near market",
            address="Rizal, Lopez",
            location="Rizal",
            barangay="RIZAL",
            price=2500,
            rooms=1,
            property_type="Bedspace",
            rental_type="Per Bed",
        ),
        Listing(
            id="c",
            title="House with parking",
            address="Gomez, Lopez",
            location="Gomez",
            barangay="GOMEZ",
            price=15000,
            rooms=3,
            property_type="House",
            rental_type="Whole Unit",
        ),
        Listing(
            id="d",
            title="Affordable room",
            address="Magsaysay, Lopez",
            location="Magsaysay",
            barangay="MAGSAYSAY",
            price=4500,
            rooms=1,
            property_type="Apartment",
            rental_type="Per Room",
        ),
    ]


@pytest.fixture
def bare_listing() -> Listing:
    """Listing with nothing but an id."""
    return Listing(id="bare")
