"""Tests for free-text intent parsing."""

import pytest

from rent_search.models import Vocabulary
from rent_search.search import parse_intent


def test_empty_input(vocabulary: Vocabulary) -> None:
    assert parse_intent("", vocabulary).is_empty()


def test_query_is_kept_verbatim(vocabulary: Vocabulary) -> None:
    params = parse_intent("Cozy STUDIO near Market", vocabulary)
    assert params.query == "Cozy STUDIO near Market"
    assert params.rooms is None
    assert params.max_price is None
    assert params.location is None
    assert params.amenities is None


@pytest.mark.parametrize(
    "text, rooms",
    [
        ("2br apartment", 2),
        ("3 bedrooms", 3),
        ("1 room for rent", 1),
        ("4 BED house", 4),
        ("2br or 3br", 2),
    ],
)
def test_rooms(vocabulary: Vocabulary, text: str, rooms: int) -> None:
    assert parse_intent(text, vocabulary).rooms == rooms


class TestPrice:
    @pytest.mark.parametrize(
        "text, max_price",
        [
            ("under 10k", 10000),
            ("under 8000", 8000),
            ("max 8k", 8000),
            ("less than 5000", 5000),
            ("<= 15000", 15000),
        ],
    )
    def test_ceiling(self, vocabulary: Vocabulary, text: str, max_price: int) -> None:
        params = parse_intent(text, vocabulary)
        assert params.max_price == max_price
        assert params.min_price is None

    @pytest.mark.parametrize(
        "text, low, high",
        [
            ("between 3k and 5k", 3000, 5000),
            ("from 9000 to 4000", 4000, 9000),
            ("from 5 - 8k", 5000, 8000),
        ],
    )
    def test_range(self, vocabulary: Vocabulary, text: str, low: int, high: int) -> None:
        params = parse_intent(text, vocabulary)
        assert params.min_price == low
        assert params.max_price == high

    def test_k_anywhere_scales(self, vocabulary: Vocabulary) -> None:
        # the "k" in "parking" is enough
        assert parse_intent("parking under 5", vocabulary).max_price == 5000

    def test_plain_amount(self, vocabulary: Vocabulary) -> None:
        assert parse_intent("apartment 7000", vocabulary).max_price == 7000

    def test_plain_amount_is_not_scaled(self, vocabulary: Vocabulary) -> None:
        assert parse_intent("kitchen 7000", vocabulary).max_price == 7000

    def test_plain_amount_ignored_after_price_rule(self, vocabulary: Vocabulary) -> None:
        assert parse_intent("under 5k lot 123456", vocabulary).max_price == 5000

    @pytest.mark.parametrize("text", ["house 500", "house 1234567"])
    def test_plain_amount_needs_four_to_six_digits(self, vocabulary: Vocabulary, text: str) -> None:
        assert parse_intent(text, vocabulary).max_price is None


class TestLocation:
    def test_barangay_found(self, vocabulary: Vocabulary) -> None:
        assert parse_intent("apartment in talolong", vocabulary).location == "TALOLONG"

    def test_vocabulary_order_wins(self, vocabulary: Vocabulary) -> None:
        # RIZAL comes before GOMEZ in the vocabulary
        assert parse_intent("gomez or rizal", vocabulary).location == "RIZAL"

    def test_custom_vocabulary(self) -> None:
        vocab = Vocabulary(barangays=["Danlagan", "Bocboc"], amenities=[])
        assert parse_intent("room in BOCBOC", vocab).location == "Bocboc"


class TestAmenities:
    def test_every_hit_collected_in_vocabulary_order(self, vocabulary: Vocabulary) -> None:
        params = parse_intent("with parking and wifi", vocabulary)
        assert params.amenities == ["WiFi", "Parking"]

    def test_no_hits_leaves_unset(self, vocabulary: Vocabulary) -> None:
        assert parse_intent("quiet place", vocabulary).amenities is None


def test_combined_phrase(vocabulary: Vocabulary) -> None:
    params = parse_intent("2br under 10k talolong with wifi", vocabulary)
    assert params.query == "2br under 10k talolong with wifi"
    assert params.rooms == 2
    assert params.max_price == 10000
    assert params.min_price is None
    assert params.location == "TALOLONG"
    assert params.amenities == ["WiFi"]
