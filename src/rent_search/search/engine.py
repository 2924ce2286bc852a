"""Search facade: intent parsing, filtering/ranking and suggestions."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from ..config import (
    get_debounce_delay_ms,
    get_keep_recent_order,
    get_suggestion_limit,
    get_vocabulary,
)
from ..debounce import Debounced, debounce
from ..filters import filter_listings, rank_listings
from ..models import Listing, RankedListing, SearchParams, Suggestion, Vocabulary
from ..scoring import score_listing
from .intent import parse_intent
from .suggest import suggest_terms


class SearchEngine:
    """
    Listing search over a caller-supplied list of listings.
    Holds the barangay/amenity vocabulary and suggestion settings; keeps no
    state between calls.
    """

    def __init__(
        self,
        vocabulary: Vocabulary | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        cfg = config or {}
        self.vocabulary = vocabulary or get_vocabulary(cfg)
        self.suggestion_limit = get_suggestion_limit(cfg)
        self.keep_recent_order = get_keep_recent_order(cfg)
        self.debounce_ms = get_debounce_delay_ms(cfg)

    def parse(self, text: str) -> SearchParams:
        """Structured params from a free-text phrase."""
        return parse_intent(text, self.vocabulary)

    def build_params(
        self,
        text: str | None = None,
        params: SearchParams | None = None,
        match_text: bool = True,
    ) -> SearchParams:
        """Parsed intent of ``text`` with explicit ``params`` taking precedence.

        With ``match_text=False`` only the structured hints are kept and the
        phrase itself is not required to appear in the listing.
        """
        parsed = self.parse(text) if text else SearchParams()
        if not match_text:
            parsed.query = None
        return parsed.merged(params)

    def rank(
        self,
        listings: list[Listing],
        text: str | None = None,
        params: SearchParams | None = None,
        match_text: bool = True,
    ) -> list[RankedListing]:
        return rank_listings(listings, self.build_params(text, params, match_text))

    def search(
        self,
        listings: list[Listing],
        text: str | None = None,
        params: SearchParams | None = None,
        match_text: bool = True,
    ) -> list[Listing]:
        """Filtered listings, most relevant first."""
        return filter_listings(listings, self.build_params(text, params, match_text))

    def score(self, listing: Listing, params: SearchParams) -> int:
        return score_listing(listing, params)

    def suggest(
        self,
        text: str | None,
        recent: Iterable[str] = (),
        popular: Iterable[str] = (),
    ) -> list[Suggestion]:
        return suggest_terms(
            text,
            recent,
            popular,
            self.vocabulary,
            limit=self.suggestion_limit,
            keep_recent_order=self.keep_recent_order,
        )

    def debounced(self, fn: Callable[..., Any]) -> Debounced:
        """Wrap a search-as-you-type callback with the configured delay."""
        return debounce(fn, self.debounce_ms)
