"""Search-box suggestions from vocabularies and recent/popular terms."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Suggestion, SuggestionKind, Vocabulary

DEFAULT_TERM_LIMIT = 6


def _matching(values: Iterable[str], q: str) -> list[str]:
    return [v for v in values if not q or q in v.lower()]


def suggest_terms(
    text: str | None,
    recent: Iterable[str] | None,
    popular: Iterable[str] | None,
    vocabulary: Vocabulary,
    *,
    limit: int = DEFAULT_TERM_LIMIT,
    keep_recent_order: bool = False,
) -> list[Suggestion]:
    """Build suggestions for the search box.

    Order: recent terms, matching barangays, matching amenities, popular
    terms. Recent and popular are capped at ``limit`` each and are not
    filtered by ``text``. Duplicate labels are dropped, first one wins.

    Recent terms are moved to the front one at a time, so the last recent
    term ends up first. Pass ``keep_recent_order=True`` to list them in the
    order given instead.
    """
    q = (text or "").lower()
    suggestions: list[Suggestion] = []

    for b in _matching(vocabulary.barangays, q):
        suggestions.append(Suggestion(SuggestionKind.LOCATION, b, b))
    for a in _matching(vocabulary.amenities, q):
        suggestions.append(Suggestion(SuggestionKind.AMENITY, a, a))

    recent_terms = [Suggestion(SuggestionKind.RECENT, r, r) for r in list(recent or [])[:limit]]
    if keep_recent_order:
        suggestions = recent_terms + suggestions
    else:
        for s in recent_terms:
            suggestions.insert(0, s)

    for p in list(popular or [])[:limit]:
        suggestions.append(Suggestion(SuggestionKind.POPULAR, p, p))

    seen: set[str] = set()
    deduped: list[Suggestion] = []
    for s in suggestions:
        if s.label in seen:
            continue
        seen.add(s.label)
        deduped.append(s)
    return deduped
