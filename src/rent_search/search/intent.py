"""Parse structured search hints out of a free-text search phrase."""

from __future__ import annotations

import re

from ..models import SearchParams, Vocabulary

# "2br", "2 bed", "3 bedrooms", "1 room"
_ROOMS_RE = re.compile(r"([0-9]+)\s*(br|bed|bedroom|bedrooms|room|rooms)")

# Price ceilings/ranges; amounts are PHP per month.
_UNDER_RE = re.compile(r"under\s*([0-9]+)\s*k?")
_MAX_RE = re.compile(r"(<=|less than|max)\s*([0-9]+)\s*k?")
_BETWEEN_RE = re.compile(
    r"(between|from)\s*([0-9]+)\s*k?\s*(and|to|-)\s*([0-9]+)\s*k?"
)
_PLAIN_AMOUNT_RE = re.compile(r"\b([0-9]{4,6})\b")


def _to_int(digits: str) -> int | None:
    try:
        return int(digits)
    except ValueError:
        return None


def parse_intent(text: str, vocabulary: Vocabulary) -> SearchParams:
    """Extract rooms, price bounds, barangay and amenities from ``text``.

    The raw phrase is always kept as ``query``. Each price rule overwrites
    the bound(s) set by the rules before it, in this order:

    1. ``under 10k``
    2. ``<= 15000`` / ``less than 8k`` / ``max 8k``
    3. ``between 5k and 8k`` / ``from 5000 to 8000`` / ``from 5 - 8k``
    4. a bare 4-6 digit amount, only if no rule above set a bound

    Rules 1-3 scale by 1000 when the letter ``k`` appears anywhere in the
    phrase; the bare amount is never scaled.
    """
    if not text:
        return SearchParams()

    lowered = text.lower()
    out = SearchParams(query=text)
    scale = 1000 if "k" in lowered else 1

    m = _ROOMS_RE.search(lowered)
    if m:
        out.rooms = _to_int(m.group(1))

    m = _UNDER_RE.search(lowered)
    if m:
        amount = _to_int(m.group(1))
        if amount is not None:
            out.max_price = amount * scale

    m = _MAX_RE.search(lowered)
    if m:
        amount = _to_int(m.group(2))
        if amount is not None:
            out.max_price = amount * scale

    m = _BETWEEN_RE.search(lowered)
    if m:
        a = _to_int(m.group(2))
        b = _to_int(m.group(4))
        if a is not None and b is not None:
            out.min_price = min(a, b) * scale
            out.max_price = max(a, b) * scale

    if out.min_price is None and out.max_price is None:
        m = _PLAIN_AMOUNT_RE.search(lowered)
        if m:
            out.max_price = _to_int(m.group(1))

    for barangay in vocabulary.barangays:
        if barangay.lower() in lowered:
            out.location = barangay
            break

    hits = [a for a in vocabulary.amenities if a.lower() in lowered]
    if hits:
        out.amenities = hits

    return out
