"""Free-text search: intent parsing, suggestions and the search facade."""

from .engine import SearchEngine
from .intent import parse_intent
from .suggest import suggest_terms

__all__ = [
    "SearchEngine",
    "parse_intent",
    "suggest_terms",
]
