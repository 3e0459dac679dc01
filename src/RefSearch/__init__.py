"""RefSearch - deterministic search and ranking over bibliographic references."""

from __future__ import annotations

from RefSearch.core.models import Author, Reference
from RefSearch.search import (
    MatchResult,
    MatchStrength,
    ParsedQuery,
    Token,
    search,
    sort_results,
    tokenize,
)

__all__ = [
    "Author",
    "MatchResult",
    "MatchStrength",
    "ParsedQuery",
    "Reference",
    "Token",
    "search",
    "sort_results",
    "tokenize",
]
