"""Deterministic relevance ordering of search results."""

from __future__ import annotations

from typing import Iterable

from RefSearch.search.types import MatchResult


def sort_results(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Order results by strength (exact > strong > weak), then score, then record id.

    Returns a new list; the input is left untouched. Record ids are unique
    within a library, so the order does not depend on input order.
    """
    return sorted(
        results,
        key=lambda result: (
            -result.overall_strength.rank,
            -result.score,
            result.record.id,
        ),
    )
