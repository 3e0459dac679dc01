"""Classification of a record's token matches into a strength tier and score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from RefSearch.search.types import MatchStrength, TokenMatch

_PRIMARY_WEIGHT = 2
_EXACT_WEIGHT = 1


@dataclass(frozen=True, slots=True)
class Score:
    overall_strength: MatchStrength
    score: int


def score(token_matches: Sequence[TokenMatch]) -> Score:
    """Score a record from its per-token outcomes.

    - exact: every token matched an identifier or a whole field value.
    - weak: some token matched only secondary surfaces (abstract, keywords,
      tags, container title).
    - strong: everything else.

    The numeric score only orders records within one tier: each token on a
    primary surface (title, author) adds 2, each exact token adds 1.

    Args:
        token_matches: Outcomes for every query token, in query order.

    Returns:
        The tier and tie-break score. `none` with score 0 when there is
        nothing to score or some token did not match.
    """
    if not token_matches or not all(tm.matched for tm in token_matches):
        return Score(overall_strength=MatchStrength.NONE, score=0)

    primary = sum(1 for tm in token_matches if tm.on_primary)
    exact = sum(1 for tm in token_matches if tm.is_exact)
    value = primary * _PRIMARY_WEIGHT + exact * _EXACT_WEIGHT

    if exact == len(token_matches):
        strength = MatchStrength.EXACT
    elif any(tm.secondary_only for tm in token_matches):
        strength = MatchStrength.WEAK
    else:
        strength = MatchStrength.STRONG
    return Score(overall_strength=strength, score=value)
