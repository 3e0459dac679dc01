"""Reference search engine.

Pure pipeline: tokenize -> match (per record) -> score -> sort. No I/O and no
state kept between calls.
"""

from __future__ import annotations

from RefSearch.search.matcher import match_reference, match_token, search
from RefSearch.search.normalizer import normalize, normalize_preserving_case
from RefSearch.search.scorer import Score, score
from RefSearch.search.sorter import sort_results
from RefSearch.search.tokenizer import tokenize
from RefSearch.search.types import (
    FieldMatch,
    FieldName,
    MatchResult,
    MatchStrength,
    ParsedQuery,
    Surface,
    SurfaceTier,
    Token,
    TokenMatch,
)
from RefSearch.search.uppercase import (
    UppercaseSegment,
    extract_uppercase_segments,
    has_consecutive_uppercase,
    match_with_uppercase_sensitivity,
)

__all__ = [
    "FieldMatch",
    "FieldName",
    "MatchResult",
    "MatchStrength",
    "ParsedQuery",
    "Score",
    "Surface",
    "SurfaceTier",
    "Token",
    "TokenMatch",
    "UppercaseSegment",
    "extract_uppercase_segments",
    "has_consecutive_uppercase",
    "match_reference",
    "match_token",
    "match_with_uppercase_sensitivity",
    "normalize",
    "normalize_preserving_case",
    "score",
    "search",
    "sort_results",
    "tokenize",
]
