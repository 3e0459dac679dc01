"""Acronym-sensitive text matching.

A query run of two or more consecutive uppercase letters ("AI", "RNA") is
treated as an acronym and must appear in the target with identical casing;
the rest of the query matches case-insensitively.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from RefSearch.utils.log import log

_UPPERCASE_RUN_RE = re.compile(r"[A-Z]{2,}")
_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class UppercaseSegment:
    """A run of consecutive uppercase letters; `end` is exclusive."""

    segment: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class _PatternPart:
    text: str
    case_sensitive: bool


def has_consecutive_uppercase(text: str) -> bool:
    """Return True if text contains 2 or more consecutive uppercase ASCII letters."""
    return _UPPERCASE_RUN_RE.search(text) is not None


def extract_uppercase_segments(text: str) -> tuple[UppercaseSegment, ...]:
    """Return all maximal uppercase runs of length >= 2, left to right."""
    return tuple(
        UppercaseSegment(segment=m.group(0), start=m.start(), end=m.end())
        for m in _UPPERCASE_RUN_RE.finditer(text)
    )


def match_with_uppercase_sensitivity(query: str, target: str) -> bool:
    """Test whether `query` occurs in `target` under the acronym rule.

    Args:
        query: Query text, original casing.
        target: Record text, original casing.

    Returns:
        True when the query matches. Uppercase runs in the query must be
        present verbatim; everything else is compared case-insensitively.
    """
    query = _collapse_ws(query)
    if not query:
        return True
    target = _collapse_ws(target)
    if not target:
        return False

    segments = extract_uppercase_segments(query)
    if not segments:
        return query.lower() in target.lower()

    for seg in segments:
        if seg.segment not in target:
            return False

    parts = _split_parts(query, segments)
    try:
        pattern = _compile_parts(parts)
    except re.error as error:
        log.debug("Acronym pattern failed to compile for %r: %s", query, error)
        return query.lower() in target.lower()
    return pattern.search(target) is not None


def _collapse_ws(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def _split_parts(query: str, segments: Sequence[UppercaseSegment]) -> list[_PatternPart]:
    """Interleave case-sensitive segments with the case-insensitive text around them."""
    parts: list[_PatternPart] = []
    last_end = 0
    for seg in segments:
        if seg.start > last_end:
            parts.append(_PatternPart(query[last_end:seg.start], case_sensitive=False))
        parts.append(_PatternPart(seg.segment, case_sensitive=True))
        last_end = seg.end
    if last_end < len(query):
        parts.append(_PatternPart(query[last_end:], case_sensitive=False))
    return parts


def _compile_parts(parts: Sequence[_PatternPart]) -> re.Pattern[str]:
    pieces: list[str] = []
    for part in parts:
        escaped = re.escape(part.text)
        pieces.append(escaped if part.case_sensitive else f"(?i:{escaped})")
    return re.compile("".join(pieces))
