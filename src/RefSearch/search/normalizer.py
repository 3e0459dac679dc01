"""Text normalization for loose comparisons.

Pipeline: NFKC, lowercase, diacritic removal (NFD + drop combining marks),
punctuation to spaces (letters, digits, "/" and whitespace survive), then
whitespace collapsing. Both functions are total and idempotent.
"""

from __future__ import annotations

import re
import unicodedata

_WS_RE = re.compile(r"\s+")
# \w also admits "_", which is punctuation here.
_PUNCT_RE = re.compile(r"[^\w/\s]|_")


def normalize(text: str) -> str:
    """Canonicalize text for case-insensitive comparison."""
    return _normalize(text, lowercase=True)


def normalize_preserving_case(text: str) -> str:
    """Canonicalize text like `normalize` but keep letter case.

    Used ahead of acronym-sensitive matching, where "RNA" and "rna" must
    stay distinguishable.
    """
    return _normalize(text, lowercase=False)


def _normalize(text: str, *, lowercase: bool) -> str:
    normalized = unicodedata.normalize("NFKC", text)
    if lowercase:
        normalized = normalized.lower()
    normalized = _strip_marks(normalized)
    normalized = _PUNCT_RE.sub(" ", normalized)
    return _WS_RE.sub(" ", normalized).strip()


def _strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))
