"""Value types shared by the search pipeline.

All types are immutable so that a parsed query and its match results can be
shared freely between concurrent searches over the same record snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from RefSearch.core.models import Reference


class FieldName(str, Enum):
    """Field qualifiers accepted in `field:value` query clauses.

    The vocabulary is part of the query language: adding a member is
    backward compatible, renaming or removing one breaks saved queries.
    """

    AUTHOR = "author"
    TITLE = "title"
    YEAR = "year"
    DOI = "doi"
    PMID = "pmid"
    PMCID = "pmcid"
    URL = "url"
    KEYWORD = "keyword"
    TAG = "tag"

    @classmethod
    def parse(cls, name: str) -> Optional[FieldName]:
        """Return the member named `name`, or None for unknown prefixes."""
        try:
            return cls(name)
        except ValueError:
            return None


class SurfaceTier(str, Enum):
    IDENTIFIER = "identifier"
    PRIMARY = "primary"
    SECONDARY = "secondary"


class Surface(str, Enum):
    """Record attributes a token can be matched against."""

    ID = "id"
    TITLE = "title"
    AUTHOR = "author"
    ABSTRACT = "abstract"
    KEYWORD = "keyword"
    TAG = "tag"
    CONTAINER = "container"
    DOI = "doi"
    PMID = "pmid"
    PMCID = "pmcid"
    ISBN = "isbn"
    URL = "url"
    YEAR = "year"

    @property
    def tier(self) -> SurfaceTier:
        if self in (Surface.TITLE, Surface.AUTHOR):
            return SurfaceTier.PRIMARY
        if self in (Surface.ABSTRACT, Surface.KEYWORD, Surface.TAG, Surface.CONTAINER):
            return SurfaceTier.SECONDARY
        return SurfaceTier.IDENTIFIER


class MatchStrength(str, Enum):
    """Coarse match quality of a record, ordered exact > strong > weak > none."""

    EXACT = "exact"
    STRONG = "strong"
    WEAK = "weak"
    NONE = "none"

    @property
    def rank(self) -> int:
        return _STRENGTH_RANK[self]


_STRENGTH_RANK = {
    MatchStrength.EXACT: 3,
    MatchStrength.STRONG: 2,
    MatchStrength.WEAK: 1,
    MatchStrength.NONE: 0,
}


@dataclass(frozen=True, slots=True)
class Token:
    """One parsed unit of a search query.

    Attributes:
        raw: Original query text of the token, including field prefix and quotes.
        value: Text compared against records, with original casing.
        field: Field qualifier, or None for free text and plain phrases.
        is_phrase: Whether the value came from a quoted phrase.
    """

    raw: str
    value: str
    field: Optional[FieldName] = None
    is_phrase: bool = False


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    original: str
    tokens: tuple[Token, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldMatch:
    """A record surface that satisfied a token.

    Attributes:
        surface: Which attribute matched.
        exact: Identifier match or whole-value field match, as opposed to
            textual containment.
        value: The record text that matched.
    """

    surface: Surface
    exact: bool
    value: str


@dataclass(frozen=True, slots=True)
class TokenMatch:
    """Outcome of matching one token against one record."""

    token: Token
    matches: tuple[FieldMatch, ...] = ()

    @property
    def matched(self) -> bool:
        return bool(self.matches)

    @property
    def surface(self) -> Optional[Surface]:
        """First surface that satisfied the token, if any."""
        return self.matches[0].surface if self.matches else None

    @property
    def is_exact(self) -> bool:
        return any(m.exact for m in self.matches)

    @property
    def on_primary(self) -> bool:
        return any(m.surface.tier is SurfaceTier.PRIMARY for m in self.matches)

    @property
    def secondary_only(self) -> bool:
        """True when every satisfying surface is a secondary one."""
        return self.matched and all(m.surface.tier is SurfaceTier.SECONDARY for m in self.matches)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A record that satisfied every token of a query."""

    record: Reference
    token_matches: tuple[TokenMatch, ...]
    overall_strength: MatchStrength
    score: int
