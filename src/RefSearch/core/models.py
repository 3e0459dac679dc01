from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Author:
    """One contributor of a reference.

    Either the structured `family`/`given` pair is set, or `literal` holds an
    institutional or otherwise unsplittable name.
    """

    family: Optional[str] = None
    given: Optional[str] = None
    literal: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Return "Family, Given" (or the literal name) for display."""
        if self.literal:
            return self.literal
        if self.family and self.given:
            return f"{self.family}, {self.given}"
        return self.family or self.given or ""

    def name_forms(self) -> tuple[str, ...]:
        """Return every name form a query may target.

        Includes the individual name parts and both orderings of the full
        name so that phrases such as "John Smith" and "Smith John" match.
        """
        forms: list[str] = []
        for part in (self.family, self.given, self.literal):
            if part:
                forms.append(part)
        if self.family and self.given:
            forms.append(f"{self.given} {self.family}")
            forms.append(f"{self.family} {self.given}")
        return tuple(forms)


@dataclass(frozen=True, slots=True)
class Reference:
    """Read-only bibliographic record as seen by the search engine.

    Attributes:
        id: Citation key, unique within a library.
        title: Reference title.
        authors: Contributors in citation order.
        year: Publication year if known.
        doi: Digital Object Identifier.
        pmid: PubMed identifier.
        pmcid: PubMed Central identifier.
        isbn: ISBN for books.
        url: Primary URL.
        additional_urls: Secondary URLs attached to the record.
        keywords: Author/publisher keywords.
        tags: Free-form user tags.
        abstract: Abstract text.
        container_title: Journal, book or proceedings title.
        published: Publication date parts (year, month, day), possibly partial.
        created_at: When the record was added to the library.
        updated_at: Last modification time of the record.
        extra: Extension point for fields the engine does not interpret.
    """

    id: str
    title: Optional[str] = None
    authors: Sequence[Author] = ()
    year: Optional[int] = None
    doi: Optional[str] = None
    pmid: Optional[str] = None
    pmcid: Optional[str] = None
    isbn: Optional[str] = None
    url: Optional[str] = None
    additional_urls: Sequence[str] = ()
    keywords: Sequence[str] = ()
    tags: Sequence[str] = ()
    abstract: Optional[str] = None
    container_title: Optional[str] = None
    published: Sequence[int] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Records are shared between concurrent searches; freeze the containers.
        object.__setattr__(self, "authors", tuple(self.authors))
        object.__setattr__(self, "additional_urls", tuple(self.additional_urls))
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "published", tuple(self.published))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))
