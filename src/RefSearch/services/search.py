"""Search service: runs the engine over a record snapshot and pages the result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from RefSearch.core.models import Reference
from RefSearch.pagination import SEARCH_SORT_FIELDS, SORT_ORDERS, paginate, sort_references
from RefSearch.search import MatchResult, search, sort_results, tokenize
from RefSearch.utils.log import log


@dataclass(frozen=True, slots=True)
class SearchPage:
    """One page of search output.

    Attributes:
        items: References on this page, in final order.
        total: Number of matching references before pagination.
        limit: Applied page size (0 if unlimited).
        offset: Applied offset.
        next_offset: Offset of the next page, or None when exhausted.
        results: Match details for `items` when the query was non-blank.
    """

    items: Sequence[Reference]
    total: int
    limit: int
    offset: int
    next_offset: Optional[int] = None
    results: Sequence[MatchResult] = field(default_factory=tuple)


@dataclass(slots=True)
class ReferenceSearchService:
    """Application service that searches a fixed snapshot of references.

    The snapshot is never modified; callers replace the service (or its
    `records`) when the library changes.
    """

    records: Sequence[Reference]

    def search(
        self,
        query: str,
        *,
        sort: str = "relevance",
        order: str = "desc",
        limit: int = 0,
        offset: int = 0,
    ) -> SearchPage:
        """Search, order and paginate references.

        Args:
            query: Raw user query. Blank queries return the whole snapshot,
                in snapshot order when sorting by relevance.
            sort: relevance, created, updated, published, author or title.
            order: "asc" or "desc". With relevance, "asc" reverses the
                relevance order.
            limit: Page size; 0 means unlimited.
            offset: Number of leading results to skip.

        Returns:
            The requested page.

        Raises:
            ValueError: For an unknown sort field or order, or a negative
                limit/offset.
        """
        if sort not in SEARCH_SORT_FIELDS:
            raise ValueError(f"Unknown sort field: {sort}")
        if order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {order}")

        parsed = tokenize(query)
        log.debug("Query %r parsed into %d tokens", query, len(parsed.tokens))

        results: list[MatchResult] = []
        if not parsed.tokens:
            # Blank queries are unranked: relevance keeps snapshot order.
            matched = list(self.records) if sort == "relevance" else sort_references(self.records, sort, order)
        elif sort == "relevance":
            results = sort_results(search(self.records, parsed.tokens))
            if order == "asc":
                results.reverse()
            matched = [result.record for result in results]
        else:
            results = search(self.records, parsed.tokens)
            matched = sort_references([result.record for result in results], sort, order)
            # Keyed by object identity so records sharing an id stay distinct.
            by_record = {id(result.record): result for result in results}
            results = [by_record[id(item)] for item in matched]

        log.info("Search %r matched %d of %d references", query, len(matched), len(self.records))

        page = paginate(matched, limit=limit, offset=offset)
        page_results = tuple(results[offset:offset + len(page.items)]) if results else ()
        return SearchPage(
            items=tuple(page.items),
            total=len(matched),
            limit=limit,
            offset=offset,
            next_offset=page.next_offset,
            results=page_results,
        )
