"""Command implementations for the RefSearch CLI.

Encapsulates command business logic, separated from CLI parameter handling
and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from RefSearch.renderers import OutputWriter
from RefSearch.services.search import ReferenceSearchService
from RefSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one query through the search service and hand the page to a writer."""

    search_service: ReferenceSearchService
    output_writer: OutputWriter
    sort: str
    order: str
    limit: int
    offset: int

    def execute(self, query: str) -> None:
        log.debug(
            "Running search query=%r sort=%s order=%s limit=%d offset=%d",
            query,
            self.sort,
            self.order,
            self.limit,
            self.offset,
        )
        page = self.search_service.search(
            query,
            sort=self.sort,
            order=self.order,
            limit=self.limit,
            offset=self.offset,
        )
        log.info("Returning %d of %d matches", len(page.items), page.total)
        self.output_writer.write_page(page, query)
        self.output_writer.finalize()
