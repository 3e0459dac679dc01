"""Service layer for RefSearch."""

from __future__ import annotations

from typing import Sequence

from RefSearch.core.models import Reference
from RefSearch.services.search import ReferenceSearchService, SearchPage


def create_search_service(records: Sequence[Reference]) -> ReferenceSearchService:
    """Create a search service over an immutable copy of `records`."""
    return ReferenceSearchService(records=tuple(records))


__all__ = [
    "ReferenceSearchService",
    "SearchPage",
    "create_search_service",
]
