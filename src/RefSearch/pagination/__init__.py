"""Sorting and pagination for reference lists."""

from __future__ import annotations

from RefSearch.pagination.aliases import resolve_sort_alias
from RefSearch.pagination.paginate import paginate
from RefSearch.pagination.sorter import sort_references
from RefSearch.pagination.types import (
    SEARCH_SORT_FIELDS,
    SORT_FIELDS,
    SORT_ORDERS,
    Page,
    SearchSortField,
    SortField,
    SortOrder,
)

__all__ = [
    "Page",
    "SEARCH_SORT_FIELDS",
    "SORT_FIELDS",
    "SORT_ORDERS",
    "SearchSortField",
    "SortField",
    "SortOrder",
    "paginate",
    "resolve_sort_alias",
    "sort_references",
]
