"""Sort and pagination vocabulary shared by list and search operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence

SortField = Literal["created", "updated", "published", "author", "title"]
SearchSortField = Literal["created", "updated", "published", "author", "title", "relevance"]
SortOrder = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = ("created", "updated", "published", "author", "title")
SEARCH_SORT_FIELDS: tuple[str, ...] = SORT_FIELDS + ("relevance",)
SORT_ORDERS: tuple[str, ...] = ("asc", "desc")


@dataclass(frozen=True, slots=True)
class Page:
    """One slice of a sorted item list.

    Attributes:
        items: Items on this page.
        next_offset: Offset of the following page, or None when exhausted.
    """

    items: Sequence[Any]
    next_offset: Optional[int] = None
