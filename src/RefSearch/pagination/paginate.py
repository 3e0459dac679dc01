from __future__ import annotations

from typing import Sequence, TypeVar

from RefSearch.pagination.types import Page

T = TypeVar("T")


def paginate(items: Sequence[T], *, limit: int = 0, offset: int = 0) -> Page:
    """Slice items into a page.

    Args:
        items: Already sorted items.
        limit: Page size; 0 means unlimited.
        offset: Number of leading items to skip.

    Returns:
        The page. `next_offset` is set only for limited pages with more
        items remaining.

    Raises:
        ValueError: If limit or offset is negative.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    if offset < 0:
        raise ValueError("offset must be non-negative")

    window = list(items[offset:]) if limit == 0 else list(items[offset:offset + limit])

    next_offset = None
    if limit and window:
        next_position = offset + len(window)
        if next_position < len(items):
            next_offset = next_position
    return Page(items=window, next_offset=next_offset)
