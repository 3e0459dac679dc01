"""Field-based ordering of references for list views and non-relevance search."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Sequence

from RefSearch.core.models import Reference

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _created(item: Reference) -> datetime:
    return _aware(item.created_at) if item.created_at else _EPOCH


def _updated(item: Reference) -> datetime:
    return _aware(item.updated_at) if item.updated_at else _created(item)


def _published(item: Reference) -> tuple[int, int, int]:
    """Publication date as (year, month, day); missing parts default to 1, no date to 0."""
    parts = list(item.published) or ([item.year] if item.year is not None else [])
    if not parts:
        return (0, 0, 0)
    year = parts[0]
    month = parts[1] if len(parts) > 1 else 1
    day = parts[2] if len(parts) > 2 else 1
    return (year, month, day)


def _author(item: Reference) -> str:
    if not item.authors:
        return "anonymous"
    first = item.authors[0]
    return (first.family or first.literal or "anonymous").lower()


def _title(item: Reference) -> str:
    return (item.title or "").lower()


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


_SORT_KEYS = {
    "created": _created,
    "updated": _updated,
    "published": _published,
    "author": _author,
    "title": _title,
}


def sort_references(items: Sequence[Reference], sort: str, order: str) -> list[Reference]:
    """Sort references by a field, returning a new list.

    Ties fall back to creation time (newest first), then id (ascending), so
    the result never depends on input order.

    Args:
        items: References to sort.
        sort: One of created/updated/published/author/title.
        order: "asc" or "desc"; applies to the primary key only.

    Raises:
        ValueError: For an unknown sort field or order.
    """
    key = _SORT_KEYS.get(sort)
    if key is None:
        raise ValueError(f"Unknown sort field: {sort}")
    if order not in ("asc", "desc"):
        raise ValueError(f"Unknown sort order: {order}")
    direction = -1 if order == "desc" else 1

    def compare(a: Reference, b: Reference) -> int:
        primary = _cmp(key(a), key(b)) * direction
        if primary:
            return primary
        created = _cmp(_created(b), _created(a))
        if created:
            return created
        return _cmp(a.id, b.id)

    return sorted(items, key=cmp_to_key(compare))


def _cmp(a, b) -> int:
    return (a > b) - (a < b)
