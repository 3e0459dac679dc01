"""Sort field alias resolution."""

from __future__ import annotations

from RefSearch.pagination.types import SEARCH_SORT_FIELDS

_SORT_ALIASES: dict[str, str] = {
    "pub": "published",
    "mod": "updated",
    "add": "created",
    "rel": "relevance",
}


def resolve_sort_alias(name: str) -> str:
    """Resolve a sort alias to its full field name.

    Full field names pass through unchanged.

    Raises:
        ValueError: If the name is neither a sort field nor an alias.
    """
    if name in SEARCH_SORT_FIELDS:
        return name
    resolved = _SORT_ALIASES.get(name)
    if resolved is None:
        raise ValueError(f"Unknown sort field: {name}")
    return resolved
