"""Search domain configuration: default ordering and page size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RefSearch.config.common import (
    expect_choice,
    expect_int,
    expect_str,
    get_required_value,
    get_section,
)
from RefSearch.pagination import SORT_ORDERS, resolve_sort_alias


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search defaults.

    Attributes:
        sort: Default sort field (aliases already resolved).
        order: Default sort order.
        limit: Default page size; 0 means unlimited.
    """

    sort: str
    order: str
    limit: int


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load the `search` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or the sort field is unknown.
    """
    section = get_section(raw, "search", required=True)
    sort_name = expect_str(get_required_value(section, "sort", "search.sort"), "search.sort")
    try:
        sort = resolve_sort_alias(sort_name)
    except ValueError as e:
        raise ValueError(f"search.sort: {e}") from e
    return SearchConfig(
        sort=sort,
        order=expect_choice(get_required_value(section, "order", "search.order"), SORT_ORDERS, "search.order"),
        limit=expect_int(get_required_value(section, "limit", "search.limit"), "search.limit"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if config.limit < 0:
        raise ValueError("search.limit must be 0 (unlimited) or positive")
