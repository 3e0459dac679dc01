"""Tests for field sorting, sort aliases and pagination."""

import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.core.models import Author, Reference
from RefSearch.pagination import paginate, resolve_sort_alias, sort_references


def _ts(day: int) -> datetime:
    return datetime(2024, 1, day, tzinfo=timezone.utc)


RECORDS = (
    Reference(
        id="b",
        title="Beta",
        authors=(Author(family="Zhang"),),
        published=(2020, 5),
        created_at=_ts(2),
        updated_at=_ts(9),
    ),
    Reference(
        id="a",
        title="alpha",
        authors=(Author(literal="Consortium"),),
        year=2021,
        created_at=_ts(3),
    ),
    Reference(id="c", title="Gamma", created_at=_ts(1), updated_at=_ts(4)),
)


def _ids(items) -> list[str]:
    return [item.id for item in items]


class TestResolveSortAlias(unittest.TestCase):
    def test_aliases(self) -> None:
        self.assertEqual(resolve_sort_alias("pub"), "published")
        self.assertEqual(resolve_sort_alias("mod"), "updated")
        self.assertEqual(resolve_sort_alias("add"), "created")
        self.assertEqual(resolve_sort_alias("rel"), "relevance")

    def test_full_names_pass_through(self) -> None:
        for name in ("created", "updated", "published", "author", "title", "relevance"):
            self.assertEqual(resolve_sort_alias(name), name)

    def test_unknown_raises(self) -> None:
        with self.assertRaisesRegex(ValueError, "citations"):
            resolve_sort_alias("citations")


class TestSortReferences(unittest.TestCase):
    def test_created(self) -> None:
        self.assertEqual(_ids(sort_references(RECORDS, "created", "desc")), ["a", "b", "c"])
        self.assertEqual(_ids(sort_references(RECORDS, "created", "asc")), ["c", "b", "a"])

    def test_updated_falls_back_to_created(self) -> None:
        self.assertEqual(_ids(sort_references(RECORDS, "updated", "desc")), ["b", "c", "a"])

    def test_published_uses_year_when_no_date_parts(self) -> None:
        self.assertEqual(_ids(sort_references(RECORDS, "published", "desc")), ["a", "b", "c"])

    def test_author_uses_family_or_literal(self) -> None:
        self.assertEqual(_ids(sort_references(RECORDS, "author", "asc")), ["c", "a", "b"])

    def test_title_is_case_insensitive(self) -> None:
        self.assertEqual(_ids(sort_references(RECORDS, "title", "asc")), ["a", "b", "c"])

    def test_ties_break_on_created_then_id(self) -> None:
        twins = [Reference(id="y", title="Same"), Reference(id="x", title="Same"), Reference(id="z", title="Same", created_at=_ts(5))]
        self.assertEqual(_ids(sort_references(twins, "title", "asc")), ["z", "x", "y"])
        self.assertEqual(_ids(sort_references(twins, "title", "desc")), ["z", "x", "y"])

    def test_input_untouched(self) -> None:
        items = list(RECORDS)
        sort_references(items, "title", "desc")
        self.assertEqual(_ids(items), ["b", "a", "c"])

    def test_unknown_field_or_order(self) -> None:
        with self.assertRaises(ValueError):
            sort_references(RECORDS, "relevance", "desc")
        with self.assertRaises(ValueError):
            sort_references(RECORDS, "title", "sideways")


class TestPaginate(unittest.TestCase):
    def test_unlimited(self) -> None:
        page = paginate([1, 2, 3])
        self.assertEqual(list(page.items), [1, 2, 3])
        self.assertIsNone(page.next_offset)

    def test_limit_and_next_offset(self) -> None:
        page = paginate([1, 2, 3, 4, 5], limit=2, offset=1)
        self.assertEqual(list(page.items), [2, 3])
        self.assertEqual(page.next_offset, 3)

    def test_last_page_has_no_next_offset(self) -> None:
        page = paginate([1, 2, 3, 4], limit=2, offset=2)
        self.assertEqual(list(page.items), [3, 4])
        self.assertIsNone(page.next_offset)

    def test_offset_past_end(self) -> None:
        page = paginate([1, 2], limit=5, offset=10)
        self.assertEqual(list(page.items), [])
        self.assertIsNone(page.next_offset)

    def test_negative_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            paginate([1], limit=-1)
        with self.assertRaises(ValueError):
            paginate([1], offset=-1)


if __name__ == "__main__":
    unittest.main()
