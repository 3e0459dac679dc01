"""Tests for the search service: ranking, blank queries, ordering and paging."""

import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.core.models import Author, Reference
from RefSearch.search.types import MatchStrength
from RefSearch.services import create_search_service


def _ts(day: int) -> datetime:
    return datetime(2024, 2, day, tzinfo=timezone.utc)


RECORDS = [
    Reference(
        id="smith2024",
        title="Deep learning for RNA structure",
        authors=(Author(family="Smith", given="John"),),
        year=2024,
        updated_at=_ts(1),
    ),
    Reference(
        id="jones2023",
        title="Deep learning basics",
        authors=(Author(family="Jones"),),
        year=2023,
        updated_at=_ts(3),
    ),
    Reference(
        id="lee2022",
        title="Protein design",
        abstract="A short note on deep learning.",
        year=2022,
        updated_at=_ts(2),
    ),
]


class TestReferenceSearchService(unittest.TestCase):
    def setUp(self) -> None:
        self.service = create_search_service(RECORDS)

    def test_relevance_order(self) -> None:
        page = self.service.search("deep learning")
        self.assertEqual([r.id for r in page.items], ["jones2023", "smith2024", "lee2022"])
        self.assertEqual(page.total, 3)
        self.assertEqual(page.results[-1].overall_strength, MatchStrength.WEAK)

    def test_relevance_ascending_reverses(self) -> None:
        page = self.service.search("deep learning", order="asc")
        self.assertEqual([r.id for r in page.items], ["lee2022", "smith2024", "jones2023"])

    def test_field_sort_keeps_results_aligned(self) -> None:
        page = self.service.search("deep", sort="published", order="asc")
        self.assertEqual([r.id for r in page.items], ["lee2022", "jones2023", "smith2024"])
        self.assertEqual([r.record.id for r in page.results], ["lee2022", "jones2023", "smith2024"])

    def test_field_sort_keeps_records_sharing_an_id_apart(self) -> None:
        service = create_search_service(
            [
                Reference(id="dup", title="Zeta deep learning"),
                Reference(id="dup", title="Alpha deep learning"),
            ]
        )
        page = service.search("deep", sort="title", order="asc")
        self.assertEqual([r.title for r in page.items], ["Alpha deep learning", "Zeta deep learning"])
        self.assertEqual([r.record.title for r in page.results], ["Alpha deep learning", "Zeta deep learning"])

    def test_blank_query_returns_everything(self) -> None:
        page = self.service.search("   ")
        self.assertEqual([r.id for r in page.items], ["smith2024", "jones2023", "lee2022"])
        self.assertEqual(page.results, ())

    def test_blank_query_ignores_relevance_order(self) -> None:
        page = self.service.search("", order="asc")
        self.assertEqual([r.id for r in page.items], ["smith2024", "jones2023", "lee2022"])

    def test_blank_query_with_updated_sort(self) -> None:
        page = self.service.search("", sort="updated")
        self.assertEqual([r.id for r in page.items], ["jones2023", "lee2022", "smith2024"])

    def test_blank_query_with_field_sort(self) -> None:
        page = self.service.search("", sort="title", order="asc")
        self.assertEqual([r.id for r in page.items], ["jones2023", "smith2024", "lee2022"])

    def test_pagination(self) -> None:
        first = self.service.search("deep learning", limit=2)
        self.assertEqual([r.id for r in first.items], ["jones2023", "smith2024"])
        self.assertEqual(first.next_offset, 2)
        self.assertEqual(len(first.results), 2)

        second = self.service.search("deep learning", limit=2, offset=first.next_offset)
        self.assertEqual([r.id for r in second.items], ["lee2022"])
        self.assertIsNone(second.next_offset)
        self.assertEqual([r.record.id for r in second.results], ["lee2022"])
        self.assertEqual(second.total, 3)

    def test_no_matches(self) -> None:
        page = self.service.search("zebrafish")
        self.assertEqual(page.items, ())
        self.assertEqual(page.total, 0)

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            self.service.search("x", sort="citations")
        with self.assertRaises(ValueError):
            self.service.search("x", order="up")
        with self.assertRaises(ValueError):
            self.service.search("x", limit=-1)

    def test_logs_summary(self) -> None:
        with self.assertLogs("RefSearch", level="INFO") as captured:
            self.service.search("deep")
        self.assertTrue(any("matched 3 of 3" in line for line in captured.output))


if __name__ == "__main__":
    unittest.main()
