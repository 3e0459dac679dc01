"""Tests for acronym-sensitive matching."""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.search import uppercase
from RefSearch.search.uppercase import (
    UppercaseSegment,
    extract_uppercase_segments,
    has_consecutive_uppercase,
    match_with_uppercase_sensitivity,
)


class TestUppercaseSegments(unittest.TestCase):
    def test_has_consecutive_uppercase(self) -> None:
        self.assertTrue(has_consecutive_uppercase("AI"))
        self.assertTrue(has_consecutive_uppercase("mRNA"))
        self.assertFalse(has_consecutive_uppercase("Ai"))
        self.assertFalse(has_consecutive_uppercase("A I"))
        self.assertFalse(has_consecutive_uppercase(""))

    def test_extract_segments(self) -> None:
        self.assertEqual(
            extract_uppercase_segments("mRNA and DNA"),
            (UppercaseSegment("RNA", 1, 4), UppercaseSegment("DNA", 9, 12)),
        )
        self.assertEqual(extract_uppercase_segments("no acronyms Here"), ())


class TestMatchWithUppercaseSensitivity(unittest.TestCase):
    def test_acronym_requires_exact_case(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("AI", "We study AI systems"))
        self.assertFalse(match_with_uppercase_sensitivity("AI", "we study ai systems"))

    def test_lowercase_query_is_case_insensitive(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("ai", "we study AI systems"))
        self.assertTrue(match_with_uppercase_sensitivity("api", "REST API design"))

    def test_acronym_inside_word(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("RNA", "mRNA synthesis"))
        self.assertFalse(match_with_uppercase_sensitivity("RNA", "mrna synthesis"))

    def test_surrounding_text_is_case_insensitive(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("AI therapy", "novel AI Therapy"))
        self.assertFalse(match_with_uppercase_sensitivity("AI therapy", "novel ai therapy"))

    def test_segments_must_keep_query_order(self) -> None:
        self.assertFalse(match_with_uppercase_sensitivity("AI RNA", "RNA AI"))
        self.assertTrue(match_with_uppercase_sensitivity("AI RNA", "the AI rna AI RNA link"))

    def test_whitespace_is_collapsed(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("AI   therapy", "AI\ttherapy"))

    def test_empty_inputs(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("", "anything"))
        self.assertTrue(match_with_uppercase_sensitivity("  ", ""))
        self.assertFalse(match_with_uppercase_sensitivity("AI", ""))

    def test_regex_metacharacters_are_literal(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("C++ AI", "c++ AI tools"))
        self.assertFalse(match_with_uppercase_sensitivity("C.. AI", "cxx AI tools"))

    def test_compile_failure_falls_back_to_containment(self) -> None:
        with patch.object(uppercase.re, "compile", side_effect=uppercase.re.error("boom")):
            self.assertTrue(match_with_uppercase_sensitivity("AI x", "ai x AI"))
            self.assertFalse(match_with_uppercase_sensitivity("AI y", "ai x AI"))


if __name__ == "__main__":
    unittest.main()
