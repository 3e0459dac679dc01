"""Tests for layered config parsing and validation."""

import sys
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.config import apply_env_overrides, load_config, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": True, "dir": "log"},
        "library": {"path": "data/library.json"},
        "search": {"sort": "relevance", "order": "desc", "limit": 20},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertTrue(cfg.runtime.to_file)
        self.assertEqual(cfg.library.path, "data/library.json")
        self.assertEqual(cfg.search.limit, 20)
        self.assertEqual(cfg.search.sort, "relevance")

    def test_sort_alias_is_resolved(self) -> None:
        raw = _base_raw_config()
        raw["search"]["sort"] = "pub"
        self.assertEqual(parse_config_dict(raw).search.sort, "published")

    def test_unknown_sort_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["sort"] = "citations"
        with self.assertRaisesRegex(ValueError, "search\\.sort"):
            parse_config_dict(raw)

    def test_order_choice_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["order"] = "up"
        with self.assertRaisesRegex(ValueError, "search\\.order"):
            parse_config_dict(raw)

    def test_limit_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["search"]["limit"] = "20"
        with self.assertRaisesRegex(TypeError, "search\\.limit"):
            parse_config_dict(raw)

    def test_negative_limit_error(self) -> None:
        raw = _base_raw_config()
        raw["search"]["limit"] = -1
        with self.assertRaisesRegex(ValueError, "search\\.limit"):
            parse_config_dict(raw)

    def test_missing_library_path_error(self) -> None:
        raw = deepcopy(_base_raw_config())
        del raw["library"]["path"]
        with self.assertRaisesRegex(ValueError, "library\\.path"):
            parse_config_dict(raw)

    def test_missing_section_error(self) -> None:
        raw = deepcopy(_base_raw_config())
        del raw["search"]
        with self.assertRaisesRegex(ValueError, "search"):
            parse_config_dict(raw)

    def test_log_level_validation(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "debug"
        self.assertEqual(parse_config_dict(raw).runtime.level, "DEBUG")
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_library_path_is_expanded(self) -> None:
        raw = _base_raw_config()
        raw["library"]["path"] = "~/refs.json"
        self.assertEqual(parse_config_dict(raw).library.resolved_path, Path.home() / "refs.json")


class TestEnvOverrides(unittest.TestCase):
    def test_builtin_defaults_without_file(self) -> None:
        cfg = load_config(environ={})
        self.assertEqual(cfg.runtime.level, "WARNING")
        self.assertEqual(cfg.search.sort, "relevance")
        self.assertEqual(cfg.search.limit, 0)

    def test_env_values_take_precedence(self) -> None:
        cfg = load_config(
            environ={
                "REFSEARCH_LIBRARY": "/tmp/other.json",
                "REFSEARCH_DEFAULT_LIMIT": "15",
                "REFSEARCH_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(cfg.library.path, "/tmp/other.json")
        self.assertEqual(cfg.search.limit, 15)
        self.assertEqual(cfg.runtime.level, "DEBUG")

    def test_empty_env_value_is_ignored(self) -> None:
        merged = apply_env_overrides(_base_raw_config(), {"REFSEARCH_LIBRARY": ""})
        self.assertEqual(merged["library"]["path"], "data/library.json")

    def test_non_numeric_limit_reports_key(self) -> None:
        with self.assertRaisesRegex(TypeError, "search\\.limit"):
            load_config(environ={"REFSEARCH_DEFAULT_LIMIT": "many"})


if __name__ == "__main__":
    unittest.main()
