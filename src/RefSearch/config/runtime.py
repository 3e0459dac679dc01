"""Logging section of the config (`log:`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RefSearch.config.common import expect_bool, expect_choice, expect_str, get_required_value, get_section

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Console log threshold and optional per-command log files."""

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    section = get_section(raw, "log", required=True)
    level = get_required_value(section, "level", "log.level")
    if isinstance(level, str):
        level = level.upper()
    return RuntimeConfig(
        level=expect_choice(level, LOG_LEVELS, "log.level"),
        to_file=expect_bool(get_required_value(section, "to_file", "log.to_file"), "log.to_file"),
        dir=expect_str(get_required_value(section, "dir", "log.dir"), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Reject file logging without a directory.

    Raises:
        ValueError: If `log.to_file` is set and `log.dir` is blank.
    """
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file=true")
