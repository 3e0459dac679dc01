"""Library domain configuration: where the CSL-JSON snapshot lives."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from RefSearch.config.common import expect_str, get_required_value, get_section


@dataclass(frozen=True, slots=True)
class LibraryConfig:
    path: str

    @property
    def resolved_path(self) -> Path:
        return Path(self.path).expanduser()


def load_library(raw: Mapping[str, Any]) -> LibraryConfig:
    section = get_section(raw, "library", required=True)
    return LibraryConfig(path=expect_str(get_required_value(section, "path", "library.path"), "library.path"))


def check_library(config: LibraryConfig) -> None:
    if not config.path.strip():
        raise ValueError("library.path must not be empty")
