from __future__ import annotations

"""Application config orchestration, defaults and YAML loading entrypoints."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from RefSearch.config.library import LibraryConfig, check_library, load_library
from RefSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from RefSearch.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yml")

# Environment variable -> (section, key); values are applied after file merging.
ENV_OVERRIDES: Mapping[str, tuple[str, str]] = {
    "REFSEARCH_LIBRARY": ("library", "path"),
    "REFSEARCH_DEFAULT_LIMIT": ("search", "limit"),
    "REFSEARCH_LOG_LEVEL": ("log", "level"),
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    library: LibraryConfig
    search: SearchConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse a merged mapping into AppConfig."""
    runtime = load_runtime(raw)
    library = load_library(raw)
    search = load_search(raw)

    check_runtime(runtime)
    check_library(library)
    check_search(search)

    return AppConfig(runtime=runtime, library=library, search=search)


def load_config(path: Optional[Path] = None, *, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load configuration: packaged defaults, then the YAML file, then env overrides.

    Args:
        path: Optional YAML override file; None uses the defaults alone.
        environ: Environment mapping; defaults to `os.environ`.

    Raises:
        FileNotFoundError: If `path` is given but does not exist.
        TypeError: If config types are invalid.
        ValueError: If values are missing or invalid.
    """
    return load_config_with_defaults(path or DEFAULT_CONFIG_PATH, DEFAULT_CONFIG_PATH, environ=environ)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Load config by merging a defaults file and an override file.

    The override only needs the keys it changes. Environment overrides are
    applied last.
    """
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path != default_path:
        base = merge_config_dicts(base, parse_yaml(config_path.read_text(encoding="utf-8")))
    return parse_config_dict(apply_env_overrides(base, os.environ if environ is None else environ))


def apply_env_overrides(raw: Mapping[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Overlay `ENV_OVERRIDES` values found in `environ`.

    Numeric strings replace integer-typed values as ints; anything else is
    left as a string so that validation reports it against the config key.
    """
    overrides: dict[str, Any] = {}
    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(env_var)
        if value is None or value == "":
            continue
        current = raw.get(section, {}).get(key) if isinstance(raw.get(section), Mapping) else None
        if isinstance(current, int) and not isinstance(current, bool) and value.strip().lstrip("-").isdigit():
            overrides.setdefault(section, {})[key] = int(value)
        else:
            overrides.setdefault(section, {})[key] = value
    return merge_config_dicts(raw, overrides)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
