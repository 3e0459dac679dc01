from __future__ import annotations

"""Public configuration API for RefSearch."""

from RefSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    ENV_OVERRIDES,
    AppConfig,
    apply_env_overrides,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from RefSearch.config.library import LibraryConfig
from RefSearch.config.runtime import RuntimeConfig
from RefSearch.config.search import SearchConfig

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "ENV_OVERRIDES",
    "LibraryConfig",
    "RuntimeConfig",
    "SearchConfig",
    "apply_env_overrides",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
