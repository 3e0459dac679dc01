from __future__ import annotations

"""Shared helpers for reading and validating raw config mappings.

Every helper reports problems with the dotted config key so that a user can
find the offending line in the YAML file.
"""

from typing import Any, Collection, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool = False) -> Mapping[str, Any]:
    """Return a mapping section from the root config.

    Raises:
        ValueError: If the section is required but missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return a field value that must be present.

    Raises:
        ValueError: If the field is missing or null.
    """
    if section.get(field) is None:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Validate an integer (booleans are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_choice(value: Any, choices: Collection[str], config_key: str) -> str:
    """Validate a string drawn from a fixed vocabulary.

    Raises:
        TypeError: If value is not a string.
        ValueError: If value is not one of `choices`.
    """
    text = expect_str(value, config_key)
    if text not in choices:
        raise ValueError(f"{config_key} must be one of {sorted(choices)}")
    return text
