"""Read-only CSL-JSON library loader.

Maps CSL-JSON items onto `Reference` records for the search engine. The
engine only ever sees the resulting snapshot; writing, locking and reload
reconciliation belong to the library store itself.
"""

from __future__ import annotations

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from dateutil import parser as dt_parser

from RefSearch.core.models import Author, Reference
from RefSearch.utils.log import log

_KEYWORD_SPLIT_RE = re.compile(r"[;,]")
_KNOWN_KEYS = frozenset(
    {
        "id",
        "title",
        "author",
        "issued",
        "DOI",
        "PMID",
        "PMCID",
        "ISBN",
        "URL",
        "keyword",
        "abstract",
        "container-title",
        "custom",
    }
)


class LibraryError(ValueError):
    """Raised when a library file cannot be read as CSL-JSON."""


def load_library(path: Path) -> tuple[Reference, ...]:
    """Load every reference from a CSL-JSON array file.

    Args:
        path: Path to the library file.

    Returns:
        Records in file order.

    Raises:
        LibraryError: If the file is missing, not valid JSON, not an array,
            or contains an item without an id or a repeated id.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LibraryError(f"Cannot read library {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LibraryError(f"Library {path} is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise LibraryError(f"Library {path} must contain a JSON array")

    references = tuple(reference_from_csl(item, index=idx) for idx, item in enumerate(data))
    seen: set[str] = set()
    for idx, ref in enumerate(references):
        if ref.id in seen:
            raise LibraryError(f"Library item [{idx}] repeats id {ref.id!r}")
        seen.add(ref.id)
    log.debug("Loaded %d references from %s", len(references), path)
    return references


def reference_from_csl(item: Any, *, index: int = 0) -> Reference:
    """Convert one CSL-JSON item into a Reference.

    Unknown keys are kept in `Reference.extra`; malformed optional values
    are ignored rather than rejected.

    Raises:
        LibraryError: If the item is not an object or has no string id.
    """
    if not isinstance(item, Mapping):
        raise LibraryError(f"Library item [{index}] must be an object")
    ref_id = item.get("id")
    if not isinstance(ref_id, str) or not ref_id.strip():
        raise LibraryError(f"Library item [{index}] is missing an id")

    custom = item.get("custom")
    if not isinstance(custom, Mapping):
        custom = {}
    published = _date_parts(item.get("issued"))

    return Reference(
        id=ref_id,
        title=_str(item.get("title")),
        authors=_authors(item.get("author")),
        year=published[0] if published else None,
        doi=_str(item.get("DOI")),
        pmid=_str(item.get("PMID")),
        pmcid=_str(item.get("PMCID")),
        isbn=_str(item.get("ISBN")),
        url=_str(item.get("URL")),
        additional_urls=_str_list(custom.get("additional_urls")),
        keywords=_keywords(item.get("keyword")),
        tags=_str_list(custom.get("tags")),
        abstract=_str(item.get("abstract")),
        container_title=_str(item.get("container-title")),
        published=published,
        created_at=_timestamp(custom.get("created_at")),
        updated_at=_timestamp(custom.get("timestamp")),
        extra={k: v for k, v in item.items() if k not in _KNOWN_KEYS},
    )


def _str(value: Any) -> Optional[str]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _str_list(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(v for v in value if isinstance(v, str) and v.strip())


def _keywords(value: Any) -> tuple[str, ...]:
    # CSL-JSON allows a single delimited string as well as a list.
    if isinstance(value, str):
        return tuple(part.strip() for part in _KEYWORD_SPLIT_RE.split(value) if part.strip())
    return _str_list(value)


def _authors(value: Any) -> tuple[Author, ...]:
    if not isinstance(value, list):
        return ()
    authors: list[Author] = []
    for entry in value:
        if not isinstance(entry, Mapping):
            continue
        author = Author(
            family=_str(entry.get("family")),
            given=_str(entry.get("given")),
            literal=_str(entry.get("literal")),
        )
        if author.family or author.given or author.literal:
            authors.append(author)
    return tuple(authors)


def _date_parts(value: Any) -> tuple[int, ...]:
    if not isinstance(value, Mapping):
        return ()
    parts = value.get("date-parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], list):
        return ()
    out: list[int] = []
    for part in parts[0]:
        try:
            out.append(int(part))
        except (TypeError, ValueError):
            break
    return tuple(out)


def _timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return dt_parser.isoparse(value)
    except (ValueError, OverflowError):
        log.debug("Ignoring unparsable timestamp: %s", value)
        return None
