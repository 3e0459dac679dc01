"""Record-store boundary for RefSearch.

The search engine consumes a read-only snapshot of references; this package
only knows how to read that snapshot from a CSL-JSON library file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from RefSearch.core.models import Reference
from RefSearch.storage.library import LibraryError, load_library, reference_from_csl
from RefSearch.utils.log import log

if TYPE_CHECKING:
    from RefSearch.config import AppConfig


def create_snapshot(config: AppConfig) -> tuple[Reference, ...]:
    """Load the configured library into an immutable snapshot.

    Raises:
        LibraryError: If the library file cannot be read.
    """
    path = config.library.resolved_path
    log.info("Loading library: %s", path)
    return load_library(path)


__all__ = [
    "LibraryError",
    "create_snapshot",
    "load_library",
    "reference_from_csl",
]
