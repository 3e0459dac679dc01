"""Base classes for output writers.

Separates control flow from output logic: commands hand a `SearchPage` to
a writer and never format records themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from RefSearch.services.search import SearchPage


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    @abstractmethod
    def write_page(self, page: SearchPage, query: str) -> None:
        """Write one page of search results.

        Args:
            page: Results to render.
            query: The query that produced them.
        """

    def finalize(self) -> None:
        """Flush buffered output."""
        self.stream.flush()


class IdsOutputWriter(OutputWriter):
    """Write one reference id per line."""

    def write_page(self, page: SearchPage, query: str) -> None:
        for item in page.items:
            self.stream.write(f"{item.id}\n")
