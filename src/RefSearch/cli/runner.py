"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Optional, TextIO

import click

from RefSearch.cli.commands import SearchCommand
from RefSearch.config import AppConfig
from RefSearch.pagination import resolve_sort_alias
from RefSearch.renderers import create_output_writer
from RefSearch.services import create_search_service
from RefSearch.storage import create_snapshot
from RefSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation, and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_search(
        self,
        action: str,
        query: str,
        *,
        stream: TextIO,
        fmt: str = "pretty",
        sort: Optional[str] = None,
        order: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> None:
        """Execute the search command.

        Unset options fall back to the `search` config section.

        Args:
            action: The CLI command name (e.g., 'search').
            query: Raw query string.
            stream: Destination for rendered results.
            fmt: Output format name.
            sort: Sort field or alias.
            order: Sort order.
            limit: Page size; 0 means unlimited.
            offset: Number of results to skip.

        Raises:
            click.Abort: When the search fails.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path is not None:
            log.debug("Writing log file: %s", log_path)
        try:
            records = create_snapshot(self.config)
            command = SearchCommand(
                search_service=create_search_service(records),
                output_writer=create_output_writer(fmt, stream),
                sort=resolve_sort_alias(sort) if sort else self.config.search.sort,
                order=order or self.config.search.order,
                limit=self.config.search.limit if limit is None else limit,
                offset=offset,
            )
            command.execute(query)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
