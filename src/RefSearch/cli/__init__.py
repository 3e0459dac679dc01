"""CLI package for RefSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from RefSearch.cli.runner import CommandRunner
from RefSearch.cli.ui import cli


def main() -> None:
    """Run the RefSearch CLI.

    Entry point referenced by the console script in pyproject.toml.
    """
    cli()
