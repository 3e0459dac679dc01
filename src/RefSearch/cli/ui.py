"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to their
runners.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from RefSearch.cli.runner import CommandRunner
from RefSearch.config import LibraryConfig, load_config
from RefSearch.pagination import SEARCH_SORT_FIELDS, SORT_ORDERS
from RefSearch.renderers import OUTPUT_FORMATS

_SORT_CHOICES = SEARCH_SORT_FIELDS + ("pub", "mod", "add", "rel")

SEARCH_HELP_EPILOG = """\b
QUERY SYNTAX
  Free text      machine learning       Search all fields (AND logic)
  Phrase         "machine learning"     Exact phrase match
  Field          author:Smith           Search one field
  Field+Phrase   author:"John Smith"    Field with phrase

\b
FIELDS
  author, title, year, doi, pmid, pmcid, url, keyword, tag

\b
CASE SENSITIVITY
  Consecutive uppercase (2+ letters) is case-sensitive:
    AI    matches "AI therapy", not "ai therapy"
    RNA   matches "mRNA synthesis", not "mrna synthesis"
  Other text is case-insensitive:
    api   matches "API", "api", "Api"
"""


@click.group(help="RefSearch: search a CSL-JSON reference library.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML file whose keys override the packaged default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config so
    that REFSEARCH_* overrides can live there.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("search", epilog=SEARCH_HELP_EPILOG)
@click.argument("query", nargs=-1)
@click.option("--library", "library_path", type=click.Path(path_type=Path, dir_okay=False), default=None,
              help="Library file to search instead of the configured one.")
@click.option("--sort", type=click.Choice(_SORT_CHOICES), default=None, help="Sort field (default from config).")
@click.option("--order", type=click.Choice(SORT_ORDERS), default=None, help="Sort order (default from config).")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Maximum results; 0 for no limit.")
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True, help="Results to skip.")
@click.option("--format", "fmt", type=click.Choice(OUTPUT_FORMATS), default="pretty", show_default=True,
              help="Output format.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: tuple[str, ...],
    library_path: Optional[Path],
    sort: Optional[str],
    order: Optional[str],
    limit: Optional[int],
    offset: int,
    fmt: str,
) -> None:
    """Search references matching QUERY; an empty query lists everything."""
    cfg = ctx.obj
    if library_path is not None:
        cfg = replace(cfg, library=LibraryConfig(path=str(library_path)))
    runner = CommandRunner(cfg)
    runner.run_search(
        action=ctx.command.name,
        query=" ".join(query),
        stream=click.get_text_stream("stdout"),
        fmt=fmt,
        sort=sort,
        order=order,
        limit=limit,
        offset=offset,
    )
