"""JSON output renderers.

Renders references back into CSL-JSON shaped objects, with match metadata
attached when the page came from a non-blank query.
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from RefSearch.core.models import Reference
from RefSearch.renderers.base import OutputWriter
from RefSearch.search.types import MatchResult
from RefSearch.services.search import SearchPage


def render_reference(ref: Reference) -> dict[str, Any]:
    """Render one reference as a CSL-JSON style mapping.

    Empty optional fields are omitted.
    """
    d: dict[str, Any] = dict(ref.extra)
    d["id"] = ref.id
    optional = {
        "title": ref.title,
        "DOI": ref.doi,
        "PMID": ref.pmid,
        "PMCID": ref.pmcid,
        "ISBN": ref.isbn,
        "URL": ref.url,
        "abstract": ref.abstract,
        "container-title": ref.container_title,
    }
    d.update({k: v for k, v in optional.items() if v})
    if ref.authors:
        d["author"] = [
            {k: v for k, v in (("family", a.family), ("given", a.given), ("literal", a.literal)) if v}
            for a in ref.authors
        ]
    if ref.published:
        d["issued"] = {"date-parts": [list(ref.published)]}
    elif ref.year is not None:
        d["issued"] = {"date-parts": [[ref.year]]}
    if ref.keywords:
        d["keyword"] = list(ref.keywords)
    custom: dict[str, Any] = {}
    if ref.tags:
        custom["tags"] = list(ref.tags)
    if ref.additional_urls:
        custom["additional_urls"] = list(ref.additional_urls)
    if ref.created_at:
        custom["created_at"] = ref.created_at.isoformat()
    if ref.updated_at:
        custom["timestamp"] = ref.updated_at.isoformat()
    if custom:
        d["custom"] = {**d.get("custom", {}), **custom}
    return d


def render_match(result: MatchResult) -> dict[str, Any]:
    """Summarize why a record matched."""
    return {
        "strength": result.overall_strength.value,
        "score": result.score,
        "tokens": [
            {
                "token": tm.token.raw,
                "surfaces": [m.surface.value for m in tm.matches],
                "exact": tm.is_exact,
            }
            for tm in result.token_matches
        ],
    }


def render_json(page: SearchPage) -> dict[str, Any]:
    """Render a page into a JSON-serializable object."""
    items = [render_reference(ref) for ref in page.items]
    if page.results:
        for item, result in zip(items, page.results):
            item["_match"] = render_match(result)
    return {
        "items": items,
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
        "nextOffset": page.next_offset,
    }


class JsonOutputWriter(OutputWriter):
    """Write the page as one JSON document."""

    def __init__(self, stream: TextIO, indent: int = 2) -> None:
        super().__init__(stream)
        self.indent = indent

    def write_page(self, page: SearchPage, query: str) -> None:
        self.stream.write(json.dumps(render_json(page), indent=self.indent, ensure_ascii=False) + "\n")
