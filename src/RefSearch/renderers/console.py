"""Human-readable text output."""

from __future__ import annotations

from typing import Iterable

from RefSearch.core.models import Author, Reference
from RefSearch.renderers.base import OutputWriter
from RefSearch.services.search import SearchPage


def _fmt_author(author: Author) -> str:
    """Format as "Family, G." or the literal name."""
    if author.literal:
        return author.literal
    family = author.family or ""
    if author.given:
        return f"{family}, {author.given[0]}." if family else author.given
    return family


def render_text(references: Iterable[Reference]) -> str:
    """Render references into a text block, one paragraph per reference.

    Args:
        references: References in display order.

    Returns:
        The formatted text, or an empty string when there is nothing to show.
    """
    blocks: list[str] = []
    for ref in references:
        lines = [f"[{ref.id}] {ref.title}" if ref.title else f"[{ref.id}]"]
        if ref.authors:
            lines.append(f"  Authors: {'; '.join(_fmt_author(a) for a in ref.authors)}")
        lines.append(f"  Year: {ref.year if ref.year is not None else '(no year)'}")
        if ref.container_title:
            lines.append(f"  Journal: {ref.container_title}")
        if ref.doi:
            lines.append(f"  DOI: {ref.doi}")
        if ref.pmid:
            lines.append(f"  PMID: {ref.pmid}")
        if ref.pmcid:
            lines.append(f"  PMCID: {ref.pmcid}")
        if ref.url:
            lines.append(f"  URL: {ref.url}")
        if ref.tags:
            lines.append(f"  Tags: {', '.join(ref.tags)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


class ConsoleOutputWriter(OutputWriter):
    """Write references as readable text followed by a short footer."""

    def write_page(self, page: SearchPage, query: str) -> None:
        text = render_text(page.items)
        if text:
            self.stream.write(text + "\n")
        if page.next_offset is not None:
            shown_to = page.offset + len(page.items)
            self.stream.write(f"\n# showing {page.offset + 1}-{shown_to} of {page.total}; next offset: {page.next_offset}\n")
