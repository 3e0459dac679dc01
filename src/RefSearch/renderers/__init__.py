"""Output renderers for command results.

The module exports the OutputWriter base class for new output formats, and
a factory to instantiate a writer by format name.
"""

from __future__ import annotations

from typing import TextIO

from RefSearch.renderers.base import IdsOutputWriter, OutputWriter
from RefSearch.renderers.console import ConsoleOutputWriter, render_text
from RefSearch.renderers.json import JsonOutputWriter, render_json, render_reference

OUTPUT_FORMATS: tuple[str, ...] = ("pretty", "json", "ids")


def create_output_writer(fmt: str, stream: TextIO) -> OutputWriter:
    """Create the writer for an output format.

    Raises:
        ValueError: If the format is unknown.
    """
    if fmt == "pretty":
        return ConsoleOutputWriter(stream)
    if fmt == "json":
        return JsonOutputWriter(stream)
    if fmt == "ids":
        return IdsOutputWriter(stream)
    raise ValueError(f"Unknown output format: {fmt}")


__all__ = [
    "OUTPUT_FORMATS",
    "ConsoleOutputWriter",
    "IdsOutputWriter",
    "JsonOutputWriter",
    "OutputWriter",
    "create_output_writer",
    "render_json",
    "render_reference",
    "render_text",
]
