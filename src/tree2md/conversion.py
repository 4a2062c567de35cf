"""Conversion pipeline for document sources -> Markdown."""

from __future__ import annotations

from dataclasses import dataclass, field

from tree2md.config import TREE2MD_VALIDATE_SEQUENCE
from tree2md.editor_state import load_document_json
from tree2md.fetch import read_source
from tree2md.markdown import convert_entries_to_markdown
from tree2md.output_formatter import format_document
from tree2md.schemas import ConversionResult
from tree2md.traversal import dfs


@dataclass
class ConversionOptions:
    """Options for document conversion.

    Attributes:
        validate: If True, reject traversal sequences that break pre-order
            depth discipline instead of serializing them best-effort.
        use_cache: If True, reuse cached copies of remote documents.
    """

    validate: bool = field(default_factory=lambda: TREE2MD_VALIDATE_SEQUENCE)
    use_cache: bool = True


async def convert_source(
    source: str, options: ConversionOptions | None = None
) -> ConversionResult:
    """Load a document from a file or URL and serialize it to Markdown.

    Args:
        source: Local path or ``http(s)://`` URL of a JSON document.
        options: Processing options. Uses defaults if None.

    Returns:
        The Markdown together with a short summary of the document.

    Raises:
        FetchError: If the source cannot be read.
        ParseError: If the source is not a valid document.
    """
    opts = options or ConversionOptions()
    raw = await read_source(source, use_cache=opts.use_cache)
    root = load_document_json(raw)
    entries = dfs(root)
    markdown = convert_entries_to_markdown(entries, validate=opts.validate)
    return format_document(markdown=markdown, entries=entries, source=source)
