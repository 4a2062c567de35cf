"""tree2md: serialize document trees into Markdown."""

from tree2md.conversion import ConversionOptions, convert_source
from tree2md.editor_state import load_document, load_document_json
from tree2md.exceptions import (
    ConversionError,
    DocumentNotFoundError,
    FetchError,
    MalformedSequenceError,
    ParseError,
    Tree2mdError,
)
from tree2md.markdown import convert_entries_to_markdown, convert_tree_to_markdown
from tree2md.schemas import (
    ConversionResult,
    DocumentNode,
    ListType,
    NodeKind,
    TextFormat,
    TraversalEntry,
)
from tree2md.traversal import dfs, validate_sequence

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "DocumentNode",
    "DocumentNotFoundError",
    "FetchError",
    "ListType",
    "MalformedSequenceError",
    "NodeKind",
    "ParseError",
    "TextFormat",
    "TraversalEntry",
    "Tree2mdError",
    "convert_entries_to_markdown",
    "convert_source",
    "convert_tree_to_markdown",
    "dfs",
    "load_document",
    "load_document_json",
    "validate_sequence",
]
