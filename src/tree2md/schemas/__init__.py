"""Shared schemas for tree2md."""

from tree2md.schemas.conversion import ConversionResult
from tree2md.schemas.nodes import DocumentNode, ListType, NodeKind, TextFormat
from tree2md.schemas.traversal import TraversalEntry

__all__ = [
    "ConversionResult",
    "DocumentNode",
    "ListType",
    "NodeKind",
    "TextFormat",
    "TraversalEntry",
]
