"""Traversal entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tree2md.schemas.nodes import DocumentNode


class TraversalEntry(BaseModel):
    """A node paired with its distance from the tree root."""

    model_config = ConfigDict(frozen=True)

    node: DocumentNode
    depth: int
