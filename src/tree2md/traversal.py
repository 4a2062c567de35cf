"""Flatten document trees into depth-annotated pre-order sequences."""

from __future__ import annotations

from typing import Sequence

from tree2md.exceptions import MalformedSequenceError
from tree2md.schemas import DocumentNode, TraversalEntry


def dfs(root: DocumentNode) -> list[TraversalEntry]:
    """Return the pre-order linearization of ``root``.

    The root itself is the first entry at depth 0; every child follows its
    parent at ``depth + 1``.
    """
    entries: list[TraversalEntry] = []
    stack: list[tuple[DocumentNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        entries.append(TraversalEntry(node=node, depth=depth))
        for child in reversed(node.children):
            stack.append((child, depth + 1))
    return entries


def validate_sequence(entries: Sequence[TraversalEntry]) -> None:
    """Check that ``entries`` is a valid pre-order depth sequence.

    Raises:
        MalformedSequenceError: If a depth is negative, descends by more than
            one level at a time, or rises above the first entry's depth.
    """
    if not entries:
        return

    base_depth = entries[0].depth
    previous_depth = base_depth
    for index, entry in enumerate(entries):
        depth = entry.depth
        if depth < 0:
            raise MalformedSequenceError(f"Entry {index} has negative depth {depth}")
        if depth < base_depth:
            raise MalformedSequenceError(
                f"Entry {index} at depth {depth} is shallower than the root depth {base_depth}"
            )
        if depth > previous_depth + 1:
            raise MalformedSequenceError(
                f"Entry {index} jumps from depth {previous_depth} to {depth}"
            )
        previous_depth = depth
