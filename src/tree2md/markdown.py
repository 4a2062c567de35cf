"""Serialize depth-annotated document sequences into Markdown."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from tree2md.config import TREE2MD_VALIDATE_SEQUENCE
from tree2md.exceptions import ConversionError, MalformedSequenceError
from tree2md.schemas import DocumentNode, ListType, NodeKind, TextFormat, TraversalEntry
from tree2md.traversal import dfs, validate_sequence

logger = logging.getLogger(__name__)

_LIST_INDENT = " " * 4
_CODE_FENCE = "```"

# Applied innermost first.
_FORMAT_MARKERS: tuple[tuple[TextFormat, str], ...] = (
    (TextFormat.CODE, "`"),
    (TextFormat.BOLD, "**"),
    (TextFormat.ITALIC, "*"),
    (TextFormat.STRIKETHROUGH, "~~"),
)

_HEADING_PREFIXES = {"h1": "# ", "h2": "## "}


@dataclass
class _LinkFrame:
    depth: int
    closing_text: str


@dataclass
class _ListFrame:
    depth: int
    list_type: ListType | None
    count: int = 0


@dataclass
class _BlockFrame:
    depth: int


@dataclass
class _SerializerState:
    validate: bool
    text: str = ""
    first_line_break_seen: bool = False
    links: list[_LinkFrame] = field(default_factory=list)
    lists: list[_ListFrame] = field(default_factory=list)
    quotes: list[_BlockFrame] = field(default_factory=list)
    codes: list[_BlockFrame] = field(default_factory=list)

    def append_line_break(self) -> None:
        if self.text or self.first_line_break_seen:
            self.text += "\n"


def convert_tree_to_markdown(root: DocumentNode, *, validate: bool | None = None) -> str:
    """Convert a document tree into Markdown.

    Parameters
    ----------
    root : DocumentNode
        Root of the tree. The root itself is visited at depth 0.
    validate : bool | None
        Validate the flattened sequence before serializing. Defaults to
        ``TREE2MD_VALIDATE_SEQUENCE``.
    """
    return convert_entries_to_markdown(dfs(root), validate=validate)


def convert_entries_to_markdown(
    entries: Sequence[TraversalEntry], *, validate: bool | None = None
) -> str:
    """Convert a pre-order ``(node, depth)`` sequence into Markdown.

    Opening markers are written when a node is visited. Closing markers for
    links, code blocks, lists and quotes are written once the next entry's
    depth drops to or below the depth their node was opened at.

    Raises
    ------
    MalformedSequenceError
        Only when validation is enabled and the sequence breaks pre-order
        depth discipline.
    """
    if validate is None:
        validate = TREE2MD_VALIDATE_SEQUENCE
    if validate:
        validate_sequence(entries)

    state = _SerializerState(validate=validate)
    for index, entry in enumerate(entries):
        _emit_node(state, entry)
        next_depth = entries[index + 1].depth if index + 1 < len(entries) else -math.inf
        _close_frames(state, next_depth)

    logger.debug("Serialized %d entries into %d characters", len(entries), len(state.text))
    return state.text


def encode_url(url: str) -> str:
    """Percent-encode characters that would end a Markdown link target."""
    return url.replace(")", "%29")


def encode_url_title(text: str) -> str:
    """Escape characters that would end a Markdown link label."""
    return text.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]")


def format_text(node: DocumentNode, *, in_link: bool = False) -> str:
    """Render a text node with its inline format markers."""
    formatted = node.text
    if in_link:
        formatted = encode_url_title(formatted)
    for fmt, marker in _FORMAT_MARKERS:
        if node.has_format(fmt):
            formatted = f"{marker}{formatted}{marker}"
    return formatted


def _emit_node(state: _SerializerState, entry: TraversalEntry) -> None:
    node = entry.node
    kind = node.kind

    if kind is NodeKind.HEADING:
        prefix = _HEADING_PREFIXES.get(node.tag or "")
        if prefix:
            state.append_line_break()
            state.text += prefix
    elif kind is NodeKind.LIST:
        state.lists.append(_ListFrame(depth=entry.depth, list_type=node.list_type))
    elif kind is NodeKind.LIST_ITEM:
        if not node.has_single_list_child():
            _emit_list_marker(state)
    elif kind is NodeKind.TEXT:
        state.text += format_text(node, in_link=bool(state.links))
    elif kind is NodeKind.PARAGRAPH:
        state.append_line_break()
        state.first_line_break_seen = True
    elif kind is NodeKind.QUOTE:
        state.append_line_break()
        state.text += "> "
        state.quotes.append(_BlockFrame(depth=entry.depth))
    elif kind is NodeKind.LINE_BREAK:
        state.append_line_break()
    elif kind is NodeKind.CODE:
        state.append_line_break()
        state.text += _CODE_FENCE + "\n"
        state.codes.append(_BlockFrame(depth=entry.depth))
    elif kind is NodeKind.LINK:
        state.text += "["
        # Link content arrives as descendant text nodes.
        closing_text = f"]({encode_url(node.url or '')})"
        state.links.append(_LinkFrame(depth=entry.depth, closing_text=closing_text))
    elif kind is NodeKind.OTHER:
        pass
    else:
        raise ConversionError(f"Unhandled node kind: {kind!r}")


def _emit_list_marker(state: _SerializerState) -> None:
    if not state.lists:
        if state.validate:
            raise MalformedSequenceError("List item found outside of a list")
        logger.warning("List item found outside of a list; emitting a top-level bullet")
        state.append_line_break()
        state.text += "- "
        return

    state.append_line_break()
    current = state.lists[-1]
    indent = _LIST_INDENT * (len(state.lists) - 1)
    if current.list_type is ListType.ORDERED:
        current.count += 1
        state.text += f"{indent}{current.count}. "
    else:
        state.text += f"{indent}- "


def _close_frames(state: _SerializerState, next_depth: float) -> None:
    # Links are the narrowest scope, so at most one closes per position.
    if state.links and next_depth <= state.links[-1].depth:
        state.text += state.links.pop().closing_text

    while state.codes and next_depth <= state.codes[-1].depth:
        state.codes.pop()
        state.text += "\n" + _CODE_FENCE

    while state.lists and next_depth <= state.lists[-1].depth:
        state.lists.pop()

    while state.quotes and next_depth <= state.quotes[-1].depth:
        # Keeps following text out of the quote.
        state.quotes.pop()
        state.text += "\n"
