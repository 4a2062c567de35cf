"""Load serialized editor state JSON into document trees."""

from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import ValidationError

from tree2md.exceptions import ParseError
from tree2md.schemas import DocumentNode, ListType, NodeKind, TextFormat

# Bit flags of the serialized ``format`` field on text nodes.
_FORMAT_BITS: tuple[tuple[int, TextFormat], ...] = (
    (1, TextFormat.BOLD),
    (1 << 1, TextFormat.ITALIC),
    (1 << 2, TextFormat.STRIKETHROUGH),
    (1 << 4, TextFormat.CODE),
)

_KIND_BY_TYPE: dict[str, NodeKind] = {
    "heading": NodeKind.HEADING,
    "paragraph": NodeKind.PARAGRAPH,
    "list": NodeKind.LIST,
    "listitem": NodeKind.LIST_ITEM,
    "quote": NodeKind.QUOTE,
    "text": NodeKind.TEXT,
    "code-highlight": NodeKind.TEXT,
    "tab": NodeKind.TEXT,
    "linebreak": NodeKind.LINE_BREAK,
    "code": NodeKind.CODE,
    "link": NodeKind.LINK,
    "autolink": NodeKind.LINK,
}


def load_document_json(text: str) -> DocumentNode:
    """Parse a JSON document (editor state or native node tree)."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid document JSON: {exc}") from exc
    return load_document(data)


def load_document(data: Any) -> DocumentNode:
    """Build a document tree from decoded JSON.

    Accepts either serialized editor state (a mapping with a ``root`` node)
    or a mapping matching :class:`DocumentNode`.

    Raises:
        ParseError: If the data matches neither shape.
    """
    if not isinstance(data, Mapping):
        raise ParseError(f"Document must be a JSON object, got {type(data).__name__}")

    if "root" in data:
        root = data["root"]
        if not isinstance(root, Mapping):
            raise ParseError("Editor state 'root' must be a JSON object")
        return _convert_editor_node(root, path="root")

    try:
        return DocumentNode.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Invalid document tree: {exc}") from exc


def decode_format(bits: int) -> set[TextFormat]:
    """Decode a text format bitmask, ignoring unsupported flags."""
    return {fmt for bit, fmt in _FORMAT_BITS if bits & bit}


def _convert_editor_node(raw: Mapping[str, Any], *, path: str) -> DocumentNode:
    node_type = raw.get("type")
    if not isinstance(node_type, str):
        raise ParseError(f"Node at {path} has no 'type'")

    kind = _KIND_BY_TYPE.get(node_type, NodeKind.OTHER)
    raw_children = raw.get("children") or []
    if not isinstance(raw_children, list):
        raise ParseError(f"Node at {path} has non-list 'children'")

    children = []
    for index, child in enumerate(raw_children):
        if not isinstance(child, Mapping):
            raise ParseError(f"Child {index} of {path} is not a JSON object")
        children.append(_convert_editor_node(child, path=f"{path}.children[{index}]"))

    fields: dict[str, Any] = {"kind": kind, "children": children}
    if kind is NodeKind.HEADING:
        fields["tag"] = raw.get("tag")
    elif kind is NodeKind.LIST:
        fields["list_type"] = _list_type(raw)
    elif kind is NodeKind.TEXT:
        fields["text"] = "\t" if node_type == "tab" else raw.get("text", "")
        fields["formats"] = decode_format(_int_field(raw, "format", path))
    elif kind is NodeKind.LINK:
        fields["url"] = raw.get("url", "")

    try:
        return DocumentNode(**fields)
    except ValidationError as exc:
        raise ParseError(f"Invalid node at {path}: {exc}") from exc


def _list_type(raw: Mapping[str, Any]) -> ListType:
    if raw.get("tag") == "ol" or raw.get("listType") == "number":
        return ListType.ORDERED
    return ListType.UNORDERED


def _int_field(raw: Mapping[str, Any], name: str, path: str) -> int:
    value = raw.get(name, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Node at {path} has non-integer '{name}'")
    return value
