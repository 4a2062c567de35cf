"""Document tree models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """Closed set of node kinds the serializer dispatches on."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "listitem"
    QUOTE = "quote"
    TEXT = "text"
    LINE_BREAK = "linebreak"
    CODE = "code"
    LINK = "link"
    OTHER = "other"


class TextFormat(str, Enum):
    """Inline format flags carried by text nodes."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"


class ListType(str, Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


class DocumentNode(BaseModel):
    """A typed node in the document tree.

    Attributes:
        kind: Node kind.
        tag: Heading level tag (``h1``, ``h2``, ...). Only read for headings.
        list_type: Ordering of a list node.
        text: Raw content of a text node.
        formats: Active inline format flags of a text node.
        url: Target of a link node.
        children: Ordered child nodes.
    """

    kind: NodeKind
    tag: str | None = None
    list_type: ListType | None = None
    text: str = ""
    formats: set[TextFormat] = Field(default_factory=set)
    url: str | None = None
    children: list["DocumentNode"] = Field(default_factory=list)

    def has_format(self, fmt: TextFormat) -> bool:
        return fmt in self.formats

    def has_single_list_child(self) -> bool:
        """Return True if the only child of this node is a list."""
        return len(self.children) == 1 and self.children[0].kind is NodeKind.LIST

    def text_content(self) -> str:
        """Concatenated text of this node and its descendants."""
        if self.kind is NodeKind.TEXT:
            return self.text
        return "".join(child.text_content() for child in self.children)
