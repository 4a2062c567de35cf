"""Tests for editor state loading."""

from __future__ import annotations

import json

import pytest

from tree2md.editor_state import decode_format, load_document, load_document_json
from tree2md.exceptions import ParseError
from tree2md.markdown import convert_tree_to_markdown
from tree2md.schemas import ListType, NodeKind, TextFormat


class TestDecodeFormat:
    """Tests for decode_format function."""

    def test_zero_is_plain(self) -> None:
        """No bits means no formats."""
        assert decode_format(0) == set()

    def test_combined_bits(self) -> None:
        """Bold, italic, strikethrough and code bits combine."""
        assert decode_format(1 | 2 | 4 | 16) == {
            TextFormat.BOLD,
            TextFormat.ITALIC,
            TextFormat.STRIKETHROUGH,
            TextFormat.CODE,
        }

    def test_ignores_unsupported_bits(self) -> None:
        """Underline and other flags are dropped."""
        assert decode_format(8 | 32 | 64 | 2) == {TextFormat.ITALIC}


class TestLoadDocument:
    """Tests for load_document function."""

    def test_maps_editor_node_types(self, sample_editor_state: dict) -> None:
        """Editor node types map onto document node kinds."""
        doc = load_document(sample_editor_state)

        assert doc.kind is NodeKind.OTHER
        kinds = [child.kind for child in doc.children]
        assert kinds == [
            NodeKind.HEADING,
            NodeKind.PARAGRAPH,
            NodeKind.LIST,
            NodeKind.QUOTE,
            NodeKind.CODE,
        ]

    def test_reads_node_attributes(self, sample_editor_state: dict) -> None:
        """Heading tags, list types, link URLs and text formats are kept."""
        heading, paragraph, ordered, _, code = load_document(sample_editor_state).children

        assert heading.tag == "h1"
        assert ordered.list_type is ListType.ORDERED
        link = paragraph.children[3]
        assert link.kind is NodeKind.LINK
        assert link.url == "https://example.com/a_(b)"
        assert link.children[0].formats == {TextFormat.ITALIC}
        assert paragraph.children[1].formats == {TextFormat.BOLD}
        assert code.children[2].text == "\t"

    def test_bullet_and_check_lists_are_unordered(self) -> None:
        """Only numbered lists are ordered."""
        for list_type in ("bullet", "check"):
            data = {"root": {"type": "root", "children": [{"type": "list", "listType": list_type}]}}
            assert load_document(data).children[0].list_type is ListType.UNORDERED

    def test_autolink_is_a_link(self) -> None:
        """Autolinks load as links."""
        data = {"root": {"type": "root", "children": [{"type": "autolink", "url": "https://a"}]}}
        child = load_document(data).children[0]

        assert child.kind is NodeKind.LINK
        assert child.url == "https://a"

    def test_unknown_types_keep_children(self) -> None:
        """Unknown node types become transparent containers."""
        data = {
            "root": {
                "type": "root",
                "children": [
                    {"type": "table", "children": [{"type": "text", "text": "cell"}]}
                ],
            }
        }
        table = load_document(data).children[0]

        assert table.kind is NodeKind.OTHER
        assert table.children[0].text == "cell"

    def test_accepts_native_tree(self) -> None:
        """A mapping shaped like DocumentNode is validated directly."""
        data = {
            "kind": "other",
            "children": [
                {"kind": "heading", "tag": "h2", "children": [{"kind": "text", "text": "Hi"}]}
            ],
        }
        assert convert_tree_to_markdown(load_document(data)) == "## Hi"

    def test_rejects_non_object(self) -> None:
        """Top-level JSON must be an object."""
        with pytest.raises(ParseError, match="JSON object"):
            load_document([1, 2])

    def test_rejects_node_without_type(self) -> None:
        """Editor nodes must carry a type."""
        with pytest.raises(ParseError, match="has no 'type'"):
            load_document({"root": {"children": []}})

    def test_rejects_non_list_children(self) -> None:
        """Children must be a list."""
        with pytest.raises(ParseError, match="non-list 'children'"):
            load_document({"root": {"type": "root", "children": {"type": "text"}}})

    def test_rejects_non_integer_format(self) -> None:
        """Text formats must be integer bitmasks."""
        data = {"root": {"type": "root", "children": [{"type": "text", "format": "bold"}]}}
        with pytest.raises(ParseError, match="non-integer 'format'"):
            load_document(data)

    def test_rejects_invalid_native_tree(self) -> None:
        """Invalid native trees raise ParseError."""
        with pytest.raises(ParseError, match="Invalid document tree"):
            load_document({"kind": "not-a-kind"})


class TestLoadDocumentJson:
    """Tests for load_document_json function."""

    def test_converts_sample_to_markdown(self, sample_editor_state: dict) -> None:
        """The sample editor state serializes to the expected Markdown."""
        doc = load_document_json(json.dumps(sample_editor_state))

        assert convert_tree_to_markdown(doc) == (
            "# Title\n"
            "Hello **world**\n"
            "[*docs*](https://example.com/a_(b%29)\n"
            "1. one\n"
            "2. two\n"
            "> quoted\n"
            "\n"
            "```\n"
            "print(1)\n"
            "\tpass\n"
            "```"
        )

    def test_rejects_invalid_json(self) -> None:
        """Malformed JSON raises ParseError."""
        with pytest.raises(ParseError, match="Invalid document JSON"):
            load_document_json("{not json")
