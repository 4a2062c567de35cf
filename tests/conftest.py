"""Test setup for tree2md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_editor_state() -> dict:
    """Serialized editor state covering every supported node type."""
    return {
        "root": {
            "type": "root",
            "children": [
                {
                    "type": "heading",
                    "tag": "h1",
                    "children": [{"type": "text", "text": "Title", "format": 0}],
                },
                {
                    "type": "paragraph",
                    "children": [
                        {"type": "text", "text": "Hello ", "format": 0},
                        {"type": "text", "text": "world", "format": 1},
                        {"type": "linebreak"},
                        {
                            "type": "link",
                            "url": "https://example.com/a_(b)",
                            "children": [{"type": "text", "text": "docs", "format": 2}],
                        },
                    ],
                },
                {
                    "type": "list",
                    "listType": "number",
                    "tag": "ol",
                    "children": [
                        {
                            "type": "listitem",
                            "children": [{"type": "text", "text": "one", "format": 0}],
                        },
                        {
                            "type": "listitem",
                            "children": [{"type": "text", "text": "two", "format": 0}],
                        },
                    ],
                },
                {
                    "type": "quote",
                    "children": [{"type": "text", "text": "quoted", "format": 0}],
                },
                {
                    "type": "code",
                    "language": "python",
                    "children": [
                        {"type": "code-highlight", "text": "print(1)"},
                        {"type": "linebreak"},
                        {"type": "tab"},
                        {"type": "code-highlight", "text": "pass"},
                    ],
                },
            ],
        }
    }
