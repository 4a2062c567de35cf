"""Format serialized documents into a summary and Markdown output."""

from __future__ import annotations

from collections import Counter

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from tree2md.schemas import ConversionResult, NodeKind, TraversalEntry

_COUNTED_KINDS: tuple[tuple[NodeKind, str], ...] = (
    (NodeKind.HEADING, "Headings"),
    (NodeKind.PARAGRAPH, "Paragraphs"),
    (NodeKind.LIST, "Lists"),
    (NodeKind.LINK, "Links"),
    (NodeKind.CODE, "Code blocks"),
    (NodeKind.QUOTE, "Quotes"),
)


def format_document(
    *,
    markdown: str,
    entries: list[TraversalEntry],
    source: str | None = None,
) -> ConversionResult:
    """Create the summary for a serialized document."""
    counts = Counter(entry.node.kind for entry in entries)
    text_characters = len(entries[0].node.text_content()) if entries else 0

    summary_lines = []
    if source:
        summary_lines.append(f"Source: {source}")
    summary_lines.append(f"Nodes: {len(entries)}")
    for kind, label in _COUNTED_KINDS:
        if counts[kind]:
            summary_lines.append(f"{label}: {counts[kind]}")
    summary_lines.append(f"Text characters: {text_characters}")
    summary_lines.append(f"Characters: {len(markdown)}")

    token_estimate = _format_token_count(markdown)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    return ConversionResult(summary="\n".join(summary_lines), markdown=markdown)


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
