"""Command line entry point for tree2md."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from tree2md.conversion import ConversionOptions, convert_source
from tree2md.exceptions import Tree2mdError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree2md", description="Convert a JSON document tree into Markdown."
    )
    parser.add_argument("source", help="Path or http(s) URL of an editor state or document JSON file")
    parser.add_argument("-o", "--output", help="Write Markdown to this file instead of stdout")
    parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Reject malformed traversal sequences instead of serializing best-effort",
    )
    parser.add_argument("--summary", action="store_true", help="Print a document summary to stderr")
    parser.add_argument("--no-cache", action="store_true", help="Always refetch remote documents")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = ConversionOptions(use_cache=not args.no_cache)
    if args.validate is not None:
        options.validate = args.validate

    try:
        result = asyncio.run(convert_source(args.source, options))
    except Tree2mdError as exc:
        logger.debug("Conversion of %s failed", args.source, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(result.summary, file=sys.stderr)

    if args.output:
        Path(args.output).write_text(result.markdown, encoding="utf-8")
    else:
        sys.stdout.write(result.markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())
