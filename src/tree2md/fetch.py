"""Read document sources from local files or URLs, caching remote ones."""

from __future__ import annotations

import logging
from pathlib import Path

from tree2md.cache_utils import (
    cache_dir_for,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    write_text_async,
)
from tree2md.config import TREE2MD_CACHE_PATH, TREE2MD_CACHE_TTL_SECONDS
from tree2md.exceptions import DocumentNotFoundError
from tree2md.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)

_URL_PREFIXES = ("http://", "https://")


def is_url(source: str) -> bool:
    return source.lower().startswith(_URL_PREFIXES)


async def read_source(source: str, *, use_cache: bool = True) -> str:
    """Return the raw JSON text of a document source.

    Args:
        source: An ``http(s)://`` URL or a local file path.
        use_cache: Whether to use a cached copy of remote documents.

    Raises:
        DocumentNotFoundError: If the file or URL does not exist.
        FetchError: If a network error occurs.
    """
    if is_url(source):
        return await fetch_document_json(source, use_cache=use_cache)

    path = Path(source).expanduser()
    if not path.is_file():
        raise DocumentNotFoundError(f"Document file not found: {path}")
    return await read_text_async(path)


async def fetch_document_json(url: str, *, use_cache: bool = True) -> str:
    """Fetch a JSON document and cache it locally.

    Args:
        url: URL of the document.
        use_cache: Whether to use a cached copy if one is fresh.

    Returns:
        The document JSON as a string.
    """
    cache_dir = cache_dir_for(url, TREE2MD_CACHE_PATH)
    document_path = cache_dir / "document.json"

    if use_cache and is_cache_fresh(document_path, TREE2MD_CACHE_TTL_SECONDS):
        logger.debug("Using cached document for %s", url)
        return await read_text_async(document_path)

    text = await fetch_with_retries(
        url, on_404_message=f"No document found at {url}"
    )
    await mkdir_async(cache_dir, parents=True, exist_ok=True)
    await write_text_async(document_path, text)
    return text
