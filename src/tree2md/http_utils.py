"""HTTP utilities for fetching documents with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from tree2md.config import (
    TREE2MD_FETCH_BACKOFF_S,
    TREE2MD_FETCH_MAX_RETRIES,
    TREE2MD_FETCH_TIMEOUT_S,
    TREE2MD_USER_AGENT,
)
from tree2md.exceptions import DocumentNotFoundError, FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch text from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Exception class to raise on 404. Defaults to
            DocumentNotFoundError.
        on_404_message: Custom error message for 404 responses.

    Returns:
        The response body as text.

    Raises:
        FetchError (or the on_404 exception): If the fetch fails after all
            retries or returns 404.
    """
    timeout = httpx.Timeout(TREE2MD_FETCH_TIMEOUT_S)
    headers = {"User-Agent": TREE2MD_USER_AGENT}
    last_exc: Exception | None = None
    not_found_exc_class = on_404 or DocumentNotFoundError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc

        for attempt in range(TREE2MD_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    message = on_404_message or f"Resource not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except not_found_exc_class:
                raise
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < TREE2MD_FETCH_MAX_RETRIES:
                backoff = TREE2MD_FETCH_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
