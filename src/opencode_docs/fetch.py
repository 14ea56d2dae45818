"""Page fetch collaborator used by discovery and scraping."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import httpx

from opencode_docs.http_utils import fetch_with_retries

PageFetcher = Callable[[str], Awaitable[str]]
"""Async callable returning the HTML at a URL, raising FetchError on failure."""


def make_fetcher(client: httpx.AsyncClient | None = None) -> PageFetcher:
    """Bind ``fetch_with_retries`` to a shared client.

    Args:
        client: Client reused for every request. When omitted, each request
            opens its own client.

    Returns:
        A ``PageFetcher``.
    """

    async def fetch_page(url: str) -> str:
        return await fetch_with_retries(url, client=client)

    return fetch_page
