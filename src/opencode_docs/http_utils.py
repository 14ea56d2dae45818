"""HTTP utilities for fetching documentation pages with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from opencode_docs.config import (
    OPENCODE_DOCS_FETCH_BACKOFF_S,
    OPENCODE_DOCS_FETCH_MAX_RETRIES,
    OPENCODE_DOCS_FETCH_TIMEOUT_S,
    OPENCODE_DOCS_USER_AGENT,
)
from opencode_docs.exceptions import FetchError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def create_client() -> httpx.AsyncClient:
    """Create the pooled client used for a whole index build."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(OPENCODE_DOCS_FETCH_TIMEOUT_S),
        headers={"User-Agent": OPENCODE_DOCS_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch a page as text, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The response body as text.

    Raises:
        FetchError: If the response is not successful, or the request keeps
            failing after all retries. ``status_code`` is set whenever a
            response was received.
    """
    last_exc: Exception | None = None
    last_status: int | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        nonlocal last_exc, last_status

        for attempt in range(OPENCODE_DOCS_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code in RETRY_STATUS_CODES:
                    last_status = response.status_code
                    last_exc = FetchError(
                        f"HTTP {response.status_code} from {url}",
                        status_code=response.status_code,
                    )
                elif response.status_code >= 400:
                    raise FetchError(
                        f"Failed to fetch {url}: {response.status_code}",
                        status_code=response.status_code,
                    )
                else:
                    return response.text
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < OPENCODE_DOCS_FETCH_MAX_RETRIES:
                backoff = OPENCODE_DOCS_FETCH_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}", status_code=last_status)

    if client is not None:
        return await do_fetch(client)

    async with create_client() as new_client:
        return await do_fetch(new_client)
