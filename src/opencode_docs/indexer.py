"""Build a full docs index: discovery, then one scrape per page."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx
from bs4.builder import ParserRejectedMarkup

from opencode_docs.config import (
    FALLBACK_INDEX_VERSION,
    INDEX_VERSION,
    OPENCODE_DOCS_BASE_URL,
    OPENCODE_DOCS_REQUEST_DELAY_S,
    OPENCODE_DOCS_SITE_URL,
)
from opencode_docs.discovery import DOCS_ROOT, discover_pages
from opencode_docs.exceptions import BuildFailure, FetchError
from opencode_docs.fetch import PageFetcher, make_fetcher
from opencode_docs.html_parser import now_ms, parse_page
from opencode_docs.http_utils import create_client
from opencode_docs.schemas import DocsIndex, Heading, Page

logger = logging.getLogger(__name__)

# Raised by bs4, the markdown adapter or pydantic on markup that cannot be
# turned into a Page. pydantic.ValidationError is a ValueError.
PARSE_ERRORS: Final[tuple[type[Exception], ...]] = (
    ValueError,
    TypeError,
    AttributeError,
    ParserRejectedMarkup,
)

_FALLBACK_CONTENT: Final[str] = """# OpenCode Documentation

OpenCode is an open source AI coding agent. It's available as a terminal-based interface, desktop app, or IDE extension.

## Installation

```bash
curl -fsSL https://opencode.ai/install | bash
```

## Key Features

- Terminal-based UI (TUI)
- CLI for automation
- IDE extension
- MCP server support
- Custom tools and agents
- GitHub and GitLab integration

For full documentation, visit https://opencode.ai/docs/"""


async def scrape_page(path: str, fetch: PageFetcher) -> Page | None:
    """Fetch and normalize a single page.

    Returns:
        The Page, or None if it could not be fetched or parsed. The failure
        is logged.
    """
    url = f"{OPENCODE_DOCS_SITE_URL}{path}"
    try:
        logger.info("Scraping: %s", url)
        html = await fetch(url)
        return parse_page(path, html)
    except (FetchError, httpx.HTTPError) as exc:
        logger.error("Failed to scrape %s: %s", url, exc)
    except PARSE_ERRORS:
        logger.exception("Failed to parse %s", url)
    return None


async def build_index(
    *,
    fetch: PageFetcher | None = None,
    delay_s: float = OPENCODE_DOCS_REQUEST_DELAY_S,
) -> DocsIndex:
    """Discover and scrape every docs page into a new index.

    Pages are fetched one at a time with ``delay_s`` between requests to
    keep the load on the docs site low.

    Args:
        fetch: Page fetch collaborator. When omitted, a pooled httpx client
            is opened for the duration of the build.
        delay_s: Pause after each page request, in seconds.

    Returns:
        The new index, pages in discovery order.

    Raises:
        BuildFailure: If no page could be scraped.
    """
    if fetch is None:
        async with create_client() as client:
            return await _build(make_fetcher(client), delay_s)
    return await _build(fetch, delay_s)


async def _build(fetch: PageFetcher, delay_s: float) -> DocsIndex:
    paths = await discover_pages(fetch)

    pages: list[Page] = []
    for path in paths:
        page = await scrape_page(path, fetch)
        if page:
            pages.append(page)
        await asyncio.sleep(delay_s)

    if not pages:
        raise BuildFailure(f"No pages could be scraped from {OPENCODE_DOCS_BASE_URL}")

    logger.info("Built index with %d of %d pages", len(pages), len(paths))
    return DocsIndex(
        pages=tuple(pages),
        version=INDEX_VERSION,
        updated_at=now_ms(),
        base_url=OPENCODE_DOCS_BASE_URL,
    )


def create_fallback_index() -> DocsIndex:
    """Minimal embedded index served when no build has ever succeeded."""
    timestamp = now_ms()
    page = Page(
        path=DOCS_ROOT,
        title="OpenCode Documentation",
        url=f"{OPENCODE_DOCS_SITE_URL}{DOCS_ROOT}",
        content=_FALLBACK_CONTENT,
        headings=(
            Heading(level=1, text="OpenCode Documentation", id="opencode-documentation"),
            Heading(level=2, text="Installation", id="installation"),
            Heading(level=2, text="Key Features", id="key-features"),
        ),
        category="General",
        scraped_at=timestamp,
    )
    return DocsIndex(
        pages=(page,),
        version=FALLBACK_INDEX_VERSION,
        updated_at=timestamp,
        base_url=OPENCODE_DOCS_BASE_URL,
    )
