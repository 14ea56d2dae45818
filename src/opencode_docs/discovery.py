"""Discover documentation page paths from the site navigation."""

from __future__ import annotations

import logging
from typing import Final

import httpx
from bs4 import BeautifulSoup

from opencode_docs.config import OPENCODE_DOCS_BASE_URL, OPENCODE_DOCS_PREFIX
from opencode_docs.exceptions import FetchError
from opencode_docs.fetch import PageFetcher

logger = logging.getLogger(__name__)

DOCS_ROOT: Final[str] = f"{OPENCODE_DOCS_PREFIX}/"

# Used when the docs index page cannot be fetched.
FALLBACK_PATHS: Final[tuple[str, ...]] = (
    f"{OPENCODE_DOCS_PREFIX}/config",
    f"{OPENCODE_DOCS_PREFIX}/providers",
    f"{OPENCODE_DOCS_PREFIX}/network",
    f"{OPENCODE_DOCS_PREFIX}/enterprise",
    f"{OPENCODE_DOCS_PREFIX}/troubleshooting",
)

# Navigation regions are scanned before main content regions.
_LINK_SELECTORS: Final[tuple[str, ...]] = (
    'nav a[href], aside a[href], [role="navigation"] a[href]',
    "main a[href], article a[href]",
)


def normalize_path(path: str) -> str:
    """Normalize a docs path for deduplication.

    The docs root, with or without trailing slashes, becomes ``/docs/``. Any
    other path loses its trailing slashes.
    """
    stripped = path.rstrip("/")
    if stripped == OPENCODE_DOCS_PREFIX:
        return DOCS_ROOT
    return stripped


def clean_href(href: str) -> str:
    """Drop the fragment and query string from an href."""
    return href.split("#", 1)[0].split("?", 1)[0]


async def discover_pages(
    fetch: PageFetcher,
    base_index_url: str = OPENCODE_DOCS_BASE_URL,
) -> list[str]:
    """Walk the docs navigation and return unique page paths.

    The docs root is always included. If the index page cannot be fetched,
    a fixed list of known pages is returned instead; discovery never raises.

    Args:
        fetch: Page fetch collaborator.
        base_index_url: URL of the docs index page to scan.

    Returns:
        Cleaned hrefs in first-discovered order, one per normalized path.
    """
    found: dict[str, str] = {DOCS_ROOT: DOCS_ROOT}

    try:
        logger.info("Discovering documentation pages from %s", base_index_url)
        html = await fetch(base_index_url)
    except (FetchError, httpx.HTTPError) as exc:
        logger.warning("Failed to discover pages, using fallback list: %s", exc)
        for path in FALLBACK_PATHS:
            found.setdefault(normalize_path(path), path)
        return list(found.values())

    soup = BeautifulSoup(html, "lxml")
    for selector in _LINK_SELECTORS:
        for link in soup.select(selector):
            href = link.get("href")
            if not isinstance(href, str) or not href.startswith(OPENCODE_DOCS_PREFIX):
                continue
            cleaned = clean_href(href)
            normalized = normalize_path(cleaned)
            if normalized and normalized not in found:
                found[normalized] = cleaned

    logger.info("Discovered %d unique documentation pages", len(found))
    return list(found.values())
