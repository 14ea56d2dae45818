"""Shared HTML utilities for documentation page processing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


# Content containers, highest priority first.
CONTENT_SELECTORS: Final[tuple[str, ...]] = (
    "main",
    "article",
    ".content",
    ".docs-content",
    '[role="main"]',
    ".markdown-body",
)


def iter_content_regions(soup: BeautifulSoup) -> Iterator[list[Tag]]:
    """Yield every match of each content selector, in priority order.

    Selectors without a match are skipped. A match nested inside another
    match of the same selector is left out.
    """
    for selector in CONTENT_SELECTORS:
        matches = soup.select(selector)
        if matches:
            yield _outermost(matches)


def _outermost(tags: list[Tag]) -> list[Tag]:
    selected = {id(tag) for tag in tags}
    return [tag for tag in tags if not any(id(parent) in selected for parent in tag.parents)]


def find_page_body(soup: BeautifulSoup) -> Tag:
    """Return ``<body>``, or the whole document when there is none."""
    if soup.body:
        return soup.body
    return soup
