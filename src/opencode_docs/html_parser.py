"""Normalize rendered documentation HTML into a Page."""

from __future__ import annotations

import re
import time
from typing import Final

from opencode_docs.anchors import derive_heading_id
from opencode_docs.categories import category_for_path
from opencode_docs.config import OPENCODE_DOCS_SITE_URL, OPENCODE_DOCS_TITLE_SUFFIX
from opencode_docs.html_utils import find_page_body, iter_content_regions
from opencode_docs.markdown import convert_to_markdown
from opencode_docs.schemas import Heading, Page

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


MIN_CONTENT_LENGTH: Final[int] = 100
UNTITLED: Final[str] = "Untitled"

_HEADING_RE = re.compile(r"^h[1-6]$")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def parse_page(
    path: str,
    html: str,
    *,
    site_url: str = OPENCODE_DOCS_SITE_URL,
    scraped_at: int | None = None,
) -> Page:
    """Build a Page from the raw HTML of ``path``.

    Args:
        path: Site-relative page path.
        html: Raw page HTML.
        site_url: Site origin the path is resolved against.
        scraped_at: Scrape time in epoch milliseconds. Defaults to now.

    Returns:
        The normalized Page.
    """
    soup = BeautifulSoup(html, "lxml")

    content = extract_content(soup)
    title = extract_title(soup, path)
    headings = extract_headings(soup)

    return Page(
        path=path,
        title=title,
        url=f"{site_url}{path}",
        content=content,
        headings=tuple(headings),
        category=category_for_path(path),
        scraped_at=now_ms() if scraped_at is None else scraped_at,
    )


def extract_content(soup: BeautifulSoup) -> str:
    """Convert the main content region of a page to markdown.

    The first content selector whose matches, converted together, give
    markdown longer than ``MIN_CONTENT_LENGTH`` wins; otherwise the whole body
    is converted.
    """
    for roots in iter_content_regions(soup):
        markdown = normalize_markdown(convert_to_markdown(*roots))
        if len(markdown) > MIN_CONTENT_LENGTH:
            return markdown
    return normalize_markdown(convert_to_markdown(find_page_body(soup)))


def normalize_markdown(markdown: str) -> str:
    """Collapse runs of three or more newlines to two and trim the ends."""
    return _EXCESS_NEWLINES_RE.sub("\n\n", markdown).strip()


def extract_title(soup: BeautifulSoup, path: str) -> str:
    h1 = soup.find("h1")
    if h1:
        text = h1.get_text().strip()
        if text:
            return text
    if soup.title:
        text = soup.title.get_text().strip().removesuffix(OPENCODE_DOCS_TITLE_SUFFIX).strip()
        if text:
            return text
    return path.split("/")[-1] or UNTITLED


def extract_headings(soup: BeautifulSoup) -> list[Heading]:
    """Collect the heading outline of the whole rendered page.

    The outline does not depend on which region was converted to markdown.
    """
    headings: list[Heading] = []
    for tag in soup.find_all(_HEADING_RE):
        text = tag.get_text().strip()
        if not text:
            continue
        anchor = tag.get("id")
        headings.append(
            Heading(
                level=int(tag.name[1]),
                text=text,
                id=anchor if isinstance(anchor, str) and anchor else derive_heading_id(text),
            )
        )
    return headings

