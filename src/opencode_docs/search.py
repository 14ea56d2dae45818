"""Query operations over an index snapshot."""

from __future__ import annotations

from typing import Final

from opencode_docs.schemas import DocsIndex, Page, PageSummary, SearchResult
from opencode_docs.scoring import extract_snippet, score
from opencode_docs.sections import extract_sections

MAX_MATCHED_SECTIONS: Final[int] = 3


def search(index: DocsIndex, query: str, limit: int = 10) -> list[SearchResult]:
    """Rank the pages of ``index`` against ``query``.

    Pages scoring zero or less are left out. Each result carries up to three
    matching sections and a snippet. Ties keep index order.
    """
    results: list[SearchResult] = []

    for page in index.pages:
        page_score = score(query, page.content, page.title)
        if page_score <= 0:
            continue

        matched = [
            section
            for section in extract_sections(page)
            if score(query, section.content, section.title) > 0
        ]
        results.append(
            SearchResult(
                score=page_score,
                page=page,
                matched_sections=tuple(matched[:MAX_MATCHED_SECTIONS]),
                snippet=extract_snippet(page.content, query),
            )
        )

    results.sort(key=lambda result: result.score, reverse=True)
    return results[:limit]


def search_by_category(index: DocsIndex, category: str) -> list[Page]:
    """Pages whose category equals ``category``, ignoring case."""
    wanted = category.lower()
    return [page for page in index.pages if page.category.lower() == wanted]


def get_page_by_path(index: DocsIndex, path: str) -> Page | None:
    """Find a page by path, tolerating a missing leading or trailing slash."""
    normalized = path if path.startswith("/") else f"/{path}"
    stripped = normalized.rstrip("/")
    for page in index.pages:
        if (
            page.path == normalized
            or page.path == normalized + "/"
            or page.path.rstrip("/") == stripped
        ):
            return page
    return None


def list_categories(index: DocsIndex) -> list[str]:
    """Distinct categories, sorted."""
    return sorted({page.category for page in index.pages})


def list_all_pages(index: DocsIndex) -> list[PageSummary]:
    """Path, title and category of every page in index order."""
    return [
        PageSummary(path=page.path, title=page.title, category=page.category)
        for page in index.pages
    ]
