"""Document models: headings, pages, sections and the index container."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Heading(BaseModel):
    """A heading found on a rendered documentation page."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=6)
    text: str
    id: str


class Page(BaseModel):
    """One documentation URL, normalized to markdown.

    Attributes:
        path: Site-relative path, e.g. ``/docs/config``. Primary identifier.
        title: Page title.
        url: Absolute URL of the page.
        content: Page body as markdown.
        headings: Heading outline in document order.
        category: Coarse grouping label.
        scraped_at: Scrape time in epoch milliseconds (``scrapedAt``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    title: str
    url: str
    content: str
    headings: tuple[Heading, ...] = ()
    category: str
    scraped_at: int = Field(..., alias="scrapedAt")


class Section(BaseModel):
    """A heading-delimited span of a page's markdown, derived on demand."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    anchor: str
    content: str
    page_path: str = Field(..., alias="pagePath")


class DocsIndex(BaseModel):
    """Complete snapshot of the documentation at a point in time.

    Attributes:
        pages: Indexed pages in discovery order.
        version: Index format version.
        updated_at: Build time in epoch milliseconds (``updatedAt``).
        base_url: Documentation root URL (``baseUrl``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pages: tuple[Page, ...] = ()
    version: str
    updated_at: int = Field(..., alias="updatedAt")
    base_url: str = Field(..., alias="baseUrl")
