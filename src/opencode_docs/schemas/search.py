"""Search result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from opencode_docs.schemas.document import Page, Section


class SearchResult(BaseModel):
    """A scored page match for one query."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: float
    page: Page
    matched_sections: tuple[Section, ...] = Field(default=(), alias="matchedSections")
    snippet: str


class PageSummary(BaseModel):
    """Lightweight listing entry for a page."""

    model_config = ConfigDict(frozen=True)

    path: str
    title: str
    category: str
