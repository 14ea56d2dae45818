"""Pydantic response models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """One ranked page in a search response."""

    path: str = Field(..., description="Site-relative page path")
    title: str = Field(..., description="Page title")
    url: str = Field(..., description="Absolute page URL")
    category: str = Field(..., description="Page category")
    score: float = Field(..., description="Relevance weight (unbounded)")
    snippet: str = Field(..., description="Content around the first match")


class SearchResponse(BaseModel):
    """Response model for ``GET /search``."""

    query: str
    results: list[SearchHit]
    count: int


class PageListing(BaseModel):
    """Listing entry for ``GET /list``."""

    path: str
    title: str
    url: str
    category: str


class ListResponse(BaseModel):
    """Response model for ``GET /list``."""

    pages: list[PageListing]
    count: int


class ErrorResponse(BaseModel):
    """Error body for 400 and 404 responses.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    available : list[str] | None
        Known page paths, returned when a page lookup misses.

    """

    error: str = Field(..., description="Error message")
    available: list[str] | None = Field(default=None, description="Known page paths")
