"""Shared schemas for opencode_docs."""

from opencode_docs.schemas.document import DocsIndex, Heading, Page, Section
from opencode_docs.schemas.search import PageSummary, SearchResult

__all__ = ["DocsIndex", "Heading", "Page", "PageSummary", "SearchResult", "Section"]
