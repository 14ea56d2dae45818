"""opencode_docs: index the OpenCode documentation and serve it to agents."""

from opencode_docs.exceptions import (
    BuildFailure,
    FetchError,
    OpencodeDocsError,
    ParseError,
)
from opencode_docs.index_holder import IndexHolder
from opencode_docs.indexer import build_index, create_fallback_index, scrape_page
from opencode_docs.schemas import DocsIndex, Heading, Page, PageSummary, SearchResult, Section
from opencode_docs.search import (
    get_page_by_path,
    list_all_pages,
    list_categories,
    search,
    search_by_category,
)
from opencode_docs.storage import load_index, save_index

__all__ = [
    "BuildFailure",
    "DocsIndex",
    "FetchError",
    "Heading",
    "IndexHolder",
    "OpencodeDocsError",
    "Page",
    "PageSummary",
    "ParseError",
    "SearchResult",
    "Section",
    "build_index",
    "create_fallback_index",
    "get_page_by_path",
    "list_all_pages",
    "list_categories",
    "load_index",
    "save_index",
    "scrape_page",
    "search",
    "search_by_category",
]
