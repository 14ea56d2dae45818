"""MCP tools and resources serving the OpenCode docs index."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from opencode_docs.index_holder import IndexHolder
from opencode_docs.output_formatter import (
    INDEX_NOT_READY,
    INDEX_UNAVAILABLE,
    QUICK_REFERENCE,
    format_browse,
    format_categories,
    format_category,
    format_page,
    format_page_not_found,
    format_search_results,
    format_table_of_contents,
    resolve_doc_path,
)
from opencode_docs.search import get_page_by_path, search, search_by_category

logger = logging.getLogger(__name__)

SERVER_NAME = "opencode-docs"
DEFAULT_SEARCH_LIMIT = 5


def create_server(holder: IndexHolder) -> FastMCP:
    """Create the MCP server with every docs tool and resource registered."""
    mcp = FastMCP(SERVER_NAME)
    register_doc_tools(mcp, holder)
    register_doc_resources(mcp, holder)
    return mcp


def register_doc_tools(mcp: FastMCP, holder: IndexHolder) -> None:
    """Register the documentation query tools."""

    @mcp.tool()
    async def search_opencode_docs(query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> str:
        """
        Search across the OpenCode knowledge base.

        Finds configuration examples, CLI commands and guides, e.g. for MCP
        servers, agents, tools or themes. Returns titles, links and the
        matching text of the most relevant pages.

        Args:
            query: What to look for. Be specific for better results.
            limit: Maximum number of pages to return.
        """
        index = await holder.get_index()
        if index is None:
            return INDEX_NOT_READY
        logger.debug("search_opencode_docs", extra={"query": query, "limit": limit})
        return format_search_results(query, search(index, query, limit))

    @mcp.tool()
    async def get_opencode_doc_page(path: str) -> str:
        """
        Retrieve the full content of one OpenCode documentation page.

        Args:
            path: Page path, e.g. "/docs/mcp-servers/", "/docs/config" or "agents".
        """
        index = await holder.get_index()
        if index is None:
            return INDEX_UNAVAILABLE
        page = get_page_by_path(index, resolve_doc_path(path))
        if page is None:
            return format_page_not_found(path, index)
        return format_page(page)

    @mcp.tool()
    async def list_opencode_docs_by_category(category: str) -> str:
        """
        List the OpenCode documentation pages in one category.

        Args:
            category: Category name such as "Configure" or "Usage" (case-insensitive).
        """
        index = await holder.get_index()
        if index is None:
            return INDEX_UNAVAILABLE
        return format_category(category, search_by_category(index, category), index)

    @mcp.tool()
    async def list_opencode_doc_categories() -> str:
        """List the OpenCode documentation categories with their page counts."""
        index = await holder.get_index()
        if index is None:
            return INDEX_UNAVAILABLE
        return format_categories(index)

    @mcp.tool()
    async def browse_opencode_docs() -> str:
        """
        Get an overview of the OpenCode documentation structure.

        Lists every category and page. Use it to see what documentation is
        available or to find the right page to read.
        """
        index = await holder.get_index()
        if index is None:
            return INDEX_UNAVAILABLE
        return format_browse(index)


def register_doc_resources(mcp: FastMCP, holder: IndexHolder) -> None:
    """Register the table-of-contents and quick-reference resources."""

    @mcp.resource(
        "opencode://docs/index",
        name="opencode-docs-index",
        description="Table of contents of the OpenCode documentation",
        mime_type="text/markdown",
    )
    async def docs_index() -> str:
        index = await holder.get_index()
        if index is None:
            return "Documentation index not available. Please run the scraper first."
        return format_table_of_contents(index)

    @mcp.resource(
        "opencode://docs/quick-reference",
        name="opencode-quick-reference",
        description="OpenCode installation, commands and configuration files at a glance",
        mime_type="text/markdown",
    )
    async def quick_reference() -> str:
        return QUICK_REFERENCE
