"""Tests for the MCP tools and resources."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from opencode_docs.index_holder import IndexHolder
from opencode_docs.mcp_server import create_server
from opencode_docs.output_formatter import INDEX_NOT_READY, INDEX_UNAVAILABLE, QUICK_REFERENCE
from opencode_docs.schemas import DocsIndex

TOOL_NAMES = {
    "search_opencode_docs",
    "get_opencode_doc_page",
    "list_opencode_docs_by_category",
    "list_opencode_doc_categories",
    "browse_opencode_docs",
}


def _text(result: Any) -> str:
    """Join the text blocks of a tool result, with or without structured output."""
    if isinstance(result, tuple):
        result = result[0]
    return "".join(block.text for block in result)


@pytest.fixture
def holder(configure_index: DocsIndex) -> IndexHolder:
    # A ttl of zero keeps the fixture index from being refreshed.
    return IndexHolder(builder=AsyncMock(), ttl_seconds=0, initial=configure_index)


class TestRegistration:
    """Tests for what the server exposes."""

    @pytest.mark.asyncio
    async def test_tools(self, holder: IndexHolder) -> None:
        tools = await create_server(holder).list_tools()
        assert {tool.name for tool in tools} == TOOL_NAMES

    @pytest.mark.asyncio
    async def test_search_tool_schema(self, holder: IndexHolder) -> None:
        tools = {tool.name: tool for tool in await create_server(holder).list_tools()}
        schema = tools["search_opencode_docs"].inputSchema

        assert schema["required"] == ["query"]
        assert schema["properties"]["limit"]["default"] == 5

    @pytest.mark.asyncio
    async def test_resources(self, holder: IndexHolder) -> None:
        resources = await create_server(holder).list_resources()

        assert {str(resource.uri) for resource in resources} == {
            "opencode://docs/index",
            "opencode://docs/quick-reference",
        }
        assert {resource.mimeType for resource in resources} == {"text/markdown"}


class TestTools:
    """Tests for calling the tools."""

    @pytest.mark.asyncio
    async def test_search(self, holder: IndexHolder) -> None:
        result = await create_server(holder).call_tool("search_opencode_docs", {"query": "MCP"})

        text = _text(result)
        assert text.startswith('# Search Results for "MCP"')
        assert "[MCP servers](https://opencode.ai/docs/mcp-servers)" in text
        assert "[Agents]" not in text

    @pytest.mark.asyncio
    async def test_get_page_accepts_bare_name(self, holder: IndexHolder) -> None:
        result = await create_server(holder).call_tool("get_opencode_doc_page", {"path": "agents"})
        assert _text(result).startswith("# Agents\n\n**URL:** https://opencode.ai/docs/agents")

    @pytest.mark.asyncio
    async def test_get_missing_page(self, holder: IndexHolder) -> None:
        result = await create_server(holder).call_tool("get_opencode_doc_page", {"path": "/docs/mcp"})

        text = _text(result)
        assert text.startswith("Page not found: /docs/mcp")
        assert "/docs/mcp-servers" in text

    @pytest.mark.asyncio
    async def test_list_by_category(self, holder: IndexHolder) -> None:
        result = await create_server(holder).call_tool(
            "list_opencode_docs_by_category", {"category": "configure"}
        )
        assert _text(result).startswith("# Configure (2 pages)")

    @pytest.mark.asyncio
    async def test_list_categories(self, holder: IndexHolder) -> None:
        result = await create_server(holder).call_tool("list_opencode_doc_categories", {})
        assert "- Configure (2 pages)" in _text(result)

    @pytest.mark.asyncio
    async def test_browse(self, holder: IndexHolder) -> None:
        result = await create_server(holder).call_tool("browse_opencode_docs", {})
        assert "**Total Pages:** 2" in _text(result)

    @pytest.mark.asyncio
    async def test_index_not_available(self) -> None:
        empty_holder = MagicMock()
        empty_holder.get_index = AsyncMock(return_value=None)
        server = create_server(empty_holder)

        assert _text(await server.call_tool("search_opencode_docs", {"query": "MCP"})) == INDEX_NOT_READY
        assert _text(await server.call_tool("browse_opencode_docs", {})) == INDEX_UNAVAILABLE


class TestResources:
    """Tests for reading the resources."""

    @pytest.mark.asyncio
    async def test_quick_reference(self, holder: IndexHolder) -> None:
        contents = list(await create_server(holder).read_resource("opencode://docs/quick-reference"))
        assert contents[0].content == QUICK_REFERENCE

    @pytest.mark.asyncio
    async def test_docs_index(self, holder: IndexHolder) -> None:
        contents = list(await create_server(holder).read_resource("opencode://docs/index"))
        assert contents[0].content.startswith("# OpenCode Documentation Index")
