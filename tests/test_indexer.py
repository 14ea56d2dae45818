"""Tests for scraping pages and building the index."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from opencode_docs.config import FALLBACK_INDEX_VERSION, INDEX_VERSION
from opencode_docs.discovery import FALLBACK_PATHS
from opencode_docs.exceptions import BuildFailure, FetchError
from opencode_docs.html_parser import parse_page
from opencode_docs.indexer import build_index, create_fallback_index, scrape_page
from opencode_docs.schemas import Page

BODY = "Configure OpenCode with a JSON file in your project or home directory. " * 2

INDEX_HTML = """
<html><body><nav>
  <a href="/docs/config">Config</a>
  <a href="/docs/agents/">Agents</a>
  <a href="/docs/missing">Missing</a>
</nav></body></html>
"""

PAGES = {
    "https://opencode.ai/docs": INDEX_HTML,
    "https://opencode.ai/docs/": f"<html><body><main><h1>Intro</h1><p>{BODY}</p></main></body></html>",
    "https://opencode.ai/docs/config": f"<html><body><main><h1>Config</h1><p>{BODY}</p></main></body></html>",
    "https://opencode.ai/docs/agents/": f"<html><body><main><h1>Agents</h1><p>{BODY}</p></main></body></html>",
}


def site_fetcher(pages: dict[str, str]) -> AsyncMock:
    """Fetcher serving ``pages`` and failing with a 404 for anything else."""

    async def fetch(url: str) -> str:
        if url not in pages:
            raise FetchError(f"Failed to fetch {url}: 404", status_code=404)
        return pages[url]

    return AsyncMock(side_effect=fetch)


class TestScrapePage:
    """Tests for scrape_page."""

    @pytest.mark.asyncio
    async def test_returns_page(self) -> None:
        fetch = site_fetcher(PAGES)

        page = await scrape_page("/docs/config", fetch)

        assert page is not None
        assert page.title == "Config"
        assert page.url == "https://opencode.ai/docs/config"
        fetch.assert_awaited_once_with("https://opencode.ai/docs/config")

    @pytest.mark.asyncio
    async def test_returns_none_on_fetch_error(self) -> None:
        assert await scrape_page("/docs/missing", site_fetcher(PAGES)) is None

    @pytest.mark.asyncio
    async def test_returns_none_on_parse_error(self) -> None:
        """Markup that cannot be normalized is logged and skipped."""
        with patch("opencode_docs.indexer.parse_page", side_effect=ValueError("malformed markup")):
            assert await scrape_page("/docs/config", site_fetcher(PAGES)) is None


class TestBuildIndex:
    """Tests for build_index."""

    @pytest.mark.asyncio
    async def test_builds_pages_in_discovery_order(self) -> None:
        index = await build_index(fetch=site_fetcher(PAGES), delay_s=0)

        assert [page.path for page in index.pages] == ["/docs/", "/docs/config", "/docs/agents/"]
        assert index.version == INDEX_VERSION
        assert index.base_url == "https://opencode.ai/docs"
        assert index.updated_at >= max(page.scraped_at for page in index.pages)

    @pytest.mark.asyncio
    async def test_waits_between_requests(self) -> None:
        with patch("opencode_docs.indexer.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await build_index(fetch=site_fetcher(PAGES), delay_s=0.3)

        # One pause per discovered path, including the failed one.
        assert mock_sleep.await_count == 4
        mock_sleep.assert_awaited_with(0.3)

    @pytest.mark.asyncio
    async def test_uses_fallback_paths_when_discovery_fails(self) -> None:
        pages = {url: html for url, html in PAGES.items() if url != "https://opencode.ai/docs"}
        fetch = site_fetcher(pages)

        index = await build_index(fetch=fetch, delay_s=0)

        assert [page.path for page in index.pages] == ["/docs/", "/docs/config"]
        requested = [call.args[0] for call in fetch.await_args_list]
        assert requested[1:] == ["https://opencode.ai/docs/", *(f"https://opencode.ai{p}" for p in FALLBACK_PATHS)]

    @pytest.mark.asyncio
    async def test_parse_failure_skips_only_that_page(self) -> None:
        """One page that fails to parse does not abort the build."""
        pages = {
            **PAGES,
            "https://opencode.ai/docs": (
                '<html><body><nav><a href="/docs/bad">Bad</a><a href="/docs/good">Good</a></nav></body></html>'
            ),
            "https://opencode.ai/docs/bad": "<html><body><h1>Bad</h1></body></html>",
            "https://opencode.ai/docs/good": "<html><body><h1>Good</h1></body></html>",
        }

        def parse_or_fail(path: str, html: str) -> Page:
            if path == "/docs/bad":
                raise ValueError("malformed markup")
            return parse_page(path, html)

        with patch("opencode_docs.indexer.parse_page", side_effect=parse_or_fail):
            index = await build_index(fetch=site_fetcher(pages), delay_s=0)

        assert [page.path for page in index.pages] == ["/docs/", "/docs/good"]

    @pytest.mark.asyncio
    async def test_raises_when_nothing_scraped(self) -> None:
        fetch = AsyncMock(side_effect=FetchError("Failed to fetch", status_code=503))

        with pytest.raises(BuildFailure, match="No pages could be scraped"):
            await build_index(fetch=fetch, delay_s=0)

    @pytest.mark.asyncio
    async def test_opens_pooled_client_without_fetcher(self) -> None:
        client = MagicMock()
        client.__aenter__ = AsyncMock(return_value=client)
        client.__aexit__ = AsyncMock(return_value=None)

        with (
            patch("opencode_docs.indexer.create_client", return_value=client),
            patch("opencode_docs.indexer.make_fetcher", return_value=site_fetcher(PAGES)) as mock_make_fetcher,
        ):
            index = await build_index(delay_s=0)

        mock_make_fetcher.assert_called_once_with(client)
        client.__aexit__.assert_awaited_once()
        assert len(index.pages) == 3


class TestCreateFallbackIndex:
    """Tests for create_fallback_index."""

    def test_single_intro_page(self) -> None:
        index = create_fallback_index()

        assert index.version == FALLBACK_INDEX_VERSION
        assert len(index.pages) == 1
        page = index.pages[0]
        assert page.path == "/docs/"
        assert page.title == "OpenCode Documentation"
        assert page.category == "General"
        assert [heading.id for heading in page.headings] == [
            "opencode-documentation",
            "installation",
            "key-features",
        ]
        assert "https://opencode.ai/docs/" in page.content
