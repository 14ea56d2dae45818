"""Test setup for opencode_docs."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from opencode_docs.schemas import DocsIndex, Page  # noqa: E402

SCRAPED_AT = 1_700_000_000_000


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def make_page() -> Callable[..., Page]:
    """Factory for pages with sensible defaults."""

    def _make_page(
        path: str = "/docs/config",
        title: str = "Config",
        content: str = "",
        category: str = "Getting Started",
    ) -> Page:
        return Page(
            path=path,
            title=title,
            url=f"https://opencode.ai{path}",
            content=content,
            headings=(),
            category=category,
            scraped_at=SCRAPED_AT,
        )

    return _make_page


@pytest.fixture
def make_index() -> Callable[..., DocsIndex]:
    """Factory wrapping pages into an index."""

    def _make_index(*pages: Page, updated_at: int = SCRAPED_AT, version: str = "1.0.0") -> DocsIndex:
        return DocsIndex(
            pages=pages,
            version=version,
            updated_at=updated_at,
            base_url="https://opencode.ai/docs",
        )

    return _make_index


@pytest.fixture
def configure_index(make_page: Callable[..., Page], make_index: Callable[..., DocsIndex]) -> DocsIndex:
    """Two "Configure" pages: MCP servers and Agents."""
    mcp_page = make_page(
        path="/docs/mcp-servers",
        title="MCP servers",
        content=(
            "# MCP servers\n\n"
            "Add external tools using the Model Context Protocol.\n\n"
            "## Local\n\n"
            "Run a local server with a command.\n\n"
            "## Remote\n\n"
            "Point at a remote server URL."
        ),
        category="Configure",
    )
    agents_page = make_page(
        path="/docs/agents",
        title="Agents",
        content="# Agents\n\nSpecialised assistants. See the agent configuration options.",
        category="Configure",
    )
    return make_index(mcp_page, agents_page)
