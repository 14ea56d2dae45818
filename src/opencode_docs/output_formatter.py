"""Render index data as text for MCP tools and resources."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Final

from opencode_docs.config import OPENCODE_DOCS_PREFIX
from opencode_docs.schemas import DocsIndex, Page, SearchResult
from opencode_docs.search import list_all_pages, list_categories

INDEX_NOT_READY: Final[str] = (
    "Documentation index not available. Please wait for initial scrape to complete."
)
INDEX_UNAVAILABLE: Final[str] = "Documentation index not available."
MAX_SUGGESTIONS: Final[int] = 5

QUICK_REFERENCE: Final[str] = """# OpenCode Quick Reference

## Installation

```bash
curl -fsSL https://opencode.ai/install | bash
# or
npm install -g opencode-ai
# or
brew install anomalyco/tap/opencode
```

## Getting Started

1. Run `opencode` in your project directory
2. Run `/init` to initialize OpenCode for the project
3. Run `/connect` to set up your LLM provider

## Key Commands

| Command | Description |
|---------|-------------|
| `/init` | Initialize OpenCode for a project |
| `/connect` | Connect to an LLM provider |
| `/undo` | Undo the last change |
| `/redo` | Redo the last undone change |
| `/share` | Share your conversation |
| `Tab` | Toggle between Plan and Build mode |
| `@` | Fuzzy search for files |

## Configuration Files

- `AGENTS.md` - Project-specific agent instructions
- `opencode.json` - OpenCode configuration
- `.opencode/` - Local OpenCode data

## Documentation Links

- [Intro](https://opencode.ai/docs/)
- [Config](https://opencode.ai/docs/config)
- [MCP Servers](https://opencode.ai/docs/mcp-servers)
- [Custom Tools](https://opencode.ai/docs/custom-tools)
- [Agent Skills](https://opencode.ai/docs/skills)
"""


def resolve_doc_path(path: str) -> str:
    """Prefix bare page names such as ``agents`` with the docs root."""
    if path.startswith(OPENCODE_DOCS_PREFIX):
        return path
    return f"{OPENCODE_DOCS_PREFIX}/{path.lstrip('/')}"


def format_search_results(query: str, results: list[SearchResult]) -> str:
    """Render ranked results as a markdown list with snippets."""
    if not results:
        return (
            f'No results found for "{query}". Try different keywords or use '
            "browse_opencode_docs to see all available documentation."
        )

    blocks = []
    for position, result in enumerate(results, start=1):
        page = result.page
        block = f"### {position}. [{page.title}]({page.url})\n**Category:** {page.category}"
        if result.matched_sections:
            anchors = ", ".join(
                f"[{section.title}]({page.url}#{section.anchor})" for section in result.matched_sections
            )
            block += f"\n**Sections:** {anchors}"
        block += f"\n\n{result.snippet}"
        blocks.append(block)

    body = "\n\n---\n\n".join(blocks)
    return f'# Search Results for "{query}"\n\nFound {len(results)} relevant pages:\n\n{body}'


def format_page(page: Page) -> str:
    """Render a full page with its URL and category."""
    return f"# {page.title}\n\n**URL:** {page.url}\n**Category:** {page.category}\n\n---\n\n{page.content}"


def format_page_not_found(path: str, index: DocsIndex) -> str:
    """Explain a lookup miss and suggest pages with a similar name."""
    needle = path.rstrip("/").split("/")[-1]
    suggestions = [
        f"  - {summary.path}" for summary in list_all_pages(index) if needle in summary.path
    ][:MAX_SUGGESTIONS]
    hint = "\n".join(suggestions) or "Use browse_opencode_docs to see all pages."
    return f"Page not found: {path}\n\nAvailable pages include:\n{hint}"


def format_category(category: str, pages: list[Page], index: DocsIndex) -> str:
    """Render the pages of one category, or the known categories on a miss."""
    if not pages:
        known = ", ".join(list_categories(index))
        return f'No pages found in category "{category}". Available categories: {known}'

    lines = [f"# {pages[0].category} ({len(pages)} pages)", ""]
    lines.extend(f"- [{page.title}]({page.url}) - `{page.path}`" for page in pages)
    return "\n".join(lines)


def format_categories(index: DocsIndex) -> str:
    """Render every category with its page count."""
    lines = ["# Documentation Categories", ""]
    for category, pages in _pages_by_category(index).items():
        lines.append(f"- {category} ({len(pages)} pages)")
    return "\n".join(lines)


def format_browse(index: DocsIndex) -> str:
    """Render an overview of the whole index grouped by category."""
    updated = datetime.fromtimestamp(index.updated_at / 1000, tz=timezone.utc)
    blocks = [
        "# OpenCode Documentation\n\n"
        f"**Base URL:** {index.base_url}\n"
        f"**Total Pages:** {len(index.pages)}\n"
        f"**Last Updated:** {updated.isoformat()}"
    ]
    for category, pages in _pages_by_category(index).items():
        links = "\n".join(f"- [{page.title}]({page.url})" for page in pages)
        blocks.append(f"## {category} ({len(pages)} pages)\n\n{links}")
    return "\n\n".join(blocks) + "\n"


def format_table_of_contents(index: DocsIndex) -> str:
    """Render the docs index resource: every page with its path, by category."""
    blocks = ["# OpenCode Documentation Index"]
    for category, pages in _pages_by_category(index).items():
        links = "\n".join(f"- [{page.title}]({page.url}) - `{page.path}`" for page in pages)
        blocks.append(f"## {category}\n\n{links}")
    return "\n\n".join(blocks) + "\n"


def _pages_by_category(index: DocsIndex) -> dict[str, list[Page]]:
    """Pages grouped by exact category name, categories sorted."""
    grouped: dict[str, list[Page]] = {}
    for page in index.pages:
        grouped.setdefault(page.category, []).append(page)
    return {category: grouped[category] for category in sorted(grouped)}
