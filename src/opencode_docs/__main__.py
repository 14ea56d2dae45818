"""Command line entry point: build the docs index or serve it over MCP stdio."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from opencode_docs.config import OPENCODE_DOCS_INDEX
from opencode_docs.exceptions import OpencodeDocsError
from opencode_docs.index_holder import IndexHolder
from opencode_docs.indexer import build_index
from opencode_docs.mcp_server import create_server
from opencode_docs.storage import save_index
from opencode_docs.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="opencode-docs", description="Index and serve the OpenCode documentation.")
    subparsers = parser.add_subparsers(dest="command")

    scrape = subparsers.add_parser("scrape", help="Scrape the docs site and save the index")
    scrape.add_argument("--output", type=Path, default=OPENCODE_DOCS_INDEX, help="Index file to write")

    serve = subparsers.add_parser("serve", help="Run the MCP server on stdio (default)")
    serve.add_argument("--index", type=Path, default=OPENCODE_DOCS_INDEX, help="Index file to load and update")

    parser.add_argument("--log-level", default=None, help="Log level (default: OPENCODE_DOCS_LOG_LEVEL)")
    return parser


async def scrape(output: Path) -> int:
    """Build a fresh index and write it to ``output``."""
    logger.info("Starting OpenCode docs scraper...")
    index = await build_index()
    await save_index(index, output)
    logger.info("Scraping complete! %d pages", len(index.pages))
    return len(index.pages)


def serve(index_path: Path) -> None:
    """Serve MCP over stdio; the index is loaded or built on the first request."""
    holder = IndexHolder(index_path=index_path)
    server = create_server(holder)
    logger.info("OpenCode Docs MCP Server running on stdio")
    server.run()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "scrape":
            asyncio.run(scrape(args.output))
        else:
            serve(getattr(args, "index", OPENCODE_DOCS_INDEX))
    except OpencodeDocsError as exc:
        logger.error("Fatal error: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    main()
