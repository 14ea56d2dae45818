"""Logging setup shared by the CLI, the MCP server and the HTTP server."""

from __future__ import annotations

import logging
import sys

from opencode_docs.config import OPENCODE_DOCS_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr.

    stdout is reserved for the MCP stdio transport, so nothing may log there.

    Args:
        level: Log level name. Defaults to ``OPENCODE_DOCS_LOG_LEVEL``.
    """
    logging.basicConfig(
        level=(level or OPENCODE_DOCS_LOG_LEVEL).upper(),
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
