"""Persist the docs index as JSON on local disk."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from pydantic import ValidationError

from opencode_docs.exceptions import ParseError
from opencode_docs.schemas import DocsIndex

logger = logging.getLogger(__name__)


def is_index_stale(index: DocsIndex, ttl_seconds: int, *, now_ms: int | None = None) -> bool:
    """Check whether an index is older than its time-to-live.

    Args:
        index: The index to check.
        ttl_seconds: Time-to-live in seconds. If <= 0, the index never goes
            stale.
        now_ms: Current time in epoch milliseconds. Defaults to now.

    Returns:
        True if the index should be rebuilt.
    """
    if ttl_seconds <= 0:
        return False
    current = int(time.time() * 1000) if now_ms is None else now_ms
    age_seconds = (current - index.updated_at) / 1000
    return age_seconds > ttl_seconds


def index_age_hours(index: DocsIndex) -> float:
    """Hours elapsed since ``index`` was built."""
    return (time.time() * 1000 - index.updated_at) / (1000 * 60 * 60)


def dump_index(index: DocsIndex) -> str:
    """Serialize an index with its wire field names."""
    return index.model_dump_json(by_alias=True, indent=2)


def parse_index(data: str) -> DocsIndex:
    """Deserialize an index.

    Raises:
        ParseError: If ``data`` is not a valid index document.
    """
    try:
        return DocsIndex.model_validate_json(data)
    except ValidationError as exc:
        raise ParseError(f"Malformed docs index: {exc.error_count()} error(s)") from exc


def save_index_sync(index: DocsIndex, path: Path) -> None:
    """Write ``index`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_index(index), encoding="utf-8")
    logger.info("Saved index to %s", path)


def load_index_sync(path: Path) -> DocsIndex | None:
    """Read an index from ``path``.

    Returns:
        The index, or None if the file is missing or unreadable.
    """
    if not path.exists():
        return None
    try:
        return parse_index(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ParseError) as exc:
        logger.error("Failed to load index from %s: %s", path, exc)
        return None


async def save_index(index: DocsIndex, path: Path) -> None:
    """Write ``index`` to ``path`` using a thread pool."""
    await asyncio.to_thread(save_index_sync, index, path)


async def load_index(path: Path) -> DocsIndex | None:
    """Read an index from ``path`` using a thread pool."""
    return await asyncio.to_thread(load_index_sync, path)
