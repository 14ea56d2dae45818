"""Own the current docs index and refresh it lazily."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from pathlib import Path

from opencode_docs.config import FALLBACK_INDEX_VERSION, OPENCODE_DOCS_REFRESH_TTL_SECONDS
from opencode_docs.indexer import build_index, create_fallback_index
from opencode_docs.schemas import DocsIndex
from opencode_docs.storage import index_age_hours, is_index_stale, load_index, save_index

logger = logging.getLogger(__name__)

IndexBuilder = Callable[[], Awaitable[DocsIndex]]

DEFAULT_RETRY_INTERVAL_S = 15 * 60


class IndexHolder:
    """Single cell holding the immutable index served to readers.

    Readers get the current value through ``snapshot`` or ``get_index``. A
    refresh builds a complete new index before replacing the old one in a
    single assignment, so a half-built index is never visible. Only one
    refresh runs at a time.
    """

    def __init__(
        self,
        *,
        index_path: Path | None = None,
        builder: IndexBuilder = build_index,
        ttl_seconds: int = OPENCODE_DOCS_REFRESH_TTL_SECONDS,
        retry_interval_s: float = DEFAULT_RETRY_INTERVAL_S,
        initial: DocsIndex | None = None,
    ) -> None:
        """Initialise the holder.

        Args:
            index_path: File the index is loaded from and mirrored to. None
                keeps the index in memory only.
            builder: Coroutine function producing a fresh index.
            ttl_seconds: Age after which the held index is refreshed.
            retry_interval_s: Minimum pause between refresh attempts of a
                stale index.
            initial: Index to serve before any load or build.
        """
        self.index_path = index_path
        self._builder = builder
        self._ttl_seconds = ttl_seconds
        self._retry_interval_s = retry_interval_s
        self._index = initial
        self._initialized = initial is not None
        self._lock = asyncio.Lock()
        self._refresh_task: asyncio.Task[DocsIndex | None] | None = None
        self._last_attempt: float | None = None

    def snapshot(self) -> DocsIndex | None:
        """Return the index currently being served."""
        return self._index

    async def get_index(self) -> DocsIndex | None:
        """Return the current index, loading or refreshing it as needed.

        The first call loads the persisted index, or builds one when there is
        none. A stale index keeps being served while a background refresh
        runs.
        """
        if not self._initialized:
            await self._initialize()

        index = self._index
        if index is not None and self._needs_refresh(index):
            self._schedule_refresh()
        return self._index

    async def refresh(self) -> DocsIndex | None:
        """Rebuild the index now and return whatever is being served after."""
        async with self._lock:
            await self._refresh_locked()
        return self._index

    async def wait_for_refresh(self) -> None:
        """Wait for a scheduled background refresh, if one is running."""
        if self._refresh_task is not None:
            await self._refresh_task

    async def _initialize(self) -> None:
        async with self._lock:
            if self._initialized:
                return
            if self.index_path is not None:
                self._index = await load_index(self.index_path)
            self._initialized = True

            if self._index is not None:
                logger.info(
                    "Loaded docs index (%d pages, %.1fh old)",
                    len(self._index.pages),
                    index_age_hours(self._index),
                )
            else:
                logger.info("No index found, scraping docs...")
                await self._refresh_locked()

    def _needs_refresh(self, index: DocsIndex) -> bool:
        # The embedded fallback is replaced as soon as a build succeeds.
        return index.version == FALLBACK_INDEX_VERSION or is_index_stale(index, self._ttl_seconds)

    def _schedule_refresh(self) -> None:
        if self._refresh_task is not None and not self._refresh_task.done():
            return
        if self._last_attempt is not None and time.monotonic() - self._last_attempt < self._retry_interval_s:
            return
        logger.info("Index is stale, refreshing in background...")
        self._refresh_task = asyncio.create_task(self.refresh())

    async def _refresh_locked(self) -> None:
        self._last_attempt = time.monotonic()
        try:
            new_index = await self._builder()
        except Exception as exc:
            logger.error("Failed to refresh index", extra={"error": str(exc)}, exc_info=True)
            if self._index is None:
                logger.warning("Serving embedded fallback index")
                self._index = create_fallback_index()
            return

        self._index = new_index
        logger.info("Refreshed index: %d pages", len(new_index.pages))

        if self.index_path is not None:
            try:
                await save_index(new_index, self.index_path)
            except OSError as exc:
                logger.error("Failed to save index to %s: %s", self.index_path, exc)
