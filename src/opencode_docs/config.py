"""Local configuration for opencode_docs."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_SITE_URL = "https://opencode.ai"
DEFAULT_DOCS_PREFIX = "/docs"
DEFAULT_INDEX_PATH = "~/.opencode_docs/docs-index.json"
DEFAULT_REFRESH_TTL_SECONDS = 24 * 60 * 60
DEFAULT_REQUEST_DELAY_S = 0.3
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "opencode-docs-mcp/1.0 (+https://opencode.ai/docs)"
DEFAULT_TITLE_SUFFIX = " | OpenCode"
DEFAULT_LOG_LEVEL = "INFO"

INDEX_VERSION = "1.0.0"
FALLBACK_INDEX_VERSION = "1.0.0-fallback"

OPENCODE_DOCS_SITE_URL = os.getenv("OPENCODE_DOCS_SITE_URL", DEFAULT_SITE_URL).rstrip("/")
OPENCODE_DOCS_PREFIX = os.getenv("OPENCODE_DOCS_PREFIX", DEFAULT_DOCS_PREFIX).rstrip("/")
OPENCODE_DOCS_BASE_URL = f"{OPENCODE_DOCS_SITE_URL}{OPENCODE_DOCS_PREFIX}"

# Where the built index is mirrored between runs.
OPENCODE_DOCS_INDEX = Path(os.getenv("OPENCODE_DOCS_INDEX", DEFAULT_INDEX_PATH)).expanduser().resolve()
OPENCODE_DOCS_REFRESH_TTL_SECONDS = int(
    os.getenv("OPENCODE_DOCS_REFRESH_TTL_SECONDS", str(DEFAULT_REFRESH_TTL_SECONDS))
)
OPENCODE_DOCS_REQUEST_DELAY_S = float(os.getenv("OPENCODE_DOCS_REQUEST_DELAY_S", str(DEFAULT_REQUEST_DELAY_S)))
OPENCODE_DOCS_FETCH_TIMEOUT_S = float(os.getenv("OPENCODE_DOCS_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
OPENCODE_DOCS_FETCH_MAX_RETRIES = int(os.getenv("OPENCODE_DOCS_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
OPENCODE_DOCS_FETCH_BACKOFF_S = float(os.getenv("OPENCODE_DOCS_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
OPENCODE_DOCS_USER_AGENT = os.getenv("OPENCODE_DOCS_USER_AGENT", DEFAULT_USER_AGENT)
OPENCODE_DOCS_TITLE_SUFFIX = os.getenv("OPENCODE_DOCS_TITLE_SUFFIX", DEFAULT_TITLE_SUFFIX)
OPENCODE_DOCS_LOG_LEVEL = os.getenv("OPENCODE_DOCS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
