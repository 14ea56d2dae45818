"""Static mapping from documentation slugs to categories."""

from __future__ import annotations

from typing import Final

GETTING_STARTED: Final[str] = "Getting Started"
DEFAULT_CATEGORY: Final[str] = "General"

CATEGORY_MAP: Final[dict[str, str]] = {
    # Getting Started
    "config": GETTING_STARTED,
    "providers": GETTING_STARTED,
    "network": GETTING_STARTED,
    "enterprise": GETTING_STARTED,
    "troubleshooting": GETTING_STARTED,
    "1-0": GETTING_STARTED,
    # Usage
    "tui": "Usage",
    "cli": "Usage",
    "web": "Usage",
    "ide": "Usage",
    "zen": "Usage",
    "share": "Usage",
    "github": "Usage",
    "gitlab": "Usage",
    # Configure
    "tools": "Configure",
    "rules": "Configure",
    "agents": "Configure",
    "models": "Configure",
    "themes": "Configure",
    "keybinds": "Configure",
    "commands": "Configure",
    "formatters": "Configure",
    "permissions": "Configure",
    "lsp": "Configure",
    "mcp-servers": "Configure",
    "acp": "Configure",
    "skills": "Configure",
    "custom-tools": "Configure",
    # Develop
    "sdk": "Develop",
    "server": "Develop",
    "plugins": "Develop",
    "ecosystem": "Develop",
}


def category_for_path(path: str) -> str:
    """Return the category of a docs path.

    The docs root, and any path with at most one segment, is always
    "Getting Started". Otherwise the second segment is looked up in
    ``CATEGORY_MAP``; unknown slugs fall back to "General".
    """
    parts = [part for part in path.split("/") if part]
    if len(parts) <= 1:
        return GETTING_STARTED
    return CATEGORY_MAP.get(parts[1], DEFAULT_CATEGORY)
