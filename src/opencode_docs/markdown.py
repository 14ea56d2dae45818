"""Convert rendered documentation HTML into markdown lines."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_LANGUAGE_RE = re.compile(r"language-(\w+)")
_HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4}


def convert_to_markdown(*roots: Tag) -> str:
    """Serialize every element below ``roots`` into one markdown text.

    Elements are visited in document order, so nested elements contribute
    their own lines (a paragraph inside a list item yields both). Whitespace
    is left as emitted; callers normalize it.

    Args:
        roots: Elements whose descendants are converted, in order. Link text
            emitted for an earlier root is not repeated for a later one.
            They are not modified.

    Returns:
        Raw markdown text.
    """
    clone = BeautifulSoup("".join(str(root) for root in roots), "lxml")
    _strip_unwanted_elements(clone)

    markdown = ""
    for tag in clone.find_all(True):
        markdown += _serialize_element(tag, emitted=markdown)
    return markdown


def _strip_unwanted_elements(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(["script", "style", "nav"]):
        tag.decompose()


def _serialize_element(tag: Tag, *, emitted: str) -> str:
    name = tag.name.lower()

    if name in _HEADING_TAGS:
        return f"\n{'#' * _HEADING_TAGS[name]} {_text(tag)}\n\n"

    if name == "p":
        return f"{_text(tag)}\n\n"

    if name == "pre":
        code = tag.find("code")
        source = code.get_text() if code else ""
        if not source:
            source = tag.get_text()
        language = _code_language(code)
        return f"\n```{language}\n{source.strip()}\n```\n\n"

    if name == "li":
        return f"- {_text(tag)}\n"

    if name == "a":
        href = tag.get("href")
        text = _text(tag)
        # Link text already emitted by an enclosing block is not repeated.
        if href and text and text not in emitted:
            return f"[{text}]({href}) "
        return ""

    return ""


def _code_language(code: Tag | None) -> str:
    if code is None:
        return ""
    classes = code.get("class") or []
    match = _LANGUAGE_RE.search(" ".join(classes))
    return match.group(1) if match else ""


def _text(tag: Tag) -> str:
    return tag.get_text().strip()
