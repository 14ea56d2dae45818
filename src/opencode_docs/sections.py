"""Split page markdown into heading-delimited sections."""

from __future__ import annotations

import re

from opencode_docs.anchors import derive_section_anchor
from opencode_docs.schemas import Page, Section

_SECTION_HEADING_RE = re.compile(r"^(#{1,4})\s+(.+)$")


def extract_sections(page: Page) -> list[Section]:
    """Split a page's markdown on ``#`` to ``####`` heading lines.

    Text before the first heading is discarded, and sections whose body is
    empty after trimming are dropped. Sections are recomputed on every call.
    """
    sections: list[Section] = []
    title: str | None = None
    body: list[str] = []

    def close_section() -> None:
        if title is None:
            return
        content = "\n".join(body).strip()
        if content:
            sections.append(
                Section(
                    title=title,
                    anchor=derive_section_anchor(title),
                    content=content,
                    page_path=page.path,
                )
            )

    for line in page.content.split("\n"):
        match = _SECTION_HEADING_RE.match(line)
        if match:
            close_section()
            title = match.group(2)
            body = []
        elif title is not None:
            body.append(line)

    close_section()
    return sections
