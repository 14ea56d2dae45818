"""Anchor and heading id derivation."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ANCHOR_RE = re.compile(r"[^\w-]", re.ASCII)


def derive_heading_id(text: str) -> str:
    """Derive a heading id when the markup does not provide one.

    Lower-cases ``text`` and replaces each whitespace run with a hyphen.
    """
    return _WHITESPACE_RE.sub("-", text.lower())


def derive_section_anchor(title: str) -> str:
    """Derive a section anchor from a markdown heading title.

    Lower-cases ``title``, turns whitespace runs into hyphens and drops every
    character that is neither a word character nor a hyphen.
    """
    return _NON_ANCHOR_RE.sub("", _WHITESPACE_RE.sub("-", title.lower()))
