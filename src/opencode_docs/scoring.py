"""Relevance scoring and snippet extraction.

Scores are unbounded relevance weights, not probabilities. The weights are:

* +3 for a query token found in the title, +1 for one found in the content;
* for query tokens longer than four characters, +1.5 per title token and
  +0.5 per content token where one contains the other;
* the sum is divided by the number of query tokens;
* +5 when the whole query occurs verbatim (case-folded) in the content.
"""

from __future__ import annotations

import re
from typing import Final

TITLE_MATCH_WEIGHT: Final[float] = 3.0
CONTENT_MATCH_WEIGHT: Final[float] = 1.0
TITLE_PARTIAL_WEIGHT: Final[float] = 1.5
CONTENT_PARTIAL_WEIGHT: Final[float] = 0.5
EXACT_PHRASE_BONUS: Final[float] = 5.0

MIN_TOKEN_LENGTH: Final[int] = 3
PARTIAL_MATCH_MIN_LENGTH: Final[int] = 5
ELLIPSIS: Final[str] = "..."

_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)


def tokenize(text: str) -> list[str]:
    """Lower-case ``text``, split on non-word characters, drop short tokens."""
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def score(query: str, content: str, title: str) -> float:
    """Score how well ``query`` matches a page or section.

    Args:
        query: Free-text query.
        content: Markdown body to match against.
        title: Title to match against.

    Returns:
        Relevance weight; 0 when nothing matches or the query has no tokens.
    """
    query_tokens = tokenize(query)
    if not query_tokens:
        return 0.0

    content_tokens = set(tokenize(content))
    title_tokens = set(tokenize(title))

    total = 0.0
    for token in query_tokens:
        if token in title_tokens:
            total += TITLE_MATCH_WEIGHT
        if token in content_tokens:
            total += CONTENT_MATCH_WEIGHT

        if len(token) >= PARTIAL_MATCH_MIN_LENGTH:
            for candidate in title_tokens:
                if token in candidate or candidate in token:
                    total += TITLE_PARTIAL_WEIGHT
            for candidate in content_tokens:
                if token in candidate or candidate in token:
                    total += CONTENT_PARTIAL_WEIGHT

    normalized = total / len(query_tokens)

    if query.lower() in content.lower():
        return normalized + EXACT_PHRASE_BONUS
    return normalized


def extract_snippet(content: str, query: str, context_length: int = 200) -> str:
    """Return the part of ``content`` around the first query match.

    The whole query is searched first, then each query token in order. With
    no match, the start of the content is returned.
    """
    lower_content = content.lower()
    match_index = lower_content.find(query.lower())

    if match_index == -1:
        for token in tokenize(query):
            match_index = lower_content.find(token)
            if match_index != -1:
                break

    if match_index == -1:
        return content[: context_length * 2] + ELLIPSIS

    start = max(0, match_index - context_length)
    end = min(len(content), match_index + context_length)

    snippet = content[start:end]
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet = snippet + ELLIPSIS
    return snippet
