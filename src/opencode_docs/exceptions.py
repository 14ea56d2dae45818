"""Custom exceptions for opencode_docs."""

from __future__ import annotations


class OpencodeDocsError(Exception):
    """Base exception for opencode_docs operations."""


class FetchError(OpencodeDocsError):
    """Error fetching a documentation page.

    Attributes:
        status_code: HTTP status of the failed response, if one was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(OpencodeDocsError):
    """Persisted index could not be parsed."""


class BuildFailure(OpencodeDocsError):
    """A full index build produced nothing usable."""
