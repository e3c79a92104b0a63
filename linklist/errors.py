"""Error types raised by linklist.

Only the command-line layer turns these into exit codes and messages.
"""

from __future__ import annotations


class LinklistError(Exception):
    """Base class for all linklist errors."""


class MalformedUrlError(LinklistError):
    """The source URL cannot be split into scheme and host."""

    def __init__(self, url: str, reason: str = "not a valid http(s) URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to retrieve domain from provided URL '{url}': {reason}")


class FetchError(LinklistError):
    """The page could not be downloaded, or the server did not answer 200."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class NoLinksFoundError(LinklistError):
    """Extraction finished but nothing matched the selection."""

    def __init__(self, message: str = "No links were found."):
        super().__init__(message)


class InternalPatternError(LinklistError):
    """A built-in regular expression failed to compile."""
