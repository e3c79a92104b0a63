"""Utility functions for linklist."""

DEFAULT_SCHEME = "http://"


def ensure_scheme(url: str) -> str:
    """Prefix ``http://`` to a bare host such as ``example.com/docs``."""
    url = url.strip()
    if url.lower().startswith(("http://", "https://")):
        return url
    return DEFAULT_SCHEME + url
