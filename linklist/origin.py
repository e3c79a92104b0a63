"""Split a source URL into its origin and the directory the page lives in."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from linklist.errors import MalformedUrlError

KNOWN_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class Origin:
    """Scheme, host and optional explicit port of a URL."""

    scheme: str
    host: str
    port: int | None = None

    @property
    def prefix(self) -> str:
        """Render as ``scheme://host[:port]``."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is not None:
            return f"{self.scheme}://{host}:{self.port}"
        return f"{self.scheme}://{host}"

    def __str__(self) -> str:
        return self.prefix


def resolve_origin(url: str) -> Origin:
    """Parse an absolute http(s) URL into an :class:`Origin`.

    Raises:
        MalformedUrlError: missing or unknown scheme, missing host, bad port.
    """
    try:
        parsed = urlsplit(url.strip())
        port = parsed.port
    except ValueError as e:
        raise MalformedUrlError(url, str(e)) from e

    scheme = parsed.scheme.lower()
    if not scheme:
        raise MalformedUrlError(url, "missing scheme")
    if scheme not in KNOWN_SCHEMES:
        raise MalformedUrlError(url, f"unsupported scheme '{scheme}'")

    host = parsed.hostname
    if not host:
        raise MalformedUrlError(url, "missing host")

    return Origin(scheme=scheme, host=host, port=port)


def resolve_base_path(url: str) -> str:
    """Return the directory-equivalent prefix of ``url``.

    A final path segment containing a ``.`` is treated as a file and removed
    (``http://h/dir/page.html`` -> ``http://h/dir/``). Anything else, including a
    bare domain, keeps its path. Credentials, query and fragment are always
    dropped.
    """
    parsed = urlsplit(url)
    netloc = parsed.netloc.rpartition("@")[2]
    segments = parsed.path.split("/")

    while segments and not segments[-1]:
        segments.pop()
    if not segments or "." not in segments[-1]:
        return urlunsplit((parsed.scheme, netloc, parsed.path, "", ""))

    path = "/".join(segments[:-1]) + "/"
    return urlunsplit((parsed.scheme, netloc, path, "", ""))
