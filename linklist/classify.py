"""Same-origin filtering and page/file classification of scanned hrefs."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from linklist.origin import Origin
from linklist.scan import compile_pattern

# Letters, digits, "_", "-", "." and "/"; no segment may start with a dot.
LOCAL_PATH = compile_pattern(r"^(?!.*(?:^|/)\.)[\w\-./]+$")

FOREIGN_PREFIXES = ("http://", "https://", "//")


class LinkKind(str, enum.Enum):
    PAGE = "page"
    FILE = "file"


@dataclass(frozen=True)
class ClassifiedLink:
    path: str
    kind: LinkKind


def kind_of(path: str) -> LinkKind:
    """FILE if the text after the last '/' contains a '.', else PAGE."""
    return LinkKind.FILE if "." in path.rsplit("/", 1)[-1] else LinkKind.PAGE


def strip_origin(href: str, origin: Origin) -> str | None:
    """Reduce ``href`` to a local path, or return None for cross-origin hrefs."""
    prefix = origin.prefix
    if href[: len(prefix)].lower() == prefix.lower():
        rest = href[len(prefix):]
        if not rest:
            return "/"
        # "http://host.evil/..." also starts with "http://host"
        if not rest.startswith("/"):
            return None
        return rest

    if href.lower().startswith(FOREIGN_PREFIXES):
        return None
    return href


def classify_href(href: str, origin: Origin) -> ClassifiedLink | None:
    """Classify one scanned href against ``origin``.

    Returns None when the href points at another origin or does not look like
    a local path (``mailto:``, ``javascript:``, ``../``, empty values and so on).
    """
    path = strip_origin(href.strip(), origin)
    if path is None or not LOCAL_PATH.match(path):
        return None
    return ClassifiedLink(path=path, kind=kind_of(path))


def classify_all(hrefs: Iterable[str], origin: Origin) -> Iterator[ClassifiedLink]:
    """Yield the accepted links of ``hrefs``, dropping rejected ones silently."""
    for href in hrefs:
        link = classify_href(href, origin)
        if link is not None:
            yield link


def matches_file_type(path: str, file_type: str) -> bool:
    """Check a file path against a ``--file-type`` filter (``all`` or an extension)."""
    wanted = file_type.strip().lower().lstrip(".")
    if wanted == "all":
        return True
    name = path.rstrip("/").rsplit("/", 1)[-1]
    if "." not in name:
        return False
    return name.rsplit(".", 1)[-1].lower() == wanted


def page_pass(links: Iterable[ClassifiedLink]) -> list[ClassifiedLink]:
    return [link for link in links if link.kind is LinkKind.PAGE]


def file_pass(links: Iterable[ClassifiedLink], file_type: str = "all") -> list[ClassifiedLink]:
    return [
        link for link in links
        if link.kind is LinkKind.FILE and matches_file_type(link.path, file_type)
    ]
