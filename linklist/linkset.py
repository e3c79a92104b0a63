"""Deduplicate and order link paths."""

from __future__ import annotations

from collections.abc import Iterable

from linklist.classify import ClassifiedLink


def collect(links: Iterable[ClassifiedLink | str]) -> list[str]:
    """Return the unique paths of ``links`` in ascending lexicographic order.

    Paths are compared as plain strings: ``/a`` and ``/a/`` stay distinct.
    """
    seen: set[str] = set()
    for link in links:
        seen.add(link.path if isinstance(link, ClassifiedLink) else link)
    return sorted(seen)
