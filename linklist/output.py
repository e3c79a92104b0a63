"""Link renderers: plain or colorized lines, and JSON."""

from __future__ import annotations

from collections.abc import Iterable

import orjson
from rich.console import Console

from linklist.classify import LinkKind
from linklist.extract import LinkEntry


def link_style(entry: LinkEntry) -> str:
    """Rich style for a link's category."""
    if entry.is_directory:
        return "blue bold"
    if entry.kind is LinkKind.FILE:
        return "cyan bold"
    return "bold"


def print_links(entries: Iterable[LinkEntry], console: Console, color: bool = False) -> None:
    """Print one link per line, styled by category when ``color`` is set."""
    for entry in entries:
        console.print(
            entry.text,
            style=link_style(entry) if color else None,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def links_to_json(entries: Iterable[LinkEntry]) -> bytes:
    """Serialize links as an indented JSON array."""
    payload = [
        {
            "link": entry.text,
            "path": entry.path,
            "kind": entry.kind.value,
            "directory": entry.is_directory,
        }
        for entry in entries
    ]
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)
