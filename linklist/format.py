"""Render collected paths for display."""

from __future__ import annotations

import enum

from linklist.origin import Origin


class DisplayMode(str, enum.Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


def format_link(
    path: str,
    base: str,
    origin: Origin,
    display_mode: DisplayMode = DisplayMode.ABSOLUTE,
) -> str:
    """Render ``path`` as printed by the CLI.

    Relative mode returns the path as collected. Absolute mode joins it onto
    ``base`` with exactly one ``/`` between them.
    """
    if display_mode is DisplayMode.RELATIVE:
        return path

    base = base or origin.prefix
    if base.endswith("/"):
        return base + (path[1:] if path.startswith("/") else path)
    if path.startswith("/"):
        return base + path
    return f"{base}/{path}"
