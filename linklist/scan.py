"""Lexical href scanner.

This is a pattern match on ``href="..."`` / ``href='...'``, not an HTML parser:
unquoted attribute values and character entities are not handled.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from linklist.errors import InternalPatternError


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    """Compile a built-in pattern, reporting failure as a programming defect."""
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InternalPatternError(f"Failed to parse regex string {pattern!r}: {e}") from e


# Group 2 stops at the first '#' or '?'; the rest up to the closing quote is
# matched and dropped.
HREF_PATTERN = compile_pattern(r"""(?<![\w-])href=(["'])([^"'#?]*)[^"']*\1""", re.IGNORECASE)


class HrefScan:
    """Restartable sequence of href values found in ``html``.

    Each iteration rescans the text from the start, so the same document always
    yields the same values in the same order.
    """

    def __init__(self, html: str):
        self.html = html

    def __iter__(self) -> Iterator[str]:
        for match in HREF_PATTERN.finditer(self.html):
            yield match.group(2)

    def __repr__(self) -> str:
        return f"HrefScan({len(self.html)} chars)"


def scan(html: str) -> HrefScan:
    """Scan HTML text for href values, fragment and query already stripped."""
    return HrefScan(html or "")
