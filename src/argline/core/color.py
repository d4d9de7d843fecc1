"""Inline color markers for terminal output.

``@R``, ``@B`` and ``@G`` switch to red, blue and green.  Doubling the
``@`` (``@@R``) prints the marker literally.  Every encoded string ends
with a single reset code so colors never leak past it.
"""

from __future__ import annotations

import re

RESET: str = "\033[0m"

COLOR_CODES: dict[str, str] = {
    "R": "\033[0;31m",
    "B": "\033[0;34m",
    "G": "\033[0;32m",
}

_MARKER_RE = re.compile(r"@(@?)([RBG])")


def _substitute(match: re.Match[str]) -> str:
    if match.group(1):
        return "@" + match.group(2)
    return COLOR_CODES[match.group(2)]


def color_encode(text: str) -> str:
    """Replace color markers in *text* with ANSI escape sequences.

    >>> color_encode("a@Rb") == "a\\033[0;31mb\\033[0m"
    True
    """
    return _MARKER_RE.sub(_substitute, text) + RESET
