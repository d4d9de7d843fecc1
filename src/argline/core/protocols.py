"""Protocols (interfaces) consumed by the core layer.

The core never probes the terminal or touches ``sys.stdout`` itself;
it receives objects satisfying these contracts at construction time.
"""

from __future__ import annotations

from typing import Protocol


class WidthProbe(Protocol):
    """Returns the terminal width in columns.

    Implementations must not raise; ``-1`` signals that the width is
    unknown.
    """

    def __call__(self) -> int:
        ...  # pragma: no cover


class TextSink(Protocol):
    """Anything with a file-like ``write`` method (``sys.stderr``, ``io.StringIO``)."""

    def write(self, text: str, /) -> object:
        ...  # pragma: no cover
