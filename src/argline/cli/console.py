"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from argline.exceptions import ArglineError


class RichMissingError(ArglineError):
    """Raised when a Rich-only code path runs without Rich installed."""


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise :class:`RichMissingError`."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise RichMissingError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    try:
        _load_rich_console_class()
    except RichMissingError:
        return False
    return True


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain stderr fallback."""

    def print(self, *objects: object, **kwargs: Any) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except RichMissingError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, **kwargs)


console = _ConsoleProxy()
