"""Greedy word wrapping for help and usage text.

:func:`wrap_text` packs whitespace-separated words into lines no wider
than a given width.  Every word except the last keeps one trailing
space, so joining the lines with ``""`` restores single-spaced text.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from argline.exceptions import UnsupportedWrapStrategy

# Control characters other than tab and newline.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def _strip_controls(word: str) -> str:
    return _CONTROL_RE.sub("", word)


def _escape_controls(word: str) -> str:
    return _CONTROL_RE.sub(lambda m: f"\\x{ord(m.group()):02x}", word)


STRATEGIES: dict[str, Callable[[str], str]] = {
    "console": _strip_controls,
    "escape": _escape_controls,
}
"""Special-character strategies selectable through ``collapse_tabs``."""


# ---------------------------------------------------------------------------
# Tokenising
# ---------------------------------------------------------------------------

def _split_words(text: str, preserve_newlines: bool) -> list[tuple[str, bool]]:
    """Return ``(word, starts_new_line)`` pairs."""
    if not preserve_newlines:
        return [(word, False) for word in text.split()]

    words: list[tuple[str, bool]] = []
    for raw in re.split(r"[^\S\n]+", text):
        if not raw:
            continue
        parts = raw.split("\n")
        words.extend((part, index > 0) for index, part in enumerate(parts) if part)
    return words


def _chunks(word: str, width: int) -> Iterator[str]:
    for start in range(0, len(word), width):
        yield word[start:start + width]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def wrap_text(
    text: str,
    width: int,
    trim: bool = True,
    preserve_newlines: bool = False,
    collapse_tabs: bool = False,
    strategy: str = "console",
    indent_continuation: bool = False,
    indent_string: str = "",
) -> Iterator[str]:
    """Wrap *text* into lines of at most *width* characters.

    Parameters
    ----------
    text:
        Text to wrap.
    width:
        Maximum line width.  Must be positive.
    trim:
        Drop the leading indentation of *text*.  When ``False`` the
        indentation is kept at the start of the first line.
    preserve_newlines:
        Treat a newline inside *text* as a forced break: the word after
        the newline starts a fresh line and the line before it loses its
        trailing space.
    collapse_tabs:
        Run every word through the special-character *strategy*.
    strategy:
        ``"console"`` drops control characters, ``"escape"`` renders
        them as ``\\xNN``.
    indent_continuation:
        Prefix every line after the first with *indent_string*.
    indent_string:
        Continuation prefix.  It counts toward *width*.

    Returns
    -------
    Iterator[str]
        A one-shot iterator over the wrapped lines.

    Raises
    ------
    UnsupportedWrapStrategy
        If *collapse_tabs* is set and *strategy* is unknown.
    ValueError
        If *width* is not positive.
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    transform: Callable[[str], str] | None = None
    if collapse_tabs:
        transform = STRATEGIES.get(strategy)
        if transform is None:
            raise UnsupportedWrapStrategy(
                f"Unsupported wrap strategy '{strategy}'.",
                hint=f"Use one of: {', '.join(sorted(STRATEGIES))}.",
            )
    return _wrap(
        text,
        width,
        trim,
        preserve_newlines,
        transform,
        indent_string if indent_continuation else "",
    )


def _wrap(
    text: str,
    width: int,
    trim: bool,
    preserve_newlines: bool,
    transform: Callable[[str], str] | None,
    continuation: str,
) -> Iterator[str]:
    lead = "" if trim else text[: len(text) - len(text.lstrip(" \t"))]
    words = _split_words(text, preserve_newlines)
    if transform is not None:
        words = [(transform(word), brk) for word, brk in words]
        words = [(word, brk) for word, brk in words if word]

    line = lead
    fresh = True
    last = len(words) - 1

    for index, (word, forced_break) in enumerate(words):
        if not fresh and forced_break:
            yield line[:-1] if line.endswith(" ") else line
            line = continuation
            fresh = True
        elif not fresh and len(line) + len(word) > width:
            yield line
            line = continuation
            fresh = True

        room = width - len(line)
        if len(word) > room and room > 0 and fresh:
            # Hard-split a word that cannot fit on any line.
            pieces = list(_chunks(word, room))
            if len(pieces) > 1:
                yield line + pieces[0]
                rest = word[len(pieces[0]):]
                line = continuation
                room = width - len(line)
                pieces = list(_chunks(rest, room)) if room > 0 else [rest]
                for piece in pieces[:-1]:
                    yield line + piece
                word = pieces[-1]

        line += word
        if index != last:
            line += " "
        fresh = False

    if not fresh or line.strip():
        yield line
