"""Usage-string formatter.

Builds the text printed for ``--help``-style output and in front of
parse errors::

    Usage: prog [-f][-b](--json|--plain)

        -f, --foo=<BOOL>
                    Help text for foo.

Guarantees
----------
* Pure string building: the terminal width comes from an injected probe.
* Group options never get a per-flag entry; they are listed once as an
  alternation at the end of the summary line.
"""

from __future__ import annotations

from collections.abc import Iterable

from argline.core.models import TYPE_HINTS, Option, OptionType
from argline.core.protocols import WidthProbe
from argline.core.text_wrap import wrap_text

MIN_WIDTH: int = 80
"""Width used whenever the probed terminal is narrower or unknown."""

OPTION_INDENT: int = 4
HELP_INDENT: int = OPTION_INDENT << 2


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms)
# ---------------------------------------------------------------------------

def flag_token(option: Option) -> str:
    """Render the name shown in the summary line: ``-f`` or ``--foo``."""
    if option.short_name:
        return f"-{option.short_name}"
    return f"{option.prefix}{option.long_name}"


def option_heading(option: Option) -> str:
    """Render ``-f, --foo=<BOOL>`` for the per-option list."""
    names: list[str] = []
    if option.short_name:
        names.append(f"-{option.short_name}")
    if option.long_name:
        names.append(f"{option.prefix}{option.long_name}")
    return ", ".join(names) + "=" + TYPE_HINTS[option.option_type]


class UsageFormatter:
    """Formats the usage message for a set of options.

    Parameters
    ----------
    progname:
        Program name shown after ``Usage:``.
    width_probe:
        Callable returning the terminal width, or ``-1`` when unknown.
    """

    def __init__(self, progname: str, width_probe: WidthProbe) -> None:
        self._progname: str = progname
        self._width_probe: WidthProbe = width_probe

    @property
    def prefix(self) -> str:
        return f"Usage: {self._progname} "

    def terminal_width(self) -> int:
        width = self._width_probe()
        return width if width >= MIN_WIDTH else MIN_WIDTH

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def format(self, options: Iterable[Option]) -> str:
        """Return the full usage string for *options*."""
        options = list(options)
        width = self.terminal_width()
        flags = [opt for opt in options if opt.option_type is not OptionType.GROUP]
        groups = [opt for opt in options if opt.option_type is OptionType.GROUP]

        parts = [self.format_summary(flags, groups, width), "\n\n"]
        for option in flags:
            parts.append(self._format_option(option, width))
        return "".join(parts)

    def format_summary(
        self,
        flags: list[Option],
        groups: list[Option],
        width: int,
    ) -> str:
        """Return the ``Usage: prog [-a][-b](--x|--y)`` line, wrapped.

        Each time the running width reaches the budget a new line is
        started under the first flag and the budget is doubled.
        """
        prefix = self.prefix
        budget = width - len(prefix)
        running = 0
        out = [prefix.rstrip(" ") if not flags and not groups else prefix]

        for option in flags:
            token = f"[{flag_token(option)}]"
            running += len(token)
            if running >= budget:
                out.append("\n" + " " * len(prefix))
                budget *= 2
            out.append(token)

        if groups:
            out.append("(" + "|".join(flag_token(opt) for opt in groups) + ")")
        return "".join(out)

    def _format_option(self, option: Option, width: int) -> str:
        lines = [" " * OPTION_INDENT + option_heading(option) + "\n"]
        if option.help:
            pad = " " * HELP_INDENT
            for line in wrap_text(option.help, width - HELP_INDENT):
                lines.append(pad + line.rstrip(" ") + "\n")
        return "".join(lines)
