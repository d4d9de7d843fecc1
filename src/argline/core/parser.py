"""Single-pass command-line parser.

:class:`ArgumentParser` walks the trailing tokens of an argument vector
once, from left to right, and writes each value into the matching
:class:`~argline.core.models.Option`.  Any problem ends the pass: in the
default mode the usage is printed, followed by
``"<progname>: error: <message>"``, and the process exits with status 2.

Token forms
-----------
``--name=value``
    Assigns ``value`` to ``name`` for every option type.
``--name``
    Legal for boolean and group options only; stores ``"true"``.

Exactly two leading characters are stripped from every token, whatever
prefix the option declares.  ``--f`` therefore reaches the option whose
short name is ``f``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from argline.core.color import color_encode
from argline.core.convert import convert_value
from argline.core.models import TRUTHY, Option, OptionType
from argline.core.protocols import TextSink, WidthProbe
from argline.core.registry import OptionRegistry
from argline.core.usage import UsageFormatter
from argline.exceptions import (
    DuplicateOrInvalidOption,
    GroupConflict,
    MissingArguments,
    MissingValueForNonBooleanFlag,
    ParseError,
    UnrecognizedArgument,
)

logger = logging.getLogger(__name__)

USAGE_ERROR_STATUS: int = 2
PREFIX_WIDTH: int = 2


def unknown_width() -> int:
    """Width probe used when the host injects none."""
    return -1


class _ParseState:
    """Mutual-exclusion bookkeeping for one :meth:`ArgumentParser.parse` call."""

    def __init__(self) -> None:
        self.locked_name: str | None = None
        self._locked_key: str | None = None

    def lock(self, name: str, option: Option) -> None:
        if self._locked_key is not None:
            raise GroupConflict(
                f"{self.locked_name} and {name} is a part of group, "
                "hence can be used only one at a time."
            )
        self.locked_name = name
        self._locked_key = option.canonical_key


class ArgumentParser:
    """Declares options, parses an argument vector and renders usage.

    Parameters
    ----------
    argv:
        Full argument vector, program name first.  Defaults to
        :data:`sys.argv`.
    progname:
        Name shown in usage and error messages.  Defaults to the stem of
        ``argv[0]`` (``./foo.exe`` becomes ``foo``).
    usage:
        Pre-written usage text that replaces the generated one.
    description, epilog:
        Printed after the usage, in that order, when non-empty.
    width_probe:
        Callable returning the terminal width or ``-1``.  Pass
        :class:`argline.infra.terminal.TerminalProbe` for a real terminal.
    stdout, stderr:
        Sinks for usage and error output.  Resolved from :mod:`sys` at
        write time when omitted.
    """

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        progname: str | None = None,
        usage: str | None = None,
        description: str | None = None,
        epilog: str | None = None,
        *,
        width_probe: WidthProbe | None = None,
        stdout: TextSink | None = None,
        stderr: TextSink | None = None,
    ) -> None:
        argv = list(sys.argv if argv is None else argv)
        self._args: list[str] = argv[1:]
        if not progname:
            progname = Path(argv[0]).stem if argv else "prog"
        self.progname: str = progname
        self.usage: str | None = usage
        self.description: str | None = description
        self.epilog: str | None = epilog
        self._registry = OptionRegistry()
        self._formatter = UsageFormatter(progname, width_probe or unknown_width)
        self._stdout = stdout
        self._stderr = stderr

    @property
    def registry(self) -> OptionRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def add_argument(self, option: Option) -> DuplicateOrInvalidOption | None:
        """Register *option*; returns the error instead of raising it."""
        error = self._registry.register(option)
        if error is not None:
            logger.debug("rejected option %r: %s", option, error)
        return error

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(
        self,
        argv: Sequence[str] | None = None,
        *,
        exit_on_error: bool = True,
    ) -> None:
        """Scan the argument vector and assign option values.

        Parameters
        ----------
        argv:
            Argument vector to parse instead of the one given at
            construction.  The first element is the program name.
        exit_on_error:
            When ``False`` the :class:`~argline.exceptions.ParseError`
            propagates instead of terminating the process.
        """
        tokens = self._args if argv is None else list(argv)[1:]
        try:
            self._scan(tokens)
        except ParseError as exc:
            if not exit_on_error:
                raise
            self.error(exc.message)

    def _scan(self, tokens: list[str]) -> None:
        if not tokens and self._registry:
            raise MissingArguments("Expected arguments but none is given.")

        state = _ParseState()
        for token in tokens:
            assigned = token.find("=") > 0
            if assigned:
                name_part, _, value = token.partition("=")
            else:
                name_part, value = token, None

            name = name_part[PREFIX_WIDTH:]
            option = self._registry.resolve(name)
            if option is None:
                raise UnrecognizedArgument(f"Un-recognized argument {name}.")

            if option.option_type is OptionType.GROUP:
                state.lock(name, option)

            if value is not None:
                option.value = value
            elif option.option_type in (OptionType.BOOLEAN, OptionType.GROUP):
                option.value = TRUTHY
            else:
                raise MissingValueForNonBooleanFlag(
                    f"Expected a value for argument {name}."
                )
            logger.debug("%s = %r", option.canonical_key, option.value)

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def get_value(self, name: str) -> str | None:
        """Return the parsed value of *name*, its default, or ``None``.

        Never aborts: an unknown name simply yields ``None``.
        """
        option = self._registry.resolve(name)
        if option is None:
            return None
        return option.effective_value

    get_argument_value = get_value

    def get_typed_value(self, name: str) -> bool | int | float | str | None:
        """Like :meth:`get_value`, converted to the option's declared type.

        Raises
        ------
        InvalidOptionValue
            If the stored string does not conform to the declared type.
        """
        option = self._registry.resolve(name)
        if option is None:
            return None
        return convert_value(option)

    # ------------------------------------------------------------------
    # Usage and errors
    # ------------------------------------------------------------------

    def render_usage(self) -> str:
        """Return the usage text: the custom one if given, else generated."""
        if self.usage:
            return self.usage
        return self._formatter.format(self._registry)

    def print_usage(self, file: TextSink | None = None) -> None:
        """Write the usage, description and epilog with colors encoded."""
        sink = file or self._stdout or sys.stdout
        sink.write(color_encode(self.render_usage() + "\n"))
        if self.description:
            sink.write(color_encode("\n" + self.description + "\n"))
        if self.epilog:
            sink.write(color_encode("\n" + self.epilog + "\n"))

    def error(self, message: str) -> NoReturn:
        """Print usage and *message* to the error sink, then exit with status 2."""
        sink = self._stderr or sys.stderr
        self.print_usage(file=sink)
        sink.write(f"{self.progname}: error: {message}\n")
        sys.exit(USAGE_ERROR_STATUS)
