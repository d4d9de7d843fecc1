"""Custom exception hierarchy for argline.

Every error raised or returned by the library inherits from
:class:`ArglineError`, so host programs can catch a single type at
their own error boundary.

Hierarchy
---------
ArglineError
├── DuplicateOrInvalidOption
├── InvalidOptionValue
├── UnsupportedWrapStrategy
└── ParseError
    ├── MissingArguments
    ├── UnrecognizedArgument
    ├── MissingValueForNonBooleanFlag
    └── GroupConflict
"""

from __future__ import annotations


class ArglineError(Exception):
    """Base exception for all argline errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registration ----------------------------------------------------------

class DuplicateOrInvalidOption(ArglineError):
    """An option has no name, or its canonical key is already taken.

    Returned (not raised) by registration so the host decides what to do.
    """


# --- Values ----------------------------------------------------------------

class InvalidOptionValue(ArglineError):
    """A stored value does not conform to the option's declared type."""


# --- Text wrapping ---------------------------------------------------------

class UnsupportedWrapStrategy(ArglineError):
    """Raised when ``wrap_text`` is asked for an unknown strategy name."""


# --- Parsing ---------------------------------------------------------------

class ParseError(ArglineError):
    """Base class for errors found while scanning the argument vector."""


class MissingArguments(ParseError):
    """Options are declared but the command line carries no tokens."""


class UnrecognizedArgument(ParseError):
    """A token does not resolve to any registered option."""


class MissingValueForNonBooleanFlag(ParseError):
    """A value-taking option was given without ``=<value>``."""


class GroupConflict(ParseError):
    """Two options of a mutual-exclusion group were used together."""
