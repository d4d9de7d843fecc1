"""Domain models for argline.

:class:`Option` is the one mutable model in the library: the parser
writes the effective value into it.  Everything else about an option is
fixed at declaration time.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_PREFIX: str = "--"
"""Prefix most programs put in front of long option names."""

TRUTHY: str = "true"
"""Value stored for a flag that appears without ``=<value>``."""


# ---------------------------------------------------------------------------
# Option types
# ---------------------------------------------------------------------------

class OptionType(enum.Enum):
    """How an option may be used on the command line."""

    GROUP = "group"
    """Member of a mutual-exclusion group: one per invocation."""

    BOOLEAN = "boolean"
    """Presence means true, absence falls back to the default."""

    BIT = "bit"
    """Accepts ``0`` or ``1``."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


TYPE_HINTS: dict[OptionType, str] = {
    OptionType.INTEGER: "<INT>",
    OptionType.FLOAT: "<FLOAT>",
    OptionType.BOOLEAN: "<BOOL>",
    OptionType.STRING: "<STRING>",
    OptionType.BIT: "<BIT>",
}
"""Placeholder rendered after ``=`` in the usage text for each type."""


# ---------------------------------------------------------------------------
# Option
# ---------------------------------------------------------------------------

@dataclass(slots=True, repr=False)
class Option:
    """A declared command-line option.

    Attributes
    ----------
    short_name : str | None
        Single-dash alias, without the dash (e.g. ``"f"``).
    long_name : str | None
        Long alias, without the prefix (e.g. ``"foo"``).
    option_type : OptionType
        Declared value type.
    value : str | None
        Current (parsed) value.  ``None`` until the parser assigns one,
        unless an explicit value was given at declaration.
    default : str | None
        Fallback returned when no value was parsed.
    help : str | None
        Help text shown in the usage message.
    prefix : str
        Prefix rendered in front of :attr:`long_name` in the usage text.
    """

    short_name: str | None = None
    long_name: str | None = None
    option_type: OptionType = OptionType.STRING
    value: str | None = None
    default: str | None = None
    help: str | None = None
    prefix: str = DEFAULT_PREFIX

    @property
    def value_required(self) -> bool:
        """Whether an explicit value must be given on the command line."""
        return self.option_type is not OptionType.BOOLEAN and self.default is None

    @property
    def canonical_key(self) -> str | None:
        """Primary lookup identity: the long name if present, else the short one."""
        return self.long_name or self.short_name or None

    @property
    def effective_value(self) -> str | None:
        return self.value if self.value is not None else self.default

    def __repr__(self) -> str:
        help_text = self.help or ""
        # Keep debug output to a single readable line.
        if len(help_text) > 23:
            help_text = help_text[:20] + "..."
        return (
            f"<Option short_name('{self.short_name}'), long_name('{self.long_name}'), "
            f"value('{self.value}'), option_type('{self.option_type.name}'), "
            f"help('{help_text}')>"
        )
