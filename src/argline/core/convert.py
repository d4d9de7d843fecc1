"""Typed access to option values.

The parser stores every value as the raw string it saw.  These helpers
convert on demand, so a bad ``--count=abc`` only fails where the host
actually asks for an ``int``.
"""

from __future__ import annotations

from argline.core.models import Option, OptionType
from argline.exceptions import InvalidOptionValue

_TRUE_WORDS: frozenset[str] = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS: frozenset[str] = frozenset({"false", "0", "no", "off"})


def _to_bool(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(raw)


def _to_bit(raw: str) -> int:
    if raw.strip() not in ("0", "1"):
        raise ValueError(raw)
    return int(raw)


_CONVERTERS = {
    OptionType.BOOLEAN: _to_bool,
    OptionType.BIT: _to_bit,
    OptionType.INTEGER: int,
    OptionType.FLOAT: float,
    OptionType.STRING: str,
    OptionType.GROUP: str,
}


def convert_value(option: Option) -> bool | int | float | str | None:
    """Return the effective value of *option* converted to its declared type.

    Raises
    ------
    InvalidOptionValue
        If the stored string does not parse as the declared type.
    """
    raw = option.effective_value
    if raw is None:
        return None
    try:
        return _CONVERTERS[option.option_type](raw)
    except ValueError as exc:
        name = option.canonical_key
        raise InvalidOptionValue(
            f"Invalid {option.option_type.value} value '{raw}' for argument {name}.",
        ) from exc
