"""Option registry: declared options keyed by canonical name.

The registry owns the short/long alias maps.  It never raises on bad
declarations; :meth:`OptionRegistry.register` hands the error back so
the caller can branch on it immediately.
"""

from __future__ import annotations

from collections.abc import Iterator

from argline.core.models import Option
from argline.exceptions import DuplicateOrInvalidOption


class OptionRegistry:
    """Stores declared options and resolves their aliases.

    Options iterate in declaration order.
    """

    def __init__(self) -> None:
        self._options: dict[str, Option] = {}
        self._short_to_long: dict[str, str] = {}
        self._long_to_short: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, option: Option) -> DuplicateOrInvalidOption | None:
        """Add *option* to the registry.

        Returns
        -------
        DuplicateOrInvalidOption | None
            The error when the option has neither a short nor a long
            name, when its canonical key is already registered, or when one of
            its names is already taken by another option's short name.
            ``None`` on success.
        """
        key = option.canonical_key
        if key is None:
            return DuplicateOrInvalidOption(
                "Both short_name and long_name can't be empty.",
                hint="You have to provide at least one of these.",
            )
        if key in self._options:
            return DuplicateOrInvalidOption(f"Option '{key}' is already registered.")
        short_name, long_name = option.short_name, option.long_name
        if short_name and (short_name in self._short_to_long or short_name in self._options):
            return DuplicateOrInvalidOption(f"Short name '{short_name}' is already in use.")
        if long_name and long_name in self._short_to_long:
            return DuplicateOrInvalidOption(
                f"Long name '{long_name}' collides with a registered short name."
            )

        self._options[key] = option
        if option.short_name and option.long_name:
            self._short_to_long[option.short_name] = option.long_name
            self._long_to_short[option.long_name] = option.short_name
        return None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, token: str) -> Option | None:
        """Find the option named by *token*, or ``None``.

        The token is tried as a canonical key first, then as a short
        alias of a long name.
        """
        option = self._options.get(token)
        if option is not None:
            return option
        long_name = self._short_to_long.get(token)
        if long_name is None:
            return None
        return self._options.get(long_name)

    def short_alias(self, long_name: str) -> str | None:
        return self._long_to_short.get(long_name)

    def long_alias(self, short_name: str) -> str | None:
        return self._short_to_long.get(short_name)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __bool__(self) -> bool:
        return len(self._options) > 0

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.resolve(token) is not None
