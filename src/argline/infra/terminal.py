"""Infrastructure: terminal width probing.

The probe is the only part of argline that asks the operating system
anything.  It never raises; callers receive ``-1`` whenever the width
cannot be determined.

Rules
-----
* The OS name is injected (defaulting to :func:`platform.system`), not
  cached in a module global.
* Width comes from :func:`os.get_terminal_size`: no subprocess.
* No user-facing output; failures are logged at WARNING level.
"""

from __future__ import annotations

import logging
import os
import platform
import sys

UNKNOWN_WIDTH: int = -1

_UNIX_MARKERS: tuple[str, ...] = ("nix", "nux", "aix", "darwin", "bsd", "sunos")


def is_unix(system: str) -> bool:
    """Return ``True`` when *system* names a Unix-like OS."""
    lowered = system.lower()
    return any(marker in lowered for marker in _UNIX_MARKERS)


class TerminalProbe:
    """Callable width probe satisfying :class:`~argline.core.protocols.WidthProbe`.

    Usage::

        parser = ArgumentParser(width_probe=TerminalProbe())
    """

    def __init__(
        self,
        system: str | None = None,
        *,
        fd: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.system: str = system if system is not None else platform.system()
        self._fd = fd
        self._logger = logger or logging.getLogger(__name__)

    def __call__(self) -> int:
        if not is_unix(self.system):
            return UNKNOWN_WIDTH
        try:
            fd = self._fd if self._fd is not None else sys.stdout.fileno()
            columns = os.get_terminal_size(fd).columns
        except (OSError, ValueError, AttributeError) as exc:
            self._logger.warning("could not determine terminal width: %s", exc)
            return UNKNOWN_WIDTH
        return columns if columns > 0 else UNKNOWN_WIDTH
