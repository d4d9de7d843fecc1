"""Infrastructure layer: operating-system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Probes report failure through sentinel values, never exceptions.
"""

from argline.infra.terminal import UNKNOWN_WIDTH, TerminalProbe, is_unix

__all__: list[str] = [
    "TerminalProbe",
    "UNKNOWN_WIDTH",
    "is_unix",
]
