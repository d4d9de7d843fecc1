"""argline: command-line option parsing and usage rendering.

Declare options, parse an argument vector in one pass, and print
width-aware, color-marked usage text.
"""

from argline.core import (
    ArgumentParser,
    Option,
    OptionRegistry,
    OptionType,
    UsageFormatter,
    color_encode,
    wrap_text,
)
from argline.infra.terminal import TerminalProbe
from argline.version import __version__

__all__: list[str] = [
    "ArgumentParser",
    "Option",
    "OptionRegistry",
    "OptionType",
    "TerminalProbe",
    "UsageFormatter",
    "__version__",
    "color_encode",
    "wrap_text",
]
