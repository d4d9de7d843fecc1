"""``argline demo``: run a sample parser over the given tokens.

Useful to see the engine's behaviour from a shell::

    argline demo --name=Ada --count=2 --verbose --json

Parse errors go through the engine's own error path (usage, then
``"argline demo: error: ..."``, exit status 2).
"""

from __future__ import annotations

from collections.abc import Sequence

from argline.cli import exit_codes
from argline.cli.console import console
from argline.core.models import Option, OptionType
from argline.core.parser import ArgumentParser
from argline.infra.terminal import TerminalProbe

DEMO_PROGNAME = "argline demo"

DEMO_OPTIONS: tuple[tuple[str | None, str | None, OptionType, str | None, str], ...] = (
    ("n", "name", OptionType.STRING, "world", "Who to greet."),
    ("c", "count", OptionType.INTEGER, "1", "How many greetings to print."),
    ("r", "ratio", OptionType.FLOAT, "1.0", "Any floating point number."),
    ("b", "bit", OptionType.BIT, "0", "A single @Gbit@B, 0 or 1."),
    ("v", "verbose", OptionType.BOOLEAN, "false", "Print every option value."),
    (None, "json", OptionType.GROUP, None, "Emit JSON."),
    (None, "plain", OptionType.GROUP, None, "Emit plain text."),
)


def build_demo_parser(tokens: Sequence[str]) -> ArgumentParser:
    """Return a parser with the demo options declared over *tokens*."""
    parser = ArgumentParser(
        [DEMO_PROGNAME, *tokens],
        progname=DEMO_PROGNAME,
        description="@BSample parser shipped with argline.",
        width_probe=TerminalProbe(),
    )
    for short_name, long_name, option_type, default, help_text in DEMO_OPTIONS:
        parser.add_argument(
            Option(
                short_name=short_name,
                long_name=long_name,
                option_type=option_type,
                default=default,
                help=help_text,
            )
        )
    return parser


def run_demo(tokens: Sequence[str]) -> int:
    """Parse *tokens* with the demo parser and print the greeting."""
    parser = build_demo_parser(tokens)
    parser.parse()

    name = parser.get_typed_value("name")
    count = parser.get_typed_value("count")
    for _ in range(int(count or 0)):
        console.print(f"Hello, {name}!", markup=False)

    if parser.get_typed_value("verbose"):
        for option in parser.registry:
            key = option.canonical_key
            console.print(f"{key} = {parser.get_value(key)!r}", markup=False)
    return exit_codes.SUCCESS
