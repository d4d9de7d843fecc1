"""CLI application entry point and command routing for argline.

This module is the **sole error boundary** of the ``argline`` tool.  It
catches :class:`~argline.exceptions.ArglineError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, renders a short message and returns a
well-defined exit code.

Commands
--------
* ``argline doctor``            environment diagnostics
* ``argline demo [tokens...]``  run the sample parser over *tokens*
* ``argline --version``
"""

from __future__ import annotations

import argparse
import sys

from argline.cli import exit_codes
from argline.cli.console import console
from argline.exceptions import ArglineError
from argline.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser of the tool itself."""
    parser = argparse.ArgumentParser(
        prog="argline",
        description="Option parsing and usage rendering engine: diagnostics and demo.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="'doctor' to run diagnostics, or 'demo' to try the sample parser.",
    )
    parser.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        help="Tokens handed to the demo parser.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_doctor() -> int:
    from argline.cli.doctor import run_doctor

    return run_doctor()


def _handle_demo(tokens: list[str]) -> int:
    from argline.cli.demo import run_demo

    return run_demo(tokens)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the argline CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.target is None:
        parser.print_help()
        return exit_codes.SUCCESS

    target: str = args.target.lower()
    if target == "doctor":
        return _handle_doctor()
    if target == "demo":
        return _handle_demo(list(args.tokens))

    parser.print_usage(sys.stderr)
    console.print(f"[bold red]Error:[/bold red] unknown command '{args.target}'")
    return exit_codes.USAGE_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ArglineError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
