"""``argline doctor``: environment diagnostics command.

Reports what the usage formatter will see on this machine: the probed
terminal width, the width actually used after the 80-column floor, and
whether colored output can be shown.  Renders a Rich table, or a plain
table when Rich is missing.
"""

from __future__ import annotations

import platform
import sys

from argline.cli import exit_codes
from argline.cli.console import console, rich_available
from argline.core.usage import MIN_WIDTH
from argline.infra.terminal import UNKNOWN_WIDTH, TerminalProbe
from argline.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _argline_version_check() -> tuple[str, str, str]:
    return "argline", __version__, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _terminal_width_check(probe: TerminalProbe | None = None) -> tuple[str, str, str]:
    """Return (label, value, status) for the terminal width row.

    An unknown or narrow terminal is only a warning: usage text then
    falls back to the minimum width.
    """
    width = (probe or TerminalProbe())()
    if width == UNKNOWN_WIDTH:
        return "Terminal", f"unknown (using {MIN_WIDTH})", "[yellow]WARN[/yellow]"
    if width < MIN_WIDTH:
        return "Terminal", f"{width} cols (using {MIN_WIDTH})", "[yellow]WARN[/yellow]"
    return "Terminal", f"{width} cols", "[green]OK[/green]"


def _color_check() -> tuple[str, str, str]:
    """Return (label, value, status) for ANSI color support."""
    if sys.stdout.isatty():
        return "Color", "tty", "[green]OK[/green]"
    return "Color", "not a tty (escapes shown raw)", "[yellow]WARN[/yellow]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nargline doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _argline_version_check(),
        _python_version_check(),
        _os_check(),
        _terminal_width_check(),
        _color_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    if rich_available():
        from rich.table import Table

        table = Table(
            title="argline doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")
    else:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
