"""Allow ``python -m argline`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m argline`` behaves identically to the ``argline`` console
script.
"""

from __future__ import annotations

from argline.cli.app import cli

if __name__ == "__main__":
    cli()
