"""Shared pytest fixtures and configuration for the argline test suite.

Guidelines
----------
* Never probe the real terminal: inject a fixed width.
* Capture output through injected ``io.StringIO`` sinks.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence

import pytest

from argline.core.models import Option, OptionType
from argline.core.parser import ArgumentParser


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_parser(
    stdout: io.StringIO, stderr: io.StringIO,
) -> Callable[..., ArgumentParser]:
    """Factory building a parser wired to the captured sinks, 80 columns wide."""

    def _make(
        argv: Sequence[str] = ("./foo.exe",),
        *options: Option,
        **kwargs: object,
    ) -> ArgumentParser:
        kwargs.setdefault("width_probe", lambda: 80)
        parser = ArgumentParser(
            list(argv), stdout=stdout, stderr=stderr, **kwargs,  # type: ignore[arg-type]
        )
        for option in options:
            assert parser.add_argument(option) is None
        return parser

    return _make


def make_option(**overrides: object) -> Option:
    """Option factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "short_name": "f",
        "long_name": "foo",
        "option_type": OptionType.BOOLEAN,
        "default": "false",
        "help": "Help text for foo.",
    }
    defaults.update(overrides)
    return Option(**defaults)  # type: ignore[arg-type]
