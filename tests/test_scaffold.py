"""Smoke tests: package wiring, exception hierarchy, exit codes, routing."""

from __future__ import annotations

from unittest.mock import patch

import pytest

import argline
from argline import __version__
from argline.cli import exit_codes
from argline.cli.app import main
from argline.exceptions import (
    ArglineError,
    DuplicateOrInvalidOption,
    GroupConflict,
    InvalidOptionValue,
    MissingArguments,
    MissingValueForNonBooleanFlag,
    ParseError,
    UnrecognizedArgument,
    UnsupportedWrapStrategy,
)


# ---------------------------------------------------------------------------
# Version and public surface
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_public_names_exported(self) -> None:
        for name in argline.__all__:
            assert hasattr(argline, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            DuplicateOrInvalidOption,
            InvalidOptionValue,
            UnsupportedWrapStrategy,
            ParseError,
        ],
    )
    def test_inherit_from_base(self, exc_class: type[ArglineError]) -> None:
        assert issubclass(exc_class, ArglineError)

    @pytest.mark.parametrize(
        "exc_class",
        [MissingArguments, UnrecognizedArgument, MissingValueForNonBooleanFlag, GroupConflict],
    )
    def test_parse_errors(self, exc_class: type[ArglineError]) -> None:
        assert issubclass(exc_class, ParseError)

    def test_message_and_hint(self) -> None:
        err = ArglineError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert ArglineError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_usage_error_is_two(self) -> None:
        assert exit_codes.USAGE_ERROR == 2

    def test_codes_are_distinct(self) -> None:
        codes = {
            exit_codes.SUCCESS,
            exit_codes.GENERAL_ERROR,
            exit_codes.USAGE_ERROR,
            exit_codes.UNEXPECTED_ERROR,
            exit_codes.KEYBOARD_INTERRUPT,
        }
        assert len(codes) == 5


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self) -> None:
        assert main([]) == exit_codes.SUCCESS

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    @patch("argline.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_routes(self, _mock_doc: object) -> None:
        assert main(["doctor"]) == exit_codes.SUCCESS

    def test_demo_routes_tokens(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from argline.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module, "_handle_demo", lambda tokens: seen.append(tokens) or exit_codes.SUCCESS,
        )
        assert main(["demo", "--name=Ada", "--verbose"]) == exit_codes.SUCCESS
        assert seen == [["--name=Ada", "--verbose"]]

    def test_unknown_command(self) -> None:
        assert main(["frobnicate"]) == exit_codes.USAGE_ERROR
