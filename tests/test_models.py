"""Tests for the option model (core/models.py)."""

from __future__ import annotations

import pytest

from argline.core.models import DEFAULT_PREFIX, TYPE_HINTS, Option, OptionType
from conftest import make_option


class TestOptionDefaults:
    def test_default_prefix(self) -> None:
        assert make_option().prefix == "--" == DEFAULT_PREFIX

    def test_explicit_prefix(self) -> None:
        assert make_option(prefix="~~").prefix == "~~"

    def test_value_starts_unset(self) -> None:
        assert make_option().value is None


class TestValueRequired:
    @pytest.mark.parametrize("option_type", list(OptionType))
    def test_without_default(self, option_type: OptionType) -> None:
        option = make_option(option_type=option_type, default=None)
        if option_type is OptionType.BOOLEAN:
            assert option.value_required is False
        else:
            assert option.value_required is True

    def test_default_makes_value_optional(self) -> None:
        assert make_option(option_type=OptionType.INTEGER, default="3").value_required is False


class TestCanonicalKey:
    def test_prefers_long_name(self) -> None:
        assert make_option().canonical_key == "foo"

    def test_falls_back_to_short_name(self) -> None:
        assert make_option(long_name=None).canonical_key == "f"

    def test_empty_names_have_no_key(self) -> None:
        assert make_option(short_name="", long_name="").canonical_key is None


class TestEffectiveValue:
    def test_default_when_unset(self) -> None:
        assert make_option(default="bar").effective_value == "bar"

    def test_value_wins(self) -> None:
        assert make_option(default="bar", value="baz").effective_value == "baz"


class TestRepr:
    def test_short_help(self) -> None:
        expected = (
            "<Option short_name('f'), long_name('foo'), value('None'), "
            "option_type('BOOLEAN'), help('Help text.')>"
        )
        assert repr(make_option(help="Help text.")) == expected

    def test_long_help_is_trimmed(self) -> None:
        option = make_option(
            help="This help text is written so lengthy just because we want to test it."
        )
        assert repr(option).endswith("help('This help text is wr...')>")


class TestTypeHints:
    def test_group_has_no_hint(self) -> None:
        assert OptionType.GROUP not in TYPE_HINTS

    def test_hints(self) -> None:
        assert TYPE_HINTS[OptionType.INTEGER] == "<INT>"
        assert TYPE_HINTS[OptionType.FLOAT] == "<FLOAT>"
        assert TYPE_HINTS[OptionType.BOOLEAN] == "<BOOL>"
        assert TYPE_HINTS[OptionType.STRING] == "<STRING>"
        assert TYPE_HINTS[OptionType.BIT] == "<BIT>"


def test_option_is_mutable() -> None:
    option = Option(long_name="foo")
    option.value = "x"
    assert option.value == "x"
