"""Tests for typed value conversion (core/convert.py)."""

from __future__ import annotations

import pytest

from argline.core.convert import convert_value
from argline.core.models import OptionType
from argline.exceptions import InvalidOptionValue
from conftest import make_option


class TestConvertValue:
    @pytest.mark.parametrize(
        ("option_type", "raw", "expected"),
        [
            (OptionType.INTEGER, "42", 42),
            (OptionType.FLOAT, "2.5", 2.5),
            (OptionType.BIT, "1", 1),
            (OptionType.BIT, "0", 0),
            (OptionType.BOOLEAN, "true", True),
            (OptionType.BOOLEAN, "No", False),
            (OptionType.STRING, "text", "text"),
            (OptionType.GROUP, "true", "true"),
        ],
    )
    def test_conforming(self, option_type: OptionType, raw: str, expected: object) -> None:
        option = make_option(option_type=option_type, value=raw)
        assert convert_value(option) == expected

    @pytest.mark.parametrize(
        ("option_type", "raw"),
        [
            (OptionType.INTEGER, "4.2"),
            (OptionType.FLOAT, "abc"),
            (OptionType.BIT, "2"),
            (OptionType.BOOLEAN, "maybe"),
        ],
    )
    def test_non_conforming(self, option_type: OptionType, raw: str) -> None:
        option = make_option(option_type=option_type, value=raw)
        with pytest.raises(InvalidOptionValue, match="for argument foo"):
            convert_value(option)

    def test_falls_back_to_default(self) -> None:
        option = make_option(option_type=OptionType.INTEGER, default="7")
        assert convert_value(option) == 7

    def test_nothing_set(self) -> None:
        assert convert_value(make_option(default=None)) is None
