"""
Unit tests for the lenient field converters.
"""

import pytest

from bitfinex_wallet_kit.utilities.converters import (
    dict_or_none,
    field_at,
    float_or_zero,
    int_or_zero,
    str_or_empty,
)


class TestFloatOrZero:
    """Test cases for float_or_zero."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 0.5), (-0.26300954, -0.26300954), (3, 3.0), (0, 0.0)],
    )
    def test_numbers(self, value, expected):
        assert float_or_zero(value) == expected

    @pytest.mark.parametrize(
        "value", [None, "0.5", "", [], {}, True, False, float("nan"), float("inf")]
    )
    def test_non_numbers_yield_zero(self, value):
        assert float_or_zero(value) == 0.0


class TestIntOrZero:
    """Test cases for int_or_zero."""

    def test_int_passthrough(self):
        assert int_or_zero(1569348774000) == 1569348774000

    def test_float_is_truncated(self):
        # JSON numbers may arrive as floats
        assert int_or_zero(1000.0) == 1000
        assert int_or_zero(13105603.9) == 13105603

    @pytest.mark.parametrize(
        "value", [None, "1", "", [1], True, float("inf"), float("-inf"), float("nan")]
    )
    def test_non_numbers_yield_zero(self, value):
        assert int_or_zero(value) == 0


class TestStrOrEmpty:
    """Test cases for str_or_empty."""

    def test_string_passthrough(self):
        assert str_or_empty("COMPLETED") == "COMPLETED"
        assert str_or_empty("") == ""

    @pytest.mark.parametrize("value", [None, 0, 1.5, [], {}, True])
    def test_non_strings_yield_empty(self, value):
        assert str_or_empty(value) == ""


class TestHelpers:
    """Test cases for dict_or_none and field_at."""

    def test_dict_or_none_copies(self):
        source = {"reason": "TRADE"}
        result = dict_or_none(source)
        assert result == source
        assert result is not source

    def test_dict_or_none_rejects_non_dicts(self):
        assert dict_or_none(None) is None
        assert dict_or_none(["reason", "TRADE"]) is None

    def test_field_at_in_range(self):
        assert field_at([1, 2, 3], 2) == 3

    def test_field_at_out_of_range(self):
        assert field_at([1, 2, 3], 3) is None
        assert field_at([], 0) is None
        assert field_at([1], -1) is None
