"""
Unit tests for domain objects.

Tests for the Amount value object and the wire/display formatters built on it.
"""

from decimal import Decimal

import pytest

from bitfinex_wallet_kit.domain.amount import Amount
from bitfinex_wallet_kit.utilities.constants import ValidationError
from bitfinex_wallet_kit.utilities.formatters import (
    format_amount,
    format_timestamp,
    format_wire_amount,
)


class TestAmount:
    """Test cases for Amount domain object."""

    def test_smallest_unit_has_no_exponent(self):
        assert Amount.from_value(0.00000001).format_api() == "0.00000001"
        assert format_wire_amount(0.00000001) == "0.00000001"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.5, "0.5"),
            (1.0, "1"),
            (2.50, "2.5"),
            (0.1, "0.1"),
            (123456.789, "123456.789"),
            (1e20, "100000000000000000000"),
            (3, "3"),
            ("0.00100", "0.00100"),
            (Decimal("2.5E-7"), "0.00000025"),
        ],
    )
    def test_wire_format(self, value, expected):
        assert format_wire_amount(value) == expected

    def test_float_uses_shortest_repr(self):
        # 0.1 is not exactly representable; the shortest repr is what the caller meant
        assert Amount.from_value(0.1).value == Decimal("0.1")

    def test_amount_passthrough(self):
        amount = Amount.from_string("1.5")
        assert Amount.from_value(amount) is amount

    @pytest.mark.parametrize("value", [0, -1, 0.0, -0.5, "0", "-1", "abc", "", "NaN", "inf"])
    def test_invalid_amounts(self, value):
        with pytest.raises(ValidationError):
            Amount.from_value(value)

    @pytest.mark.parametrize("value", [None, True, [1]])
    def test_invalid_types(self, value):
        with pytest.raises(ValidationError):
            Amount.from_value(value)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Amount.from_value(-1)

    def test_string_representation(self):
        assert str(Amount.from_value(0.00000001)) == "0.00000001"
        assert str(Amount.from_value("2.5")) == "2.5"


class TestFormatters:
    """Test cases for display formatters."""

    def test_format_amount(self):
        assert format_amount(0.5) == "0.50000000"
        assert format_amount("abc") == "abc"

    def test_format_timestamp_unknown(self):
        assert format_timestamp(None) == "Unknown"
        assert format_timestamp(0) == "Unknown"

    def test_format_timestamp_milliseconds(self):
        assert format_timestamp(1569348774000) == format_timestamp(1569348774)
