"""Tests for amount parser."""

from decimal import Decimal

import pytest

from pocketbook.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        ("123.45", Decimal("123.45")),
        ("5000", Decimal("5000")),
        (" 0.5 ", Decimal("0.5")),
        ("0", Decimal("0")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


def test_parse_amount_keeps_exact_digits():
    assert str(parse_amount("10.10")) == "10.10"


def test_parse_negative_rejected_by_default():
    with pytest.raises(ValueError) as excinfo:
        parse_amount("-5")

    assert "must not be negative" in str(excinfo.value)


def test_parse_negative_allowed():
    assert parse_amount("-5", allow_negative=True) == Decimal("-5")


@pytest.mark.parametrize("value", ["", "  ", "abc", "$12", "1,000", "Infinity", "NaN"])
def test_parse_invalid_amount(value):
    with pytest.raises(ValueError):
        parse_amount(value)
