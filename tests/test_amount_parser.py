"""Amount grammar: magnitude suffixes and the three error kinds."""

import pytest

from AmountParser import parse_amount
from ConvertErrors import AmountParseError, InvalidFormat, InvalidNumber


@pytest.mark.parametrize("text, expected", [
    ("100", 100.0),
    ("1k", 1000.0),
    ("2.5M", 2_500_000.0),
    ("3b", 3e9),
    ("1.5T", 1.5e12),
    ("0.25", 0.25),
    ("7K", 7000.0),
])
def test_parse_amount_valid(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", [
    "abc", "", "12x", "1kk", " 1", "1 ", "-5", "+5", "1,000", "1e3", "1.", ".5", "1.2.3", "1k\n",
])
def test_parse_amount_invalid_format(text):
    with pytest.raises(InvalidFormat):
        parse_amount(text)


def test_non_ascii_digits_are_rejected():
    # Arabic-Indic digits match `\d` but are not part of the grammar.
    with pytest.raises(InvalidFormat):
        parse_amount("١٢")


def test_overflowing_number_is_invalid_number():
    with pytest.raises(InvalidNumber):
        parse_amount("9" * 400)


def test_overflow_after_suffix_is_invalid_number():
    # The digits fit in a double, the scaled value does not.
    with pytest.raises(InvalidNumber):
        parse_amount("1" + "0" * 300 + "t")


def test_large_value_below_overflow_is_accepted():
    assert parse_amount("1" + "0" * 290 + "t") == pytest.approx(1e302)


def test_errors_share_a_base_class_and_message():
    with pytest.raises(AmountParseError) as exc:
        parse_amount("nope")
    assert str(exc.value) == "Invalid Format"
    assert exc.value.text == "nope"
    assert isinstance(exc.value, ValueError)


def test_parse_amount_is_repeatable():
    assert parse_amount("4.2k") == parse_amount("4.2k") == 4200.0
