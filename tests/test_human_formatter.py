import pytest

from HumanFormatter import format_human, format_real


@pytest.mark.parametrize("value, expected", [
    (1000.0, "1.00k"),
    (910.0, "910.00"),
    (2_500_000.0, "2.50M"),
    (0.5, "0.50"),
    (0.0, "0.00"),
    (1.5e12, "1.50T"),
    (999.0, "999.00"),
    (123_456.0, "123.46k"),
])
def test_format_human(value, expected):
    assert format_human(value) == expected


def test_format_human_caps_at_largest_suffix():
    assert format_human(1e27) == "1000.00Y"


def test_format_human_decimals():
    assert format_human(1234.0, decimals=0) == "1k"


@pytest.mark.parametrize("value, expected", [
    (1000.0, "1000"),
    (910.0, "910"),
    (910.5, "910.5"),
    (0.1, "0.1"),
    (1e16, "10000000000000000"),
])
def test_format_real(value, expected):
    assert format_real(value) == expected
