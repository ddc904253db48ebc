# test_parsing.py
"""Number and duration extraction from game text."""
import pytest
from hypothesis import given, strategies as st

from ambot.errors import BadFormatError, NotNumericError, ParseError
from ambot.utils.parsing import (
    atoi_safe,
    float_from_string,
    int_from_string,
    mask_username,
    parse_duration_to_seconds,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Alice got 8 pieces of pizza", 8),
        ("Rank is 3,210 now", 3210),
        ("Your credit is -3,456.75", -3456),
        ("$ 1,234,567", 1234567),
        ("42", 42),
    ],
)
def test_int_from_string(text, expected):
    assert int_from_string(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Your credit is -3,456.75", -3456.75),
        ("Price: $ 1,250", 1250.0),
        ("85.5%", 85.5),
    ],
)
def test_float_from_string(text, expected):
    assert float_from_string(text) == expected


@pytest.mark.parametrize("text", ["", "N/A", "no digits here"])
def test_non_numeric_text_fails(text):
    with pytest.raises(NotNumericError):
        int_from_string(text)
    with pytest.raises(NotNumericError):
        float_from_string(text)


@given(st.integers(min_value=-10**12, max_value=10**12))
def test_clean_integers_parse_to_themselves(n):
    assert int_from_string(str(n)) == n
    assert int_from_string(f"{n:,}") == n
    assert float_from_string(f"{n:,}") == n


@pytest.mark.parametrize(
    "text, seconds",
    [("00:00:15", 15), ("01:45:22", 6322), ("23:00:05", 82805)],
)
def test_parse_duration(text, seconds):
    assert parse_duration_to_seconds(text) == seconds


def test_parse_duration_bad_format():
    with pytest.raises(BadFormatError) as exc:
        parse_duration_to_seconds("bad")
    assert isinstance(exc.value, ParseError)


def test_atoi_safe_treats_junk_as_zero():
    assert atoi_safe("1200") == 1200
    assert atoi_safe("") == 0
    assert atoi_safe(None) == 0
    assert atoi_safe("n/a") == 0


def test_mask_username_keeps_domain():
    assert mask_username("pilot@example.com") == "p***t@example.com"
    assert mask_username("bob") == "b**"
    assert mask_username("ab") == "**"
