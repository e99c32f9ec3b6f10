"""Tests for countup.formatters."""

import pytest

from countup.formatters import FORMATTERS, compact, get_formatter, padded, plain, thousands


def test_plain():
    assert plain(0) == "0"
    assert plain(-42) == "-42"


def test_thousands():
    assert thousands(1234567) == "1,234,567"
    assert thousands(-1500) == "-1,500"
    assert thousands(12) == "12"


def test_compact():
    assert compact(999) == "999"
    assert compact(1500) == "1.5k"
    assert compact(2_300_000) == "2.3M"
    assert compact(-4200) == "-4.2k"


def test_padded():
    assert padded(42) == "0000000042"
    assert len(padded(1234567890)) == 10


def test_non_finite_values_pass_through():
    for fn in FORMATTERS.values():
        assert fn(float("inf")) == "inf"


def test_get_formatter():
    assert get_formatter("thousands") is thousands


def test_get_formatter_unknown_lists_names():
    with pytest.raises(KeyError) as exc:
        get_formatter("roman")
    assert "plain" in str(exc.value)


def test_compact_rounds_up_into_millions():
    assert compact(999_949) == "999.9k"
    assert compact(999_950) == "1.0M"
    assert compact(-999_950) == "-1.0M"
