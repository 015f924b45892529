"""Unit tests for Roman numeral conversion."""

from __future__ import annotations

import pytest

from propis.errors import DomainError, FormatError
from propis.roman import (
    ROMAN_VALUES,
    _check_table,
    from_roman,
    is_valid_arabic,
    is_valid_roman,
    to_roman,
)


# ---------------------------------------------------------------------------
# to_roman


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, "I"),
        (4, "IV"),
        (9, "IX"),
        (14, "XIV"),
        (40, "XL"),
        (90, "XC"),
        (400, "CD"),
        (944, "CMXLIV"),
        (1994, "MCMXCIV"),
        (2024, "MMXXIV"),
        (3999, "MMMCMXCIX"),
    ],
)
def test_to_roman(value: int, expected: str) -> None:
    assert to_roman(value) == expected


@pytest.mark.parametrize("value", [0, -5, 4000, 2.5, "10", True])
def test_to_roman_rejects_out_of_domain(value) -> None:
    with pytest.raises(DomainError):
        to_roman(value)


def test_round_trip_over_whole_domain() -> None:
    for value in range(1, 4000):
        numeral = to_roman(value)
        assert from_roman(numeral) == value
        assert to_roman(from_roman(numeral)) == numeral


# ---------------------------------------------------------------------------
# from_roman


@pytest.mark.parametrize(
    "numeral, expected",
    [
        ("I", 1),
        ("III", 3),
        ("XLII", 42),
        ("MCMXCIV", 1994),
        ("mmxxiv", 2024),
        ("  xiv ", 14),
        ("MMMCMXCIX", 3999),
    ],
)
def test_from_roman(numeral: str, expected: int) -> None:
    assert from_roman(numeral) == expected


@pytest.mark.parametrize(
    "numeral",
    [
        "",
        "   ",
        "ABC",
        "X1",
        "IIII",
        "XXXX",
        "CCCC",
        "MMMM",
        "VV",
        "LL",
        "DD",
        "VIV",
        "IL",
        "IC",
        "VX",
        "XM",
        "LC",
    ],
)
def test_from_roman_rejects_malformed(numeral: str) -> None:
    with pytest.raises(FormatError):
        from_roman(numeral)


def test_from_roman_rejects_non_string() -> None:
    with pytest.raises(FormatError):
        from_roman(12)


def test_from_roman_value_above_domain() -> None:
    # MMM + CM + M: passes structural checks, decodes to 4900
    with pytest.raises(DomainError):
        from_roman("MMMCMM")


def test_non_canonical_input_is_accepted_and_canonicalised() -> None:
    assert from_roman("IIX") == 10
    assert to_roman(from_roman("IIX")) == "X"


def test_validity_helpers() -> None:
    assert is_valid_roman("XII")
    assert not is_valid_roman("IIII")
    assert not is_valid_roman("MMMCMM")
    assert is_valid_arabic(3999)
    assert not is_valid_arabic(4000)
    assert not is_valid_arabic(True)


# ---------------------------------------------------------------------------
# Value table


def test_value_table_is_strictly_descending() -> None:
    values = [value for value, _ in ROMAN_VALUES]
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)


def test_table_check_rejects_misordered_table() -> None:
    broken = ((1, "I"), (5, "V"))
    with pytest.raises(RuntimeError):
        _check_table(broken)
    with pytest.raises(RuntimeError):
        _check_table(((10, "X"), (10, "X")))
