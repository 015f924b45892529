"""Unit tests for the Russian and English cardinal converters."""

from __future__ import annotations

from decimal import Decimal

import pytest

from propis.errors import DomainError
from propis.num2text import (
    AgreementClass,
    agreement_class,
    convert_group,
    split_amount,
    format_number_with_text,
    number_to_text,
    number_to_text_decimal,
    number_to_text_with_currency,
)
from propis.num2text_en import (
    number_to_text_en,
    number_to_text_en_decimal,
    number_to_text_en_with_currency,
)
from propis.words import spell


# ---------------------------------------------------------------------------
# Russian


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "ноль"),
        (1, "один"),
        (2, "два"),
        (10, "десять"),
        (11, "одиннадцать"),
        (21, "двадцать один"),
        (99, "девяносто девять"),
        (105, "сто пять"),
        (111, "сто одиннадцать"),
        (1000, "одна тысяча"),
        (1001, "одна тысяча один"),
        (2000, "две тысячи"),
        (2345, "две тысячи триста сорок пять"),
        (5000, "пять тысяч"),
        (11000, "одиннадцать тысяч"),
        (12000, "двенадцать тысяч"),
        (21000, "двадцать одна тысяча"),
        (22000, "двадцать две тысячи"),
        (1_000_000, "один миллион"),
        (2_000_000, "два миллиона"),
        (5_000_000, "пять миллионов"),
        (1_002_000, "один миллион две тысячи"),
        (21_000_001, "двадцать один миллион один"),
    ],
)
def test_number_to_text(value: int, expected: str) -> None:
    assert number_to_text(value) == expected


def test_number_to_text_largest_value() -> None:
    text = number_to_text(999_999_999)

    assert "девятьсот девяносто девять миллионов" in text
    assert "девятьсот девяносто девять тысяч" in text
    assert text.endswith("девятьсот девяносто девять")


def test_feminine_forms_only_in_thousands_group() -> None:
    assert number_to_text(2_002_002) == "два миллиона две тысячи два"
    assert number_to_text(1_001_001) == "один миллион одна тысяча один"


@pytest.mark.parametrize("value", [-1, 1_000_000_000, 10**12])
def test_number_to_text_rejects_out_of_domain(value: int) -> None:
    with pytest.raises(DomainError):
        number_to_text(value)


@pytest.mark.parametrize("value", [1.5, "12", None])
def test_number_to_text_rejects_non_integers(value) -> None:
    with pytest.raises(DomainError):
        number_to_text(value)


@pytest.mark.parametrize("value", [0, 7, 19, 20, 101, 1000, 65_536, 400_001, 999_999, 123_456_789])
def test_number_to_text_is_total_on_domain(value: int) -> None:
    text = number_to_text(value)
    assert text
    assert "  " not in text
    assert text == text.strip()


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, AgreementClass.ONE),
        (21, AgreementClass.ONE),
        (101, AgreementClass.ONE),
        (2, AgreementClass.FEW),
        (34, AgreementClass.FEW),
        (5, AgreementClass.MANY),
        (11, AgreementClass.MANY),
        (12, AgreementClass.MANY),
        (14, AgreementClass.MANY),
        (111, AgreementClass.MANY),
        (112, AgreementClass.MANY),
        (20, AgreementClass.MANY),
        (0, AgreementClass.MANY),
    ],
)
def test_agreement_class(value: int, expected: AgreementClass) -> None:
    assert agreement_class(value) is expected


def test_convert_group_feminine() -> None:
    assert convert_group(1, feminine=True) == "одна"
    assert convert_group(42, feminine=True) == "сорок две"
    assert convert_group(12, feminine=True) == "двенадцать"
    assert convert_group(0) == ""


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        (1, "rub", "один рубль"),
        (2, "rub", "два рубля"),
        (5, "rub", "пять рублей"),
        (11, "rub", "одиннадцать рублей"),
        (21, "rub", "двадцать один рубль"),
        (1000, "rub", "одна тысяча рублей"),
        (3, "usd", "три доллара"),
        (7, "eur", "семь евро"),
        (42, "kzt", "сорок два тенге"),
        (12.55, "rub", "двенадцать рублей пятьдесят пять копеек"),
        ("21,01", "rub", "двадцать один рубль одна копейка"),
        (2.02, "rub", "два рубля две копейки"),
        (0.5, "rub", "ноль рублей пятьдесят копеек"),
        (3.21, "usd", "три доллара двадцать один цент"),
        ("42.99", "kzt", "сорок два тенге девяносто девять тиынов"),
        (7.119, "eur", "семь евро одиннадцать центов"),
        ("5.00", "rub", "пять рублей"),
    ],
)
def test_number_to_text_with_currency(value, currency: str, expected: str) -> None:
    assert number_to_text_with_currency(value, currency) == expected


def test_number_to_text_with_unknown_currency() -> None:
    with pytest.raises(ValueError):
        number_to_text_with_currency(5, "gbp")


def test_format_number_with_text() -> None:
    assert format_number_with_text(7_652_278) == (
        "7 652 278 (семь миллионов шестьсот пятьдесят две тысячи двести семьдесят восемь)"
    )


# ---------------------------------------------------------------------------
# English


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "zero"),
        (7, "seven"),
        (13, "thirteen"),
        (21, "twenty one"),
        (100, "one hundred"),
        (105, "one hundred five"),
        (1000, "one thousand"),
        (2345, "two thousand three hundred forty five"),
        (1_000_001, "one million one"),
        (3_000_000_000, "three billion"),
    ],
)
def test_number_to_text_en(value: int, expected: str) -> None:
    assert number_to_text_en(value) == expected


def test_number_to_text_en_largest_value() -> None:
    assert number_to_text_en(999_999_999_999) == (
        "nine hundred ninety nine billion nine hundred ninety nine million "
        "nine hundred ninety nine thousand nine hundred ninety nine"
    )


@pytest.mark.parametrize("value", [-1, 1_000_000_000_000])
def test_number_to_text_en_rejects_out_of_domain(value: int) -> None:
    with pytest.raises(DomainError):
        number_to_text_en(value)


def test_number_to_text_with_currency_rejects_negative() -> None:
    with pytest.raises(DomainError):
        number_to_text_with_currency(-1.5, "rub")


# ---------------------------------------------------------------------------
# Decimals


@pytest.mark.parametrize(
    "value, expected",
    [
        (12.55, (12, "55")),
        ("3,50", (3, "5")),
        (7, (7, "")),
        (Decimal("0.001"), (0, "001")),
        (1e-05, (0, "00001")),
        ("10.0", (10, "")),
    ],
)
def test_split_amount(value, expected) -> None:
    assert split_amount(value) == expected


@pytest.mark.parametrize("value", [-0.5, "abc", "", float("nan"), float("inf"), True, None])
def test_split_amount_rejects(value) -> None:
    with pytest.raises(DomainError):
        split_amount(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        (7, "семь"),
        (1.1, "одна целая одна десятая"),
        (2.5, "две целых пять десятых"),
        (0.25, "ноль целых двадцать пять сотых"),
        (12.345, "двенадцать целых триста сорок пять тысячных"),
        ("3,05", "три целых пять сотых"),
        (21.21, "двадцать одна целая двадцать одна сотая"),
        ("0.000001", "ноль целых одна миллионная"),
    ],
)
def test_number_to_text_decimal(value, expected: str) -> None:
    assert number_to_text_decimal(value) == expected


def test_number_to_text_decimal_precision_limit() -> None:
    with pytest.raises(DomainError):
        number_to_text_decimal("1.1234567")


def test_feminine_units() -> None:
    assert number_to_text(2, feminine=True) == "две"
    assert number_to_text(1_000_001, feminine=True) == "один миллион одна тысяча одна"
    assert number_to_text(2) == "два"


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, "three"),
        (2.05, "two point zero five"),
        ("0,5", "zero point five"),
        (1234.5, "one thousand two hundred thirty four point five"),
    ],
)
def test_number_to_text_en_decimal(value, expected: str) -> None:
    assert number_to_text_en_decimal(value) == expected


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        (1, "usd", "one dollar"),
        (2, "usd", "two dollars"),
        (0, "usd", "zero dollars"),
        (1.01, "usd", "one dollar and one cent"),
        (12.55, "eur", "twelve euros and fifty five cents"),
        (1.5, "rub", "one ruble and fifty kopecks"),
        (3, "kzt", "three tenge"),
    ],
)
def test_number_to_text_en_with_currency(value, currency: str, expected: str) -> None:
    assert number_to_text_en_with_currency(value, currency) == expected


def test_number_to_text_en_with_unknown_currency() -> None:
    with pytest.raises(ValueError):
        number_to_text_en_with_currency(5, "gbp")


# ---------------------------------------------------------------------------
# Language dispatch


def test_spell() -> None:
    assert spell(21000) == "двадцать одна тысяча"
    assert spell("12.55", "ru", "rub") == "двенадцать рублей пятьдесят пять копеек"
    assert spell("1.01", "en", "usd") == "one dollar and one cent"
    assert spell("2.5", "en") == "two point five"


def test_spell_unknown_language() -> None:
    with pytest.raises(ValueError):
        spell(1, "de")
