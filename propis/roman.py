# -*- coding: utf-8 -*-
"""
Конвертация между римскими и арабскими числами (1 … 3999)

Выход to_roman всегда канонический (жадный алгоритм по таблице ROMAN_VALUES).
from_roman принимает и неканонические записи, если они проходят структурную
проверку и дают число в допустимом диапазоне.
"""

import re

from .errors import FormatError, DomainError, check_domain

MIN_VALUE = 1
MAX_VALUE = 3999

# Значения в порядке убывания, включая вычитательные пары
ROMAN_VALUES = (
    (1000, 'M'),
    (900, 'CM'),
    (500, 'D'),
    (400, 'CD'),
    (100, 'C'),
    (90, 'XC'),
    (50, 'L'),
    (40, 'XL'),
    (10, 'X'),
    (9, 'IX'),
    (5, 'V'),
    (4, 'IV'),
    (1, 'I'),
)

ROMAN_MAP = {
    'I': 1,
    'V': 5,
    'X': 10,
    'L': 50,
    'C': 100,
    'D': 500,
    'M': 1000,
}

VALID_SUBTRACTIVE = {'IV', 'IX', 'XL', 'XC', 'CD', 'CM'}

# Четыре одинаковых символа подряд
_FOUR_REPEATS = re.compile(r'IIII|XXXX|CCCC|MMMM')


def _check_table(table):
    """Жадный алгоритм корректен только для строго убывающей таблицы"""
    values = [value for value, _ in table]
    if any(a <= b for a, b in zip(values, values[1:])):
        raise RuntimeError("ROMAN_VALUES must be in strictly descending order")


_check_table(ROMAN_VALUES)


def to_roman(n):
    """
    Конвертировать арабское число (1-3999) в римское

    Raises:
        DomainError: число вне диапазона 1-3999 или не целое
    """
    check_domain(n, MAX_VALUE, MIN_VALUE)

    result = []
    for value, numeral in ROMAN_VALUES:
        count, n = divmod(n, value)
        if count:
            result.append(numeral * count)

    return ''.join(result)


def _validate_structure(numeral, original):
    if not numeral:
        raise FormatError("Empty Roman numeral string")

    for char in numeral:
        if char not in ROMAN_MAP:
            raise FormatError(f"Invalid Roman numeral character: {char}")

    match = _FOUR_REPEATS.search(numeral)
    if match:
        raise FormatError(f"Invalid Roman numeral: {original} ({match.group()} is not allowed)")

    for char in 'VLD':
        if numeral.count(char) > 1:
            raise FormatError(f"Invalid Roman numeral: {original} ({char} cannot repeat)")

    for current, following in zip(numeral, numeral[1:]):
        pair = current + following
        if ROMAN_MAP[current] < ROMAN_MAP[following] and pair not in VALID_SUBTRACTIVE:
            raise FormatError(f"Invalid Roman numeral: {original} ({pair} is not a valid subtractive pair)")


def from_roman(roman):
    """
    Конвертировать римское число в арабское

    Args:
        roman: строка, регистр и пробелы по краям не важны

    Returns:
        int: значение в диапазоне 1-3999

    Raises:
        FormatError: недопустимые символы, повторы или вычитательные пары
        DomainError: значение вне 1-3999
    """
    if not isinstance(roman, str):
        raise FormatError(f"Expected a string, got {roman!r}")

    normalized = roman.strip().upper()
    _validate_structure(normalized, roman)

    result = 0
    i = 0
    while i < len(normalized):
        current = ROMAN_MAP[normalized[i]]
        if i + 1 < len(normalized):
            following = ROMAN_MAP[normalized[i + 1]]
            if current < following:
                result += following - current
                i += 2
                continue
        result += current
        i += 1

    if result < MIN_VALUE or result > MAX_VALUE:
        raise DomainError(
            f"Roman numeral {roman} is out of range. Supported range: {MIN_VALUE} to {MAX_VALUE}"
        )

    return result


def is_valid_roman(roman):
    """Проверка римского числа без исключений"""
    try:
        from_roman(roman)
        return True
    except (FormatError, DomainError):
        return False


def is_valid_arabic(n):
    """Проверка арабского числа на диапазон 1-3999"""
    return isinstance(n, int) and not isinstance(n, bool) and MIN_VALUE <= n <= MAX_VALUE
