# -*- coding: utf-8 -*-
"""
Модуль для конвертации чисел в текст на английском языке
Поддерживаемый диапазон: 0 … 999 999 999 999
"""

from .errors import check_domain
from .num2text import split_amount

MAX_VALUE = 999_999_999_999

ONES = {
    0: '', 1: 'one', 2: 'two', 3: 'three', 4: 'four',
    5: 'five', 6: 'six', 7: 'seven', 8: 'eight', 9: 'nine',
    10: 'ten', 11: 'eleven', 12: 'twelve', 13: 'thirteen',
    14: 'fourteen', 15: 'fifteen', 16: 'sixteen',
    17: 'seventeen', 18: 'eighteen', 19: 'nineteen'
}

TENS = {
    2: 'twenty', 3: 'thirty', 4: 'forty', 5: 'fifty',
    6: 'sixty', 7: 'seventy', 8: 'eighty', 9: 'ninety'
}

# В английском у разряда одна форма
SCALES = {
    1: 'thousand',
    2: 'million',
    3: 'billion',
}

DIGITS = {d: ONES[d] or 'zero' for d in range(10)}

# Валюта: (единственное, множественное) для основной и разменной единицы
CURRENCIES = {
    'rub': {'unit': ('ruble', 'rubles'), 'minor': ('kopeck', 'kopecks')},
    'usd': {'unit': ('dollar', 'dollars'), 'minor': ('cent', 'cents')},
    'eur': {'unit': ('euro', 'euros'), 'minor': ('cent', 'cents')},
    'kzt': {'unit': ('tenge', 'tenge'), 'minor': ('tiyn', 'tiyns')},
}


def convert_group(n):
    """Конвертировать число от 0 до 999 в текст"""
    if n == 0:
        return ''

    result = []

    hundreds = n // 100
    if hundreds:
        result.append(f"{ONES[hundreds]} hundred")

    remainder = n % 100

    if remainder >= 20:
        result.append(TENS[remainder // 10])
        if remainder % 10:
            result.append(ONES[remainder % 10])
    elif remainder > 0:
        result.append(ONES[remainder])

    return ' '.join(result)


def number_to_text_en(n):
    """
    Конвертировать целое число в текст на английском языке

    Raises:
        DomainError: отрицательное, слишком большое или не целое число
    """
    check_domain(n, MAX_VALUE)

    if n == 0:
        return 'zero'

    groups = []
    group_index = 0

    while n > 0:
        group = n % 1000
        n //= 1000

        if group > 0:
            text = convert_group(group)
            if group_index > 0:
                text = f"{text} {SCALES[group_index]}"
            groups.append(text)

        group_index += 1

    groups.reverse()
    return ' '.join(groups)


def number_to_text_en_decimal(n):
    """Дробное число: цифры после точки читаются по одной (2.05 -> two point zero five)"""
    integer, fraction = split_amount(n)
    text = number_to_text_en(integer)
    if fraction:
        text = f"{text} point {' '.join(DIGITS[int(d)] for d in fraction)}"
    return text


def _form(n, forms):
    singular, plural = forms
    return singular if n == 1 else plural


def number_to_text_en_with_currency(n, currency='usd'):
    """
    Сумма прописью на английском: 1.01 -> one dollar and one cent

    Учитываются два знака после точки, остальные отбрасываются.
    """
    if currency not in CURRENCIES:
        raise ValueError(f"Unknown currency: {currency}")
    forms = CURRENCIES[currency]

    integer, fraction = split_amount(n)
    minor = int(fraction[:2].ljust(2, '0')) if fraction else 0

    text = f"{number_to_text_en(integer)} {_form(integer, forms['unit'])}"
    if minor:
        text = f"{text} and {number_to_text_en(minor)} {_form(minor, forms['minor'])}"
    return text
