# -*- coding: utf-8 -*-
"""
Модуль для конвертации чисел в текст на русском языке
Поддерживаемый диапазон: 0 … 999 999 999
"""

from decimal import Decimal, InvalidOperation
from enum import Enum

from .errors import DomainError, check_domain

MAX_VALUE = 999_999_999

ONES = {
    0: '', 1: 'один', 2: 'два', 3: 'три', 4: 'четыре',
    5: 'пять', 6: 'шесть', 7: 'семь', 8: 'восемь', 9: 'девять',
    10: 'десять', 11: 'одиннадцать', 12: 'двенадцать', 13: 'тринадцать',
    14: 'четырнадцать', 15: 'пятнадцать', 16: 'шестнадцать',
    17: 'семнадцать', 18: 'восемнадцать', 19: 'девятнадцать'
}

# Женский род единиц перед словом «тысяча»
ONES_FEMININE = {
    1: 'одна', 2: 'две'
}

TENS = {
    2: 'двадцать', 3: 'тридцать', 4: 'сорок', 5: 'пятьдесят',
    6: 'шестьдесят', 7: 'семьдесят', 8: 'восемьдесят', 9: 'девяносто'
}

HUNDREDS = {
    1: 'сто', 2: 'двести', 3: 'триста', 4: 'четыреста',
    5: 'пятьсот', 6: 'шестьсот', 7: 'семьсот', 8: 'восемьсот', 9: 'девятьсот'
}


class AgreementClass(Enum):
    """Класс согласования существительного с числом"""
    ONE = 'one'     # одна тысяча, один миллион
    FEW = 'few'     # две тысячи, три миллиона
    MANY = 'many'   # пять тысяч, одиннадцать миллионов


# Разряды: индекс группы -> формы слова по классу согласования
SCALES = {
    1: {
        AgreementClass.ONE: 'тысяча',
        AgreementClass.FEW: 'тысячи',
        AgreementClass.MANY: 'тысяч',
    },
    2: {
        AgreementClass.ONE: 'миллион',
        AgreementClass.FEW: 'миллиона',
        AgreementClass.MANY: 'миллионов',
    },
}

# Валюты: основная единица и разменная (копейки, центы), род разменной единицы
CURRENCIES = {
    'rub': {
        'unit': {
            AgreementClass.ONE: 'рубль',
            AgreementClass.FEW: 'рубля',
            AgreementClass.MANY: 'рублей',
        },
        'minor': {
            AgreementClass.ONE: 'копейка',
            AgreementClass.FEW: 'копейки',
            AgreementClass.MANY: 'копеек',
        },
        'minor_feminine': True,
    },
    'usd': {
        'unit': {
            AgreementClass.ONE: 'доллар',
            AgreementClass.FEW: 'доллара',
            AgreementClass.MANY: 'долларов',
        },
        'minor': {
            AgreementClass.ONE: 'цент',
            AgreementClass.FEW: 'цента',
            AgreementClass.MANY: 'центов',
        },
        'minor_feminine': False,
    },
    'eur': {
        'unit': {
            AgreementClass.ONE: 'евро',
            AgreementClass.FEW: 'евро',
            AgreementClass.MANY: 'евро',
        },
        'minor': {
            AgreementClass.ONE: 'цент',
            AgreementClass.FEW: 'цента',
            AgreementClass.MANY: 'центов',
        },
        'minor_feminine': False,
    },
    'kzt': {
        'unit': {
            AgreementClass.ONE: 'тенге',
            AgreementClass.FEW: 'тенге',
            AgreementClass.MANY: 'тенге',
        },
        'minor': {
            AgreementClass.ONE: 'тиын',
            AgreementClass.FEW: 'тиына',
            AgreementClass.MANY: 'тиынов',
        },
        'minor_feminine': False,
    },
}

WHOLE = {
    AgreementClass.ONE: 'целая',
    AgreementClass.FEW: 'целых',
    AgreementClass.MANY: 'целых',
}

# Знаменатель дроби по числу знаков после запятой
FRACTIONS = {
    1: ('десятая', 'десятых'),
    2: ('сотая', 'сотых'),
    3: ('тысячная', 'тысячных'),
    4: ('десятитысячная', 'десятитысячных'),
    5: ('стотысячная', 'стотысячных'),
    6: ('миллионная', 'миллионных'),
}

MAX_FRACTION_DIGITS = len(FRACTIONS)


def agreement_class(n):
    """Класс согласования по двум последним цифрам числа"""
    n = abs(n) % 100
    if 11 <= n <= 14:
        return AgreementClass.MANY
    n = n % 10
    if n == 1:
        return AgreementClass.ONE
    if 2 <= n <= 4:
        return AgreementClass.FEW
    return AgreementClass.MANY


def get_plural_form(n, forms):
    """Получить правильную форму слова в зависимости от числа"""
    return forms[agreement_class(n)]


def convert_group(n, feminine=False):
    """Конвертировать число от 0 до 999 в текст"""
    if n == 0:
        return ''

    result = []

    # Сотни
    hundreds = n // 100
    if hundreds:
        result.append(HUNDREDS[hundreds])

    # Десятки и единицы
    remainder = n % 100

    if remainder >= 20:
        tens = remainder // 10
        ones = remainder % 10
        result.append(TENS[tens])
        if ones:
            if feminine and ones in ONES_FEMININE:
                result.append(ONES_FEMININE[ones])
            else:
                result.append(ONES[ones])
    elif remainder > 0:
        if feminine and remainder in ONES_FEMININE:
            result.append(ONES_FEMININE[remainder])
        else:
            result.append(ONES[remainder])

    return ' '.join(result)


def number_to_text(n, feminine=False):
    """
    Конвертировать целое число в текст на русском языке

    Args:
        n: целое число от 0 до 999 999 999
        feminine: женский род единиц (одна целая, две копейки)

    Returns:
        str: число прописью

    Raises:
        DomainError: отрицательное, слишком большое или не целое число
    """
    check_domain(n, MAX_VALUE)

    if n == 0:
        return 'ноль'

    groups = []
    group_index = 0

    while n > 0:
        group = n % 1000
        n //= 1000

        if group > 0:
            # тысячи - всегда женский род, единицы - по запросу
            group_feminine = group_index == 1 or (group_index == 0 and feminine)
            text = convert_group(group, group_feminine)

            if group_index > 0:
                unit = get_plural_form(group, SCALES[group_index])
                text = f"{text} {unit}"

            groups.append(text)

        group_index += 1

    groups.reverse()
    return ' '.join(groups)


# ============================================================================
# ДРОБНЫЕ ЧИСЛА И ДЕНЬГИ
# ============================================================================

def split_amount(n):
    """
    Целая часть и цифры дробной части без хвостовых нулей.
    12.55 -> (12, '55'), '3,50' -> (3, '5'), 7 -> (7, '')

    Raises:
        DomainError: не число, бесконечность или отрицательное значение
    """
    if isinstance(n, bool):
        raise DomainError(f"Expected a number, got {n!r}")
    try:
        if isinstance(n, int):
            value = Decimal(n)
        elif isinstance(n, float):
            value = Decimal(repr(n))
        elif isinstance(n, Decimal):
            value = n
        elif isinstance(n, str):
            value = Decimal(n.strip().replace(',', '.'))
        else:
            raise DomainError(f"Expected a number, got {n!r}")
    except InvalidOperation:
        raise DomainError(f"Expected a number, got {n!r}") from None

    if not value.is_finite():
        raise DomainError(f"Expected a finite number, got {n!r}")
    if value < 0:
        raise DomainError(f"Number {n} is out of range. Negative numbers are not supported")

    integer, _, fraction = format(value, 'f').partition('.')
    return int(integer), fraction.rstrip('0')


def number_to_text_decimal(n):
    """
    Дробное число прописью: 2.5 -> «две целых пять десятых»

    Целые числа пишутся как в number_to_text. После запятой - не больше
    MAX_FRACTION_DIGITS знаков.
    """
    integer, fraction = split_amount(n)
    if not fraction:
        return number_to_text(integer)

    if len(fraction) > MAX_FRACTION_DIGITS:
        raise DomainError(
            f"Too many decimal places in {n}. Supported: up to {MAX_FRACTION_DIGITS}"
        )

    numerator = int(fraction)
    one, many = FRACTIONS[len(fraction)]
    fraction_name = one if agreement_class(numerator) is AgreementClass.ONE else many

    whole = number_to_text(integer, feminine=True)
    part = number_to_text(numerator, feminine=True)
    return f"{whole} {get_plural_form(integer, WHOLE)} {part} {fraction_name}"


def number_to_text_with_currency(n, currency='rub'):
    """
    Конвертировать сумму в текст с указанием валюты

    Args:
        n: сумма (int, float, Decimal или строка); после запятой учитываются
           два знака - копейки / центы, остальные отбрасываются
        currency: код валюты: rub, usd, eur, kzt

    Returns:
        str: сумма прописью, валюта в нужной форме.
        Пример: 12.55 -> двенадцать рублей пятьдесят пять копеек
    """
    if currency not in CURRENCIES:
        raise ValueError(f"Unknown currency: {currency}")
    forms = CURRENCIES[currency]

    integer, fraction = split_amount(n)
    minor = int(fraction[:2].ljust(2, '0')) if fraction else 0

    text = f"{number_to_text(integer)} {get_plural_form(integer, forms['unit'])}"
    if minor:
        minor_text = number_to_text(minor, feminine=forms['minor_feminine'])
        text = f"{text} {minor_text} {get_plural_form(minor, forms['minor'])}"
    return text


def format_number_with_text(n):
    """
    Форматировать число с текстом в скобках
    Пример: 7 652 278 (семь миллионов шестьсот пятьдесят две тысячи двести семьдесят восемь)
    """
    n = int(n)
    formatted_num = f"{n:,}".replace(',', ' ')
    text = number_to_text(n)
    return f"{formatted_num} ({text})"
