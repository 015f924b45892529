# -*- coding: utf-8 -*-
"""
Число прописью на выбранном языке: целое, дробное или денежная сумма
"""

from .num2text import number_to_text_decimal, number_to_text_with_currency
from .num2text_en import number_to_text_en_decimal, number_to_text_en_with_currency

LANGUAGES = {
    'ru': (number_to_text_decimal, number_to_text_with_currency),
    'en': (number_to_text_en_decimal, number_to_text_en_with_currency),
}


def spell(value, lang='ru', currency=None):
    """
    Args:
        value: int, float, Decimal или строка '12.55'
        lang: 'ru' или 'en'
        currency: код валюты (rub, usd, eur, kzt) - читать как сумму денег

    Raises:
        DomainError: число вне диапазона конвертера
        ValueError: неизвестный язык или валюта
    """
    if lang not in LANGUAGES:
        raise ValueError(f"Unknown language: {lang}")
    plain, money = LANGUAGES[lang]
    if currency:
        return money(value, currency)
    return plain(value)
