# -*- coding: utf-8 -*-
"""
Разбор сегментов пути (слагов): целое или дробное число, диапазон, вложенные диапазоны, римское число
"""

import re
from typing import List, Optional, Sequence, Tuple, Union

_LEADING_INT = re.compile(r'^\s*(-?\d+)')
_DECIMAL = re.compile(r'^\s*(\d+)[.,](\d+)\s*$')
_INT = re.compile(r'^\d+$')
_ROMAN = re.compile(r'^[IVXLCDM]+$')
_RANGE_PATH = re.compile(r'^\d+-\d+(/\d+-\d+)*$')


def parse_single_number(slug: Sequence[str]) -> Optional[int]:
    """Число из первого сегмента ('123abc' -> 123, 'abc' -> None)"""
    if not slug:
        return None

    match = _LEADING_INT.match(slug[0])
    if not match:
        return None
    return int(match.group(1))


def parse_decimal(slug: Sequence[str]) -> Optional[str]:
    """Дробное число из первого сегмента: '12,55' -> '12.55'; целые и прочее -> None"""
    if not slug:
        return None

    match = _DECIMAL.match(slug[0])
    if not match:
        return None
    return f"{match.group(1)}.{match.group(2)}"


def split_range_segment(segment: str) -> Optional[Tuple[int, int]]:
    """'100-200' -> (100, 200) без проверки порядка; None если не диапазон"""
    parts = segment.strip().split('-')
    if len(parts) != 2:
        return None

    start, end = parts
    if not _INT.match(start) or not _INT.match(end):
        return None

    return int(start), int(end)


def parse_amount(slug: Sequence[str]) -> Union[int, str, None]:
    """Целое (int) или дробное ('12.55') число из первого сегмента"""
    amount = parse_decimal(slug)
    if amount is not None:
        return amount
    return parse_single_number(slug)


def parse_roman(slug: Sequence[str]) -> Optional[dict]:
    """Римское число {'roman': 'XII'} или арабское {'number': 12}"""
    if not slug:
        return None

    segment = slug[0].strip().upper()

    if _ROMAN.match(segment):
        return {'roman': segment}

    if _INT.match(segment):
        return {'number': int(segment)}

    return None


def is_numeric_range(pathname: str) -> bool:
    """Путь вида /10000-19999 или /210000-219999/213500-213549"""
    clean_path = re.sub(r'^/|/$', '', pathname)
    return bool(_RANGE_PATH.match(clean_path))


def split_range_path(pathname: str) -> Optional[List[Tuple[int, int]]]:
    """
    Все сегменты пути диапазона, порядок from/to не проверяется.
    '/210000-219999/213500-213549' -> [(210000, 219999), (213500, 213549)]
    """
    if not is_numeric_range(pathname):
        return None
    return [split_range_segment(part) for part in pathname.strip('/').split('/')]
