# -*- coding: utf-8 -*-
"""
Проверка и генерация числовых диапазонов
"""

import math
from typing import List, Optional

from .errors import RangeError


def _to_int(value) -> Optional[int]:
    """Привести значение к int, None если не получается"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate_range(start, end, min_value, max_value, max_range_size=None) -> dict:
    """
    Проверка диапазона. Первая найденная ошибка побеждает.

    Порядок проверок: формат, границы, порядок start/end, размер.
    max_range_size=None - размер не ограничен.

    Returns:
        dict: {'valid': bool, 'error': str | None, 'kind': str | None}
    """
    start = _to_int(start)
    end = _to_int(end)

    if start is None or end is None:
        return {'valid': False, 'error': 'Invalid number format', 'kind': 'format'}

    if start < min_value or end > max_value:
        return {
            'valid': False,
            'error': f'Range must be between {min_value} and {max_value}',
            'kind': 'bounds',
        }

    if start > end:
        return {
            'valid': False,
            'error': 'Start must be less than or equal to end',
            'kind': 'inverted',
        }

    range_size = end - start + 1
    if max_range_size is not None and range_size > max_range_size:
        return {
            'valid': False,
            'error': f'Range size ({range_size}) exceeds maximum ({max_range_size})',
            'kind': 'size',
        }

    return {'valid': True, 'error': None, 'kind': None}


def check_range(start, end, min_value, max_value, max_range_size=None):
    """То же, что validate_range, но с исключением RangeError"""
    validation = validate_range(start, end, min_value, max_value, max_range_size)
    if not validation['valid']:
        raise RangeError(validation['kind'], validation['error'])


def generate_range(start: int, end: int, max_count: int) -> List[int]:
    """
    Сгенерировать числа диапазона.

    Если диапазон больше max_count - равномерная выборка с шагом
    ceil(span / max_count), не более max_count значений и не дальше end.
    Результат детерминирован.
    """
    if max_count < 1:
        raise ValueError("max_count must be at least 1")

    span = end - start + 1
    if span <= 0:
        return []

    if span <= max_count:
        return list(range(start, end + 1))

    step = -(-span // max_count)
    return list(range(start, end + 1, step))[:max_count]
