# -*- coding: utf-8 -*-
"""
Сборка таблиц «число - пропись» и страниц диапазонов
"""

import logging
from typing import Iterable, List, Optional

from . import config
from .cache import RangeCache
from .chunks import adjacent_chunks, split_range_into_chunks
from .errors import RangeError, capture
from .num2text import number_to_text
from .num2text_en import number_to_text_en
from .ranges import check_range, generate_range
from .slugs import split_range_path

logger = logging.getLogger(__name__)

OUT_OF_RANGE = 'Out of range'

RANGE_FORMAT_ERROR = "Invalid range format. Use: from-to (e.g., 10000-19999)"

EXAMPLES = [
    {'href': '/10000-19999', 'label': 'Example: /10000-19999'},
    {'href': '/1-100', 'label': 'Example: /1-100'},
]


def build_row(value: int) -> dict:
    """Строка таблицы для одного числа"""
    ru = capture(number_to_text, value)
    en = capture(number_to_text_en, value)
    return {
        'value': value,
        'number': f"{value:,}",
        'propis_ru': ru.value if ru.ok else OUT_OF_RANGE,
        'propis_en': en.value if en.ok else OUT_OF_RANGE,
    }


def build_rows(numbers: Iterable[int]) -> List[dict]:
    """Строки таблицы для последовательности чисел"""
    return [build_row(n) for n in numbers]


def parse_segments(path: str) -> List[tuple]:
    """
    Сегменты пути диапазона: '210000-219999/213500-213549'
    -> [(210000, 219999), (213500, 213549)]

    Raises:
        RangeError: сегмент не похож на from-to
    """
    segments = split_range_path(path)
    if segments is None:
        raise RangeError('format', RANGE_FORMAT_ERROR)
    return segments


def locale_base_path(locale: str) -> str:
    return '' if locale == config.DEFAULT_LOCALE else f"/{locale}"


def resolve_range(locale: str, path: str, cache: RangeCache,
                  max_range_size: Optional[int] = None,
                  min_value: int = config.RANGE_MIN_VALUE,
                  max_value: int = config.RANGE_MAX_VALUE) -> dict:
    """
    Данные страницы диапазона.

    Показывается последний сегмент пути (предыдущие - «хлебные крошки» вложенного
    просмотра). Большой диапазон отдаётся списком частей, маленький - таблицей.

    Returns:
        dict с ключом 'kind': 'chunks' или 'table'

    Raises:
        RangeError: неверный формат, выход за границы, start > end
    """
    max_range_size = max_range_size or config.MAX_RANGE_SIZE
    segments = parse_segments(path)
    start, end = segments[-1]

    # Размер здесь не проверяем: большие диапазоны делим на части
    check_range(start, end, min_value, max_value, None)

    prefix = '/'.join(f"{s}-{e}" for s, e in segments[:-1])
    base_path = locale_base_path(locale)
    size = end - start + 1

    page = {
        'locale': locale,
        'start': start,
        'end': end,
        'size': size,
        'segments': [{'start': s, 'end': e} for s, e in segments],
    }

    if size > max_range_size:
        chunks = cache.get_chunks(locale, start, end, max_range_size)
        if chunks is None:
            chunks = split_range_into_chunks(start, end, max_range_size)
            cache.set_chunks(locale, start, end, chunks, chunk_size=max_range_size)
            logger.info("split %s-%s into %d chunks", start, end, len(chunks))

        if prefix:
            chunks = [chunk._replace(url=f"/{prefix}{chunk.url}") for chunk in chunks]

        page['kind'] = 'chunks'
        page['chunks'] = [
            dict(chunk.to_dict(), size=chunk.size, href=f"{base_path}{chunk.url}")
            for chunk in chunks
        ]
        return page

    rows = cache.get_table(locale, start, end)
    if rows is None:
        rows = build_rows(generate_range(start, end, max_range_size))
        cache.set_table(locale, start, end, rows)

    nav_base = f"{base_path}/{prefix}" if prefix else base_path
    navigation = adjacent_chunks(start, end, max_range_size, nav_base, max_value)

    page['kind'] = 'table'
    # Копии строк: правки вызывающего не должны попасть в кэш
    page['rows'] = [dict(row) for row in rows]
    page['previous'] = navigation['previous'].to_dict() if navigation['previous'] else None
    page['next'] = navigation['next'].to_dict() if navigation['next'] else None
    return page
