# -*- coding: utf-8 -*-
"""
Разбиение больших диапазонов на части (чанки) для постраничного просмотра
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple


class RangeChunk(NamedTuple):
    """Поддиапазон и путь, по которому его можно открыть"""
    start: int
    end: int
    url: str

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def to_dict(self) -> dict:
        return {'start': self.start, 'end': self.end, 'url': self.url}


def _segment(segment) -> Tuple[int, int]:
    if isinstance(segment, dict):
        return segment['start'], segment['end']
    start, end = segment
    return start, end


def split_range_into_chunks(start: int, end: int, max_chunk_size: int,
                            base_url: str = '') -> List[RangeChunk]:
    """
    Разбить диапазон на части размером не больше max_chunk_size

    Args:
        start: начало диапазона
        end: конец диапазона (включительно)
        max_chunk_size: максимальный размер части
        base_url: префикс пути без ведущего /range/

    Returns:
        list: части подряд, без пересечений и пропусков
    """
    if max_chunk_size < 1:
        raise ValueError("max_chunk_size must be at least 1")

    base_url = base_url.strip('/')
    chunks = []
    current_start = start

    while current_start <= end:
        current_end = min(current_start + max_chunk_size - 1, end)
        if base_url:
            url = f"/{base_url}/{current_start}-{current_end}"
        else:
            url = f"/{current_start}-{current_end}"

        chunks.append(RangeChunk(current_start, current_end, url))
        current_start = current_end + 1

    return chunks


def split_nested_ranges_into_chunks(ranges: Sequence, max_chunk_size: int) -> List[RangeChunk]:
    """
    Разбить вложенный диапазон: делится только последний сегмент,
    предыдущие сегменты остаются префиксом пути.

    Пример: [(210000, 219999), (213500, 214549)] -> /210000-219999/213500-213999, ...
    """
    if not ranges:
        return []

    segments = [_segment(r) for r in ranges]
    base_url = '/'.join(f"{s}-{e}" for s, e in segments[:-1])
    last_start, last_end = segments[-1]

    return split_range_into_chunks(last_start, last_end, max_chunk_size, base_url)


def find_chunk_index(number: int, start: int, end: int, max_chunk_size: int) -> int:
    """Индекс части (с 0), содержащей number, или -1"""
    if max_chunk_size < 1:
        raise ValueError("max_chunk_size must be at least 1")
    if number < start or number > end:
        return -1
    return (number - start) // max_chunk_size


def looks_like_chunk(start: int, end: int, max_chunk_size: int) -> bool:
    """Диапазон похож на часть: полный размер или выровненный хвост"""
    size = end - start + 1
    return size == max_chunk_size or (size < max_chunk_size and start % max_chunk_size == 0)


def adjacent_chunks(start: int, end: int, max_chunk_size: int,
                    base_path: str = '', max_value: Optional[int] = None) -> dict:
    """
    Ссылки на предыдущую и следующую части для страницы-части

    Returns:
        dict: {'previous': RangeChunk | None, 'next': RangeChunk | None}
    """
    previous_chunk: Optional[RangeChunk] = None
    next_chunk: Optional[RangeChunk] = None

    if not looks_like_chunk(start, end, max_chunk_size):
        return {'previous': None, 'next': None}

    base_path = base_path.rstrip('/')

    if start > 0:
        prev_start = max(0, start - max_chunk_size)
        prev_end = start - 1
        previous_chunk = RangeChunk(prev_start, prev_end, f"{base_path}/{prev_start}-{prev_end}")

    next_start = end + 1
    next_end = next_start + max_chunk_size - 1
    if max_value is not None:
        next_end = min(next_end, max_value)
    if next_start <= next_end:
        next_chunk = RangeChunk(next_start, next_end, f"{base_path}/{next_start}-{next_end}")

    return {'previous': previous_chunk, 'next': next_chunk}
