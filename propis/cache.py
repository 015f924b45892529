# -*- coding: utf-8 -*-
"""
Кэш в памяти для таблиц и списков частей диапазонов

Два независимых пространства ключей: таблицы - (locale, start, end),
части - (locale, start, end, chunk_size).
Просроченная запись удаляется при первом обращении к ней, фоновой очистки нет.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_TTL = 24 * 60 * 60  # секунды

Key = Tuple[Any, ...]


class CacheEntry:
    """Запись кэша"""

    __slots__ = ('data', 'created_at', 'ttl')

    def __init__(self, data: Any, created_at: float, ttl: float):
        self.data = data
        self.created_at = created_at
        self.ttl = ttl

    def is_valid(self, now: float) -> bool:
        return now - self.created_at < self.ttl


class _Namespace:
    """Словарь записей под собственной блокировкой"""

    def __init__(self, name: str, clock: Callable[[], float]):
        self.name = name
        self._clock = clock
        self._entries: Dict[Key, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: Key) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("cache miss %s %s", self.name, key)
                return None
            if entry.is_valid(self._clock()):
                logger.debug("cache hit %s %s", self.name, key)
                return entry.data
            # Удаляем просроченную запись
            del self._entries[key]
            logger.debug("cache expired %s %s", self.name, key)
            return None

    def set(self, key: Key, data: Any, ttl: float):
        entry = CacheEntry(data, self._clock(), ttl)
        with self._lock:
            self._entries[key] = entry

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self):
        with self._lock:
            return len(self._entries)


class RangeCache:
    """
    Кэш результатов по диапазонам.

    Args:
        clock: источник времени в секундах (в тестах - управляемые часы)
        default_ttl: время жизни записи по умолчанию, секунды
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 default_ttl: float = DEFAULT_TTL):
        self.default_ttl = default_ttl
        self._tables = _Namespace('table', clock)
        self._chunks = _Namespace('chunks', clock)

    @staticmethod
    def _key(locale: str, start: int, end: int) -> Key:
        return (locale, start, end)

    def get_table(self, locale: str, start: int, end: int) -> Optional[Any]:
        """Строки таблицы из кэша или None"""
        return self._tables.get(self._key(locale, start, end))

    def set_table(self, locale: str, start: int, end: int, data: Any,
                  ttl: Optional[float] = None):
        """Сохранить строки таблицы (перезаписывает без условий)"""
        self._tables.set(self._key(locale, start, end), data,
                         self.default_ttl if ttl is None else ttl)

    def get_chunks(self, locale: str, start: int, end: int,
                   chunk_size: Optional[int] = None) -> Optional[Any]:
        """Список частей из кэша или None; части разного размера хранятся отдельно"""
        return self._chunks.get(self._key(locale, start, end) + (chunk_size,))

    def set_chunks(self, locale: str, start: int, end: int, data: Any,
                   ttl: Optional[float] = None, chunk_size: Optional[int] = None):
        """Сохранить список частей (перезаписывает без условий)"""
        self._chunks.set(self._key(locale, start, end) + (chunk_size,), data,
                         self.default_ttl if ttl is None else ttl)

    def clear(self):
        """Очистить оба пространства"""
        self._tables.clear()
        self._chunks.clear()

    def stats(self) -> dict:
        """Размеры пространств (для отладки)"""
        return {
            'table_size': len(self._tables),
            'chunks_size': len(self._chunks),
        }
