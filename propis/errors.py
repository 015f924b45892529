# -*- coding: utf-8 -*-
"""
Ошибки движка преобразования чисел и значения-результаты Ok / Err
"""

from typing import Any, Callable, Optional


class PropisError(ValueError):
    """Базовая ошибка: вид (kind) + понятная пользователю причина (reason)"""

    kind = 'error'

    def __init__(self, reason: str, kind: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        if kind is not None:
            self.kind = kind

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'error': self.reason}


class DomainError(PropisError):
    """Число вне поддерживаемого диапазона конвертера"""

    kind = 'domain'


class FormatError(PropisError):
    """Римское число не прошло структурную проверку"""

    kind = 'format'


class RangeError(PropisError):
    """
    Диапазон не прошёл проверку.

    kind: 'format' | 'bounds' | 'inverted' | 'size'
    """

    kind = 'range'

    def __init__(self, kind: str, reason: str):
        super().__init__(reason, kind)


class Ok:
    """Успешный результат"""

    ok = True

    def __init__(self, value: Any):
        self.value = value

    def unwrap(self) -> Any:
        return self.value

    def __eq__(self, other):
        return isinstance(other, Ok) and other.value == self.value

    def __repr__(self):
        return f"Ok({self.value!r})"


class Err:
    """Неуспешный результат, хранит исходную ошибку"""

    ok = False

    def __init__(self, error: PropisError):
        self.error = error

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def reason(self) -> str:
        return self.error.reason

    def unwrap(self) -> Any:
        raise self.error

    def __repr__(self):
        return f"Err({self.error.kind}: {self.error.reason})"


def capture(func: Callable, *args, **kwargs):
    """
    Выполнить конвертацию и вернуть Ok(значение) или Err(ошибка).

    Перехватываются только ошибки движка (PropisError), всё остальное
    пробрасывается дальше.
    """
    try:
        return Ok(func(*args, **kwargs))
    except PropisError as e:
        return Err(e)


def check_domain(n, max_value, min_value=0):
    """Проверить, что n целое и лежит в [min_value, max_value]"""
    if isinstance(n, bool) or not isinstance(n, int):
        raise DomainError(f"Expected an integer, got {n!r}")
    if n < min_value or n > max_value:
        raise DomainError(
            f"Number {n} is out of range. Supported range: {min_value} to {max_value:,}"
        )
