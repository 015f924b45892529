# -*- coding: utf-8 -*-
"""
Настройки приложения

Переменные окружения:
    PROPIS_DEBUG: "1" - отладочный режим (уровень логов DEBUG, автоперезагрузка)
    PROPIS_LOG_LEVEL: уровень логов (по умолчанию INFO)
    PROPIS_MAX_RANGE_SIZE: максимальный размер таблицы на одной странице
    PROPIS_CACHE_TTL: время жизни кэша, секунды
    PROPIS_HOST / PROPIS_PORT: адрес веб-сервера
"""

import os
from pathlib import Path

# ============================================================================
# ПУТИ
# ============================================================================

PACKAGE_DIR = Path(__file__).parent
PROJECT_DIR = PACKAGE_DIR.parent
GENERATED_DIR = Path(os.getenv("PROPIS_GENERATED_DIR", str(PROJECT_DIR / "generated")))

# ============================================================================
# РЕЖИМ
# ============================================================================

DEBUG = os.getenv("PROPIS_DEBUG", "0") == "1"
LOG_LEVEL = os.getenv("PROPIS_LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
LOG_FILE = os.getenv("PROPIS_LOG_FILE")  # None - только консоль

# ============================================================================
# ДИАПАЗОНЫ
# ============================================================================

# Границы чисел для страниц диапазонов (ограничены русским конвертером)
RANGE_MIN_VALUE = 0
RANGE_MAX_VALUE = 999_999_999

# Сколько чисел показываем в одной таблице; больше - разбиваем на части
MAX_RANGE_SIZE = int(os.getenv("PROPIS_MAX_RANGE_SIZE", "500"))

# ============================================================================
# КЭШ
# ============================================================================

CACHE_TTL = int(os.getenv("PROPIS_CACHE_TTL", str(24 * 60 * 60)))

# ============================================================================
# ВЕБ-СЕРВЕР
# ============================================================================

HOST = os.getenv("PROPIS_HOST", "0.0.0.0")
PORT = int(os.getenv("PROPIS_PORT", "8000"))

LOCALES = ('en', 'ru', 'es', 'tr', 'hi')
DEFAULT_LOCALE = 'en'
