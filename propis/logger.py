# -*- coding: utf-8 -*-
"""Настройка логирования"""

import logging
import os

from . import config

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def setup_logging(level=None, log_file=None):
    """Консоль + файл (если задан). Повторный вызов ничего не ломает."""
    level = level or config.LOG_LEVEL
    log_file = log_file or config.LOG_FILE

    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
