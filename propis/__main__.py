# -*- coding: utf-8 -*-
"""Запуск: python -m propis"""
import sys

from .cli import main

sys.exit(main())
