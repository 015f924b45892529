# -*- coding: utf-8 -*-
"""
Propis - числа прописью (русский, английский), римские числа,
таблицы и постраничный просмотр больших диапазонов
"""

from .errors import PropisError, DomainError, FormatError, RangeError, Ok, Err, capture
from .num2text import number_to_text, number_to_text_decimal, number_to_text_with_currency, AgreementClass
from .words import spell
from .num2text_en import number_to_text_en
from .roman import to_roman, from_roman
from .ranges import validate_range, generate_range
from .chunks import split_range_into_chunks, split_nested_ranges_into_chunks, find_chunk_index
from .cache import RangeCache

__version__ = "0.1.0"
