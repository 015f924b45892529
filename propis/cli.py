# -*- coding: utf-8 -*-
"""
Propis - число прописью, римские числа и таблицы диапазонов из командной строки

Использование:
    propis words 1234 --lang ru
    propis words 12.55 --currency rub
    propis words 1.01 --lang en --currency usd
    propis roman MCMXCIV
    propis range 1-100 --export range.xlsx
    propis range 0-9999
    propis serve --port 8000
"""

import argparse
import sys
from pathlib import Path

from . import config
from .cache import RangeCache
from .errors import PropisError
from .export import export_rows
from .logger import setup_logging
from .num2text import CURRENCIES
from .roman import from_roman, to_roman
from .slugs import parse_amount, parse_roman
from .table import resolve_range
from .words import LANGUAGES, spell


def cmd_words(args):
    value = parse_amount([args.number])
    if value is None:
        raise PropisError(f"Invalid number: {args.number}", 'format')

    print(spell(value, args.lang, args.currency))


def cmd_roman(args):
    parsed = parse_roman([args.value])
    if parsed is None:
        raise PropisError(f"Not a Roman numeral or a number: {args.value}", 'format')

    if 'roman' in parsed:
        print(from_roman(parsed['roman']))
    else:
        print(to_roman(parsed['number']))


def cmd_range(args):
    cache = RangeCache(default_ttl=config.CACHE_TTL)
    page = resolve_range(args.locale, args.path, cache, args.max_size)

    if page['kind'] == 'chunks':
        print(f"Range {page['start']}-{page['end']} ({page['size']} numbers), sub-ranges:")
        for chunk in page['chunks']:
            print(f"  {chunk['url']}  ({chunk['size']} numbers)")
        return

    if args.export:
        title = f"Range: {page['start']} - {page['end']}"
        output = export_rows(page['rows'], Path(args.export), title, args.format)
        print(f"Saved: {output}")
        return

    for row in page['rows']:
        print(f"{row['number']:>13} | {row['propis_ru']} | {row['propis_en']}")


def cmd_serve(args):
    import uvicorn

    uvicorn.run("propis.webapp:app", host=args.host, port=args.port, reload=config.DEBUG)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='propis',
        description='Числа прописью (RU/EN), римские числа, таблицы диапазонов'
    )
    parser.add_argument('--log-level', default=None, help='Уровень логов (DEBUG, INFO, ...)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    words = subparsers.add_parser('words', help='Число прописью')
    words.add_argument('number', help='Целое или дробное число: 1234, 12.55, 12,55')
    words.add_argument('--lang', '-l', choices=sorted(LANGUAGES), default='ru')
    words.add_argument('--currency', '-c', choices=sorted(CURRENCIES),
                       help='Читать как сумму: рубли и копейки, доллары и центы ...')
    words.set_defaults(func=cmd_words)

    roman = subparsers.add_parser('roman', help='Римское <-> арабское число')
    roman.add_argument('value')
    roman.set_defaults(func=cmd_roman)

    range_parser = subparsers.add_parser('range', help='Таблица диапазона from-to[/from-to...]')
    range_parser.add_argument('path')
    range_parser.add_argument('--locale', default=config.DEFAULT_LOCALE, choices=config.LOCALES)
    range_parser.add_argument('--max-size', type=int, default=config.MAX_RANGE_SIZE,
                              help=f'Размер одной таблицы (по умолчанию: {config.MAX_RANGE_SIZE})')
    range_parser.add_argument('--export', '-e', help='Сохранить таблицу в файл')
    range_parser.add_argument('--format', '-f', choices=['excel', 'pdf'], default='excel',
                              help='Формат выгрузки (по умолчанию: excel)')
    range_parser.set_defaults(func=cmd_range)

    serve = subparsers.add_parser('serve', help='Запустить веб-сервер')
    serve.add_argument('--host', default=config.HOST)
    serve.add_argument('--port', type=int, default=config.PORT)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        args.func(args)
    except PropisError as e:
        print(f"Ошибка: {e.reason}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
