# -*- coding: utf-8 -*-
"""
Propis - JSON API: число прописью, римские числа, таблицы диапазонов
"""

import logging
import shutil
import uuid
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, FastAPI, HTTPException, Query, Request
from fastapi.responses import FileResponse, JSONResponse

from . import config
from .cache import RangeCache
from .errors import PropisError
from .export import EXPORTERS, export_rows
from .num2text import CURRENCIES, format_number_with_text
from .roman import from_roman, to_roman
from .slugs import parse_amount, parse_roman
from .table import EXAMPLES, resolve_range
from .words import spell

logger = logging.getLogger(__name__)

router = APIRouter()

CURRENCY_PATTERN = f"^({'|'.join(sorted(CURRENCIES))})$"


# ============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# ============================================================================

def get_cache(request: Request) -> RangeCache:
    return request.app.state.cache


def check_locale(locale: str) -> str:
    if locale not in config.LOCALES:
        raise HTTPException(404, f"Unknown locale: {locale}")
    return locale


async def propis_error_handler(request: Request, exc: PropisError):
    """Ошибки движка -> 400 с видом ошибки и примерами"""
    logger.info("rejected %s: %s (%s)", request.url.path, exc.reason, exc.kind)
    body = exc.to_dict()
    body['examples'] = EXAMPLES
    return JSONResponse(status_code=400, content=body)


# ============================================================================
# МАРШРУТЫ
# ============================================================================

@router.get("/")
async def home():
    """Список доступных методов"""
    return {
        "name": "propis",
        "endpoints": [
            "/api/words/{number}?lang=ru|en&currency=rub|usd|eur|kzt",
            "/api/roman/{value}",
            "/api/range/{from-to}[/{from-to}...]?locale=en",
            "/api/export/{from-to}?format=excel|pdf",
            "/api/cache/stats",
        ],
    }


@router.get("/api/words/{number}")
async def words(number: str,
                lang: str = Query('ru', pattern='^(ru|en)$'),
                currency: Optional[str] = Query(None, pattern=CURRENCY_PATTERN)):
    """Число прописью: целое, дробное (12.55 или 12,55) или сумма в валюте"""
    value = parse_amount([number])
    if value is None:
        raise HTTPException(400, f"Invalid number: {number}")

    result = {"number": value, "lang": lang, "words": spell(value, lang, currency)}
    if currency:
        result["currency"] = currency
    elif lang == 'ru' and isinstance(value, int):
        result["formatted"] = format_number_with_text(value)
    return result


@router.get("/api/roman/{value}")
async def roman(value: str):
    """Римское -> арабское или арабское -> римское"""
    parsed = parse_roman([value])
    if parsed is None:
        raise HTTPException(400, f"Not a Roman numeral or a number: {value}")

    if 'roman' in parsed:
        number = from_roman(parsed['roman'])
    else:
        number = parsed['number']
    return {"roman": to_roman(number), "number": number, "input": value}


@router.get("/api/range/{ranges:path}")
async def range_page(request: Request, ranges: str, locale: str = config.DEFAULT_LOCALE):
    """Таблица диапазона или список его частей"""
    check_locale(locale)
    return resolve_range(locale, ranges, get_cache(request))


@router.get("/api/export/{ranges:path}")
async def export_range(request: Request, ranges: str, background_tasks: BackgroundTasks,
                       format_type: str = Query('excel', alias='format', pattern='^(excel|pdf)$'),
                       locale: str = config.DEFAULT_LOCALE):
    """Скачивание таблицы диапазона"""
    check_locale(locale)
    page = resolve_range(locale, ranges, get_cache(request))

    if page['kind'] != 'table':
        raise HTTPException(
            400,
            f"Range too large to export ({page['size']} numbers), pick a sub-range",
        )

    _, suffix, media_type = EXPORTERS[format_type]
    output_dir = config.GENERATED_DIR / str(uuid.uuid4())
    output_dir.mkdir(parents=True, exist_ok=True)
    filename = f"range_{page['start']}-{page['end']}{suffix}"

    title = f"Range: {page['start']} - {page['end']}"
    file_path = export_rows(page['rows'], output_dir / filename, title, format_type)
    logger.info("exported %s", file_path)

    # Каталог выгрузки удаляется после отправки файла
    background_tasks.add_task(shutil.rmtree, output_dir, ignore_errors=True)
    return FileResponse(file_path, filename=filename, media_type=media_type)


@router.get("/api/cache/stats")
async def cache_stats(request: Request):
    """Размер кэша"""
    return get_cache(request).stats()


@router.post("/api/cache/clear")
async def cache_clear(request: Request):
    """Очистка кэша"""
    get_cache(request).clear()
    return {"status": "ok"}


# ============================================================================
# ПРИЛОЖЕНИЕ
# ============================================================================

def create_app(cache: Optional[RangeCache] = None) -> FastAPI:
    """Приложение с общим на все запросы кэшем"""
    application = FastAPI(title="Propis - numbers to words")
    if cache is None:
        cache = RangeCache(default_ttl=config.CACHE_TTL)
    application.state.cache = cache
    application.add_exception_handler(PropisError, propis_error_handler)
    application.include_router(router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from .logger import setup_logging

    setup_logging()
    uvicorn.run(app, host=config.HOST, port=config.PORT)
