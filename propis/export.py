# -*- coding: utf-8 -*-
"""
Выгрузка таблицы «число - пропись» в Excel и PDF
"""

import logging
import platform
from pathlib import Path
from typing import List

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

logger = logging.getLogger(__name__)

COLUMNS = [
    ('number', 'Number', 16),
    ('propis_ru', 'Пропись (RU)', 70),
    ('propis_en', 'Words (EN)', 70),
]

FONT_CANDIDATES = {
    'Windows': [
        ('Arial', 'C:/Windows/Fonts/arial.ttf', 'Arial-Bold', 'C:/Windows/Fonts/arialbd.ttf'),
    ],
    'default': [
        ('DejaVu', '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
         'DejaVu-Bold', '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf'),
    ],
}

_pdf_fonts = None


def get_pdf_fonts():
    """
    Шрифты для PDF с поддержкой кириллицы.
    Регистрируются один раз; если ни один не найден - Helvetica (без кириллицы).
    """
    global _pdf_fonts
    if _pdf_fonts is not None:
        return _pdf_fonts

    candidates = FONT_CANDIDATES.get(platform.system(), FONT_CANDIDATES['default'])
    for regular, regular_path, bold, bold_path in candidates:
        if not (Path(regular_path).exists() and Path(bold_path).exists()):
            continue
        try:
            pdfmetrics.registerFont(TTFont(regular, regular_path))
            pdfmetrics.registerFont(TTFont(bold, bold_path))
        except TTFError as e:
            logger.warning("%s registration failed: %s", regular, e)
            continue
        logger.info("Registered %s fonts", regular)
        _pdf_fonts = (regular, bold)
        return _pdf_fonts

    logger.warning("No Cyrillic font found, using Helvetica")
    _pdf_fonts = ('Helvetica', 'Helvetica-Bold')
    return _pdf_fonts


def rows_to_excel(rows: List[dict], output_path: Path, title: str) -> Path:
    """Таблица в формате Excel"""
    output_path = Path(output_path)
    wb = Workbook()
    ws = wb.active
    ws.title = "Пропись"

    thin = Side(style='thin', color='BBBBBB')
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    # Заголовок
    last_column = chr(ord('A') + len(COLUMNS) - 1)
    ws.merge_cells(f'A1:{last_column}1')
    ws['A1'] = title
    ws['A1'].font = Font(name='Arial', size=12, bold=True)
    ws['A1'].alignment = Alignment(horizontal='center')
    ws.row_dimensions[1].height = 24

    # Шапка таблицы
    for col, (_, header, width) in enumerate(COLUMNS, start=1):
        cell = ws.cell(row=3, column=col, value=header)
        cell.font = Font(bold=True, size=11)
        cell.fill = PatternFill(start_color="D3D3D3", end_color="D3D3D3", fill_type="solid")
        cell.alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)
        cell.border = border
        ws.column_dimensions[cell.column_letter].width = width

    # Данные
    for row_idx, row in enumerate(rows, start=4):
        for col, (key, _, _) in enumerate(COLUMNS, start=1):
            cell = ws.cell(row=row_idx, column=col, value=row[key])
            cell.alignment = Alignment(wrap_text=True, vertical='top')
            cell.border = border

    ws.freeze_panes = 'A4'

    wb.save(output_path)
    wb.close()
    return output_path


def rows_to_pdf(rows: List[dict], output_path: Path, title: str) -> Path:
    """Таблица в формате PDF"""
    output_path = Path(output_path)
    font, font_bold = get_pdf_fonts()

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        rightMargin=15*mm,
        leftMargin=15*mm,
        topMargin=15*mm,
        bottomMargin=15*mm
    )

    title_style = ParagraphStyle(
        'Title',
        fontName=font_bold,
        fontSize=14,
        alignment=1,
        spaceAfter=6
    )

    cell_style = ParagraphStyle(
        'Cell',
        fontName=font,
        fontSize=8,
        leading=10
    )

    story = [Paragraph(title, title_style), Spacer(1, 10)]

    data = [[header for _, header, _ in COLUMNS]]
    for row in rows:
        data.append([Paragraph(str(row[key]), cell_style) for key, _, _ in COLUMNS])

    table = Table(data, colWidths=[25*mm, 77*mm, 78*mm], repeatRows=1)
    table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (-1, 0), font_bold),
        ('FONTSIZE', (0, 0), (-1, 0), 9),
        ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
        ('GRID', (0, 0), (-1, -1), 0.25, colors.grey),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
    ]))
    story.append(table)

    doc.build(story)
    return output_path


EXPORTERS = {
    'excel': (rows_to_excel, '.xlsx',
              'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'),
    'pdf': (rows_to_pdf, '.pdf', 'application/pdf'),
}


def export_rows(rows: List[dict], output_path: Path, title: str, format_type: str = 'excel') -> Path:
    """Выгрузка в выбранном формате: excel или pdf"""
    if format_type not in EXPORTERS:
        raise ValueError(f"Unknown export format: {format_type}")
    exporter, _, _ = EXPORTERS[format_type]
    return exporter(rows, output_path, title)
