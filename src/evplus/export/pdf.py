"""Tabular PDF export for prop listings."""

from __future__ import annotations

from html import escape
from io import BytesIO
from typing import Any, Sequence

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from evplus.errors import RenderFailed
from evplus.models import PropRecord


PAGE_MARGIN = 30
TITLE_FONT_SIZE = 18
BODY_FONT_SIZE = 12
COLUMN_HEADERS: tuple[str, ...] = ("Player", "Stat", "Line", "Team")
COLUMN_WIDTHS: tuple[int, ...] = (180, 90, 80, 80)

_TITLE_STYLE = ParagraphStyle(
    "PropsTitle",
    fontName="Helvetica",
    fontSize=TITLE_FONT_SIZE,
    leading=TITLE_FONT_SIZE * 1.2,
    alignment=TA_CENTER,
)

_HEADER_STYLE = ParagraphStyle(
    "PropsHeader",
    fontName="Helvetica-Bold",
    fontSize=BODY_FONT_SIZE,
    leading=BODY_FONT_SIZE * 1.2,
)

_CELL_STYLE = ParagraphStyle(
    "PropsCell",
    fontName="Helvetica",
    fontSize=BODY_FONT_SIZE,
    leading=BODY_FONT_SIZE * 1.2,
)

_TABLE_STYLE = TableStyle(
    [
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 4),
        ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.black),
        ("TOPPADDING", (0, 1), (-1, -1), 1),
        ("BOTTOMPADDING", (0, 1), (-1, -1), 1),
    ]
)


def props_title(league: str) -> str:
    return f"PrizePicks Props – {league.upper()}"


def _cell(value: Any, style: ParagraphStyle = _CELL_STYLE) -> Paragraph:
    # Absent upstream fields render the way they serialize. Paragraph cells wrap
    # inside their column width.
    text = "null" if value is None else str(value)
    return Paragraph(escape(text), style)


def _table_rows(records: Sequence[PropRecord]) -> list[list[Paragraph]]:
    rows = [[_cell(header, _HEADER_STYLE) for header in COLUMN_HEADERS]]
    for record in records:
        rows.append([_cell(record.player), _cell(record.stat), _cell(record.line), _cell(record.team)])
    return rows


def render_props_pdf(league: str, records: Sequence[PropRecord], *, compress: bool = True) -> bytes:
    """Render ``records`` as a single PDF document and return its bytes.

    The table keeps the input order; the header row repeats when rows spill
    onto further pages. An empty ``records`` still yields the title and the
    header row.
    """

    buffer = BytesIO()
    try:
        doc = SimpleDocTemplate(
            buffer,
            pagesize=LETTER,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=props_title(league),
            pageCompression=1 if compress else 0,
        )
        table = Table(
            _table_rows(records),
            colWidths=list(COLUMN_WIDTHS),
            repeatRows=1,
            hAlign="LEFT",
        )
        table.setStyle(_TABLE_STYLE)
        doc.build(
            [
                Paragraph(escape(props_title(league)), _TITLE_STYLE),
                Spacer(1, BODY_FONT_SIZE),
                table,
            ]
        )
    except Exception as exc:
        raise RenderFailed(f"Failed to render props PDF: {exc}") from exc
    return buffer.getvalue()


__all__ = [
    "COLUMN_HEADERS",
    "COLUMN_WIDTHS",
    "props_title",
    "render_props_pdf",
]
