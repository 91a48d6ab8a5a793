"""
PDF Report - Job list as a printable table.

Layout: a title line followed by a table with the same five columns as the
CSV export. Rows keep the input order; long lists continue on further
pages with the header row repeated.
"""

import html
import io
from typing import Iterable

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from jobtracker.domain.entities import Job
from .csv_export import HEADERS, job_row

REPORT_TITLE = "Job Applications Report"

HEADER_BG = colors.HexColor("#2980b9")
ROW_ALT_BG = colors.HexColor("#f5f5f5")
COLUMN_WIDTHS = [w * mm for w in (46, 46, 28, 28, 30)]


def _table_style() -> TableStyle:
    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_BG),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, ROW_ALT_BG]),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.HexColor("#cccccc")),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ])


def to_report(jobs: Iterable[Job], title: str = REPORT_TITLE) -> bytes:
    """
    Render jobs as a PDF document.

    Args:
        jobs: Jobs in the order they should appear.
        title: Title line above the table.

    Returns:
        The PDF file contents.
    """
    styles = getSampleStyleSheet()
    cell_style = ParagraphStyle("Cell", parent=styles["BodyText"], fontSize=9, leading=11)

    rows = [list(HEADERS)]
    for job in jobs:
        # Paragraphs wrap long names inside their column
        rows.append([Paragraph(html.escape(cell), cell_style) for cell in job_row(job)])

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=title,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
    )

    table = Table(rows, colWidths=COLUMN_WIDTHS, repeatRows=1, hAlign="LEFT")
    table.setStyle(_table_style())

    story = [
        Paragraph(html.escape(title), styles["Title"]),
        Spacer(1, 4 * mm),
        table,
    ]
    doc.build(story)
    return buffer.getvalue()
