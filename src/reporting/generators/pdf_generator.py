"""PDF report generator built on ReportLab."""

import io
import logging
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from src.core.config import settings
from ..models import ReportSheet
from .base import BaseGenerator
from .html_generator import EMPTY_MESSAGE

logger = logging.getLogger(__name__)

FONT_NAME = "Helvetica"
FONT_NAME_BOLD = "Helvetica-Bold"
MARGIN = 12 * mm

HEADER_BACKGROUND = colors.HexColor("#F1F5F9")
GRID_COLOR = colors.HexColor("#E5E7EB")
MUTED = colors.HexColor("#6B7280")


class PDFReportGenerator(BaseGenerator):
    """Generate paged PDF reports from a report grid."""

    extension = "pdf"

    def __init__(self, output_dir=None, landscape_pages: Optional[bool] = None):
        super().__init__(output_dir)
        if landscape_pages is None:
            landscape_pages = settings.pdf_landscape
        self.pagesize = landscape(A4) if landscape_pages else A4
        self._init_styles()

    def _init_styles(self):
        self.title_style = ParagraphStyle(
            "ReportTitle",
            fontName=FONT_NAME_BOLD,
            fontSize=16,
            leading=20,
        )
        self.subtitle_style = ParagraphStyle(
            "ReportSubtitle",
            fontName="Helvetica-Oblique",
            fontSize=10,
            leading=13,
            textColor=colors.HexColor("#555555"),
        )
        self.meta_style = ParagraphStyle(
            "ReportMeta",
            fontName=FONT_NAME,
            fontSize=8,
            leading=11,
            textColor=MUTED,
        )
        self.header_style = ParagraphStyle(
            "TableHeader",
            fontName=FONT_NAME_BOLD,
            fontSize=8,
            leading=10,
        )
        self.cell_style = ParagraphStyle(
            "TableCell",
            fontName=FONT_NAME,
            fontSize=8,
            leading=10,
        )

    def generate(self, sheet: ReportSheet, filename: Optional[str] = None) -> str:
        """Generate PDF report."""
        output_file = self._output_path(sheet, filename)
        output_file.write_bytes(self.render_bytes(sheet))

        logger.info(f"Wrote {sheet.row_count} {sheet.key} rows to {output_file}")
        return str(output_file)

    def render_bytes(self, sheet: ReportSheet) -> bytes:
        """Render the PDF document in memory."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.pagesize,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN + 6 * mm,
            title=sheet.title,
        )

        elements = self._header_elements(sheet)
        elements.append(self._table(sheet, doc.width))

        footer = self._footer_text(sheet)

        def draw_footer(canvas, doc_):
            canvas.saveState()
            canvas.setFont(FONT_NAME, 8)
            canvas.setFillColor(MUTED)
            canvas.setStrokeColor(GRID_COLOR)
            y = MARGIN
            canvas.line(MARGIN, y + 10, self.pagesize[0] - MARGIN, y + 10)
            canvas.drawString(MARGIN, y, footer)
            canvas.drawRightString(self.pagesize[0] - MARGIN, y, f"Página {doc_.page}")
            canvas.restoreState()

        doc.build(elements, onFirstPage=draw_footer, onLaterPages=draw_footer)
        return buffer.getvalue()

    def _header_elements(self, sheet: ReportSheet) -> List:
        """Title, subtitle, meta line and filter summary."""
        elements = [
            Paragraph(escape(sheet.title), self.title_style),
            Paragraph(escape(sheet.subtitle), self.subtitle_style),
        ]

        meta = f"Generado: {escape(sheet.generated_at)}"
        if sheet.meta.generated_by:
            meta += f" | Por: {escape(sheet.meta.generated_by)}"
        meta += f" | Total: {sheet.row_count}"
        elements.append(Spacer(1, 2 * mm))
        elements.append(Paragraph(meta, self.meta_style))

        filters = sheet.filter_lines
        if filters:
            chips = " &nbsp; ".join(
                f"<b>{escape(str(label))}:</b> {escape(str(value))}" for label, value in filters
            )
            elements.append(Paragraph(chips, self.meta_style))

        elements.append(Spacer(1, 4 * mm))
        return elements

    def _table(self, sheet: ReportSheet, frame_width: float) -> Table:
        """Header line plus data lines, widths scaled from the column widths."""
        total = sum(c.width for c in sheet.columns) or 1
        col_widths = [frame_width * c.width / total for c in sheet.columns]

        data = [[Paragraph(escape(str(v)), self.header_style) for v in sheet.header_line]]
        for line in sheet.data_lines:
            data.append([Paragraph(escape(str(v)), self.cell_style) for v in line])

        style = [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
            ("GRID", (0, 0), (-1, -1), 0.5, GRID_COLOR),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("TOPPADDING", (0, 0), (-1, -1), 3),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ]

        if not sheet.data_lines:
            empty = [Paragraph(EMPTY_MESSAGE, self.meta_style)] + [""] * (len(sheet.columns) - 1)
            data.append(empty)
            style.append(("SPAN", (0, 1), (-1, 1)))

        table = Table(data, colWidths=col_widths, repeatRows=1)
        table.setStyle(TableStyle(style))
        return table
