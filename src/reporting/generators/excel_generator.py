"""Excel report generator with styled table region."""

import io
import logging
from typing import Iterable, Optional
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import PatternFill, Font, Alignment, Border, Side
from openpyxl.worksheet.worksheet import Worksheet
from ..models import ColumnSpec, LayoutHints, ReportSheet
from .base import BaseGenerator

logger = logging.getLogger(__name__)

HEADER_FILL = "F1F5F9"
THIN_BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)


def write_grid(ws: Worksheet, sheet: ReportSheet) -> None:
    """
    Write every grid line into the worksheet, starting at A1.

    Control characters Excel cannot store are stripped, and text starting
    with "=" is kept as text instead of becoming a formula.
    """
    for row_idx, line in enumerate(sheet.grid, start=1):
        for col_idx, value in enumerate(line, start=1):
            if isinstance(value, str):
                value = ILLEGAL_CHARACTERS_RE.sub("", value)
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if isinstance(value, str) and value.startswith("="):
                cell.data_type = "s"


def apply_sheet_styles(ws: Worksheet, layout: LayoutHints, columns: Iterable[ColumnSpec]) -> None:
    """
    Style a worksheet that holds a report grid.

    Runs after the grid is written and only needs the layout hints, so it can
    be re-applied to the same sheet with the same result.
    """
    ws['A1'].font = Font(size=16, bold=True)
    ws['A2'].font = Font(size=11, italic=True)

    header_fill = PatternFill(start_color=HEADER_FILL, end_color=HEADER_FILL, fill_type="solid")
    for cell in ws[layout.header_range][0]:
        cell.font = Font(bold=True)
        cell.fill = header_fill

    wrap = Alignment(wrap_text=True, vertical='top')
    for row in ws[layout.table_range]:
        for cell in row:
            cell.border = THIN_BORDER
            cell.alignment = wrap

    ws.freeze_panes = layout.freeze_cell
    ws.auto_filter.ref = layout.header_range

    for column in columns:
        ws.column_dimensions[column.letter].width = column.width


class ExcelReportGenerator(BaseGenerator):
    """Generate Excel reports from a report grid."""

    extension = "xlsx"

    def generate(self, sheet: ReportSheet, filename: Optional[str] = None) -> str:
        """Generate Excel report."""
        output_file = self._output_path(sheet, filename)

        wb = self.build_workbook(sheet)
        wb.save(output_file)

        logger.info(f"Wrote {sheet.row_count} {sheet.key} rows to {output_file}")
        return str(output_file)

    def render_bytes(self, sheet: ReportSheet) -> bytes:
        """Render the workbook in memory, for streaming downloads."""
        buffer = io.BytesIO()
        self.build_workbook(sheet).save(buffer)
        return buffer.getvalue()

    def build_workbook(self, sheet: ReportSheet) -> Workbook:
        wb = Workbook()
        ws = wb.active
        # Sheet titles are capped at 31 characters
        ws.title = sheet.key[:31]

        write_grid(ws, sheet)
        apply_sheet_styles(ws, sheet.layout, sheet.columns)
        return wb
