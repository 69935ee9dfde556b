"""HTML report generator."""

import logging
from html import escape
from typing import Optional
from ..models import ReportSheet
from .base import BaseGenerator

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Sin resultados con los filtros actuales."


class HTMLReportGenerator(BaseGenerator):
    """Generate printable HTML reports."""

    extension = "html"

    def generate(self, sheet: ReportSheet, filename: Optional[str] = None) -> str:
        """Generate HTML report."""
        output_file = self._output_path(sheet, filename)

        html = self.render(sheet)
        output_file.write_text(html, encoding='utf-8')

        logger.info(f"Wrote {sheet.row_count} {sheet.key} rows to {output_file}")
        return str(output_file)

    def render(self, sheet: ReportSheet) -> str:
        """Render the complete HTML document."""

        # Meta line
        meta_html = f"Generado: {escape(sheet.generated_at)}"
        if sheet.meta.generated_by:
            meta_html += f" | Por: {escape(sheet.meta.generated_by)}"
        meta_html += f" | Total: {sheet.row_count}"

        # Filter chips
        chips_html = ""
        for label, value in sheet.filter_lines:
            chips_html += f"""
            <span class="chip"><strong>{escape(str(label))}:</strong> {escape(str(value))}</span>"""
        if chips_html:
            chips_html = f'<div class="chips">{chips_html}\n        </div>'

        # Table
        widths = sum(c.width for c in sheet.columns) or 1
        header_html = ""
        for column, heading in zip(sheet.columns, sheet.header_line):
            header_html += f"""
                    <th style="width: {column.width / widths * 100:.1f}%">{escape(str(heading))}</th>"""

        rows_html = ""
        for line in sheet.data_lines:
            cells = "".join(f"<td>{escape(str(value))}</td>" for value in line)
            rows_html += f"""
                <tr>{cells}</tr>"""
        if not sheet.data_lines:
            rows_html = f"""
                <tr><td colspan="{len(sheet.columns)}" class="muted">{EMPTY_MESSAGE}</td></tr>"""

        html = f"""<!DOCTYPE html>
<html lang="es">
<head>
    <meta charset="UTF-8">
    <title>{escape(sheet.title)}</title>
    <style>
        * {{ font-family: 'DejaVu Sans', Arial, sans-serif; }}
        body {{ font-size: 11px; color: #111; margin: 24px; }}
        .header {{ border-bottom: 1px solid #ddd; padding-bottom: 10px; margin-bottom: 14px; }}
        .title {{ font-size: 16px; font-weight: 700; margin: 0; }}
        .subtitle {{ margin: 2px 0 0 0; color: #555; font-style: italic; }}
        .meta {{ margin-top: 8px; color: #666; font-size: 10px; }}
        .chips {{ margin-top: 10px; }}
        .chip {{
            display: inline-block;
            background: #f3f4f6;
            border: 1px solid #e5e7eb;
            padding: 3px 8px;
            border-radius: 999px;
            margin: 0 6px 6px 0;
            font-size: 10px;
        }}
        table {{ width: 100%; border-collapse: collapse; margin-top: 10px; }}
        thead th {{
            background: #f1f5f9;
            border: 1px solid #e5e7eb;
            padding: 8px;
            text-align: left;
            font-size: 10px;
        }}
        tbody td {{ border: 1px solid #e5e7eb; padding: 7px; vertical-align: top; }}
        .muted {{ color: #6b7280; }}
        .footer {{ border-top: 1px solid #ddd; margin-top: 16px; padding: 8px 0; font-size: 10px; color: #666; }}
    </style>
</head>
<body>
    <div class="header">
        <p class="title">{escape(sheet.title)}</p>
        <p class="subtitle">{escape(sheet.subtitle)}</p>
        <div class="meta">{meta_html}</div>
        {chips_html}
    </div>

    <table>
        <thead>
            <tr>{header_html}
            </tr>
        </thead>
        <tbody>{rows_html}
        </tbody>
    </table>

    <div class="footer muted">{escape(self._footer_text(sheet))}</div>
</body>
</html>
"""

        return html
