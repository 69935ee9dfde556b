"""Console table generator using Rich."""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from ..models import ReportSheet
from .base import BaseGenerator
from .html_generator import EMPTY_MESSAGE


class TableReportGenerator(BaseGenerator):
    """Generate console table reports using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize without output dir (prints to console)."""
        self.console = console or Console()

    def generate(self, sheet: ReportSheet, filename: Optional[str] = None) -> str:
        """Generate and print table report."""

        self._print_header(sheet)

        table = Table(show_header=True, header_style="bold magenta")
        for column, heading in zip(sheet.columns, sheet.header_line):
            table.add_column(escape(str(heading)), min_width=min(int(column.width), 12), overflow="fold")

        for line in sheet.data_lines:
            table.add_row(*(escape(str(value)) for value in line))

        self.console.print(table)
        if not sheet.data_lines:
            self.console.print(f"[dim]{EMPTY_MESSAGE}[/dim]")

        return "Console output"

    def _print_header(self, sheet: ReportSheet):
        """Print the title block and the active filters."""
        text = f"[bold]{escape(sheet.title)}[/bold]"
        if sheet.subtitle:
            text += f"\n[italic]{escape(sheet.subtitle)}[/italic]"
        text += f"\n\nGenerado: {escape(sheet.generated_at)}"
        if sheet.meta.generated_by:
            text += f"  |  Por: {escape(sheet.meta.generated_by)}"
        text += f"  |  Total: {sheet.row_count}"

        for label, value in sheet.filter_lines:
            text += f"\n   • {escape(str(label))}: {escape(str(value))}"

        self.console.print(Panel(text, title="📊 Reporte", border_style="blue"))
