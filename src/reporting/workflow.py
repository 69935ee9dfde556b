"""Main workflow orchestration."""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Union
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from src.core.config import settings
from .engine import assemble_report
from .filters import prune_filters
from .models import ReportMetadata
from .variants import get_variant
from .generators.excel_generator import ExcelReportGenerator
from .generators.html_generator import HTMLReportGenerator
from .generators.pdf_generator import PDFReportGenerator
from .generators.table_generator import TableReportGenerator

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('excel', 'html', 'pdf', 'table', 'all')


def generate_report(
    report_key: str,
    rows: Sequence[Mapping[str, Any]],
    filters: Optional[Mapping[str, Any]] = None,
    meta: Optional[ReportMetadata] = None,
    output_format: str = 'excel',
    output_dir: Optional[Union[str, Path]] = None,
    console: Optional[Console] = None,
) -> List[str]:
    """
    Export one ERP listing.

    Args:
        report_key: Variant key ('areas', 'corporativos', 'empleados', ...)
        rows: Flattened data rows as produced by the query layer
        filters: Active filters, label -> value
        meta: Title block; title and subtitle default to the variant's
        output_format: Output format ('excel', 'html', 'pdf', 'table', 'all')
        output_dir: Output directory path

    Returns:
        List of generated file paths
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}")

    variant = get_variant(report_key)
    console = console or Console()
    if output_dir is None:
        output_dir = settings.output_dir

    # Default metadata
    if meta is None:
        meta = ReportMetadata()
    meta = meta.model_copy(update={
        "title": meta.title if meta.title is not None else variant.title,
        "subtitle": meta.subtitle if meta.subtitle is not None else settings.default_subtitle,
    })

    console.print(f"\n[bold blue]📊 {escape(variant.title)}[/bold blue]\n")

    active = prune_filters(filters)
    if active:
        console.print("[bold]🔍 Filtros:[/bold]")
        for label, value in active:
            console.print(f"   • {escape(label)}: {escape(value)}")

    sheet = assemble_report(variant, rows, filters, meta)
    logger.info(f"Exporting {sheet.row_count} rows for '{variant.key}' as {output_format}")

    output_files = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:

        # Excel
        if output_format in ['excel', 'all']:
            task = progress.add_task("Generating Excel...", total=None)
            excel_file = ExcelReportGenerator(output_dir).generate(sheet)
            output_files.append(excel_file)
            progress.remove_task(task)
            console.print(f"   ✅ Excel: {excel_file}")

        # HTML
        if output_format in ['html', 'all']:
            task = progress.add_task("Generating HTML...", total=None)
            html_file = HTMLReportGenerator(output_dir).generate(sheet)
            output_files.append(html_file)
            progress.remove_task(task)
            console.print(f"   ✅ HTML:  {html_file}")

        # PDF
        if output_format in ['pdf', 'all']:
            task = progress.add_task("Generating PDF...", total=None)
            pdf_file = PDFReportGenerator(output_dir).generate(sheet)
            output_files.append(pdf_file)
            progress.remove_task(task)
            console.print(f"   ✅ PDF:   {pdf_file}")

    # Table
    if output_format in ['table', 'all']:
        console.print("\n")
        TableReportGenerator(console).generate(sheet)
        console.print("\n   ✅ Table: Displayed above")

    # Summary
    console.print(f"\n[bold green]✨ Export complete![/bold green]")
    console.print(f"   • Rows: {sheet.row_count}")
    console.print(f"   • Active filters: {len(active)}")
    console.print(f"   • Files: {len(output_files)}")
    console.print()

    return output_files
