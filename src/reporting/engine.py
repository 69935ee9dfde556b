"""
Report grid engine.

Turns flattened data rows, report metadata and the active filters into the
grid a rendering backend paints, plus the layout hints it needs to target
styling (header row, data region, last column).

Grid layout, 1-based rows:

    1  title
    2  subtitle
    3  "Generated:" | timestamp
    4  blank
    .  "Filters", one line per surviving filter, blank   (omitted when empty)
    H  headings
    .  one line per data row
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from .filters import filter_block_size, prune_filters
from .formatting import format_timestamp
from .models import Cell, LayoutHints, ReportGrid, ReportMetadata, ReportSheet

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Report"
GENERATED_LABEL = "Generated:"
FILTERS_LABEL = "Filters"

# title, subtitle, generated, blank
PREFIX_LINES = 4


HeadingsFn = Callable[[], Sequence[str]]
MapRowFn = Callable[[Mapping[str, Any]], Sequence[Cell]]


def build_grid(
    rows: Iterable[Mapping[str, Any]],
    filters: Optional[Mapping[str, Any]],
    meta: Optional[ReportMetadata],
    headings_fn: HeadingsFn,
    map_row_fn: MapRowFn,
) -> ReportGrid:
    """
    Build the full report grid.

    Args:
        rows: Flattened data rows, may be empty
        filters: Label -> value mapping of active filters, may be empty
        meta: Title block; missing fields fall back to defaults
        headings_fn: Produces the column headings of the report
        map_row_fn: Maps one data row to its output cells

    Returns:
        Tuple of lines, each a tuple of cells
    """
    if meta is None:
        meta = ReportMetadata()

    out = [
        (meta.title if meta.title is not None else DEFAULT_TITLE,),
        (meta.subtitle if meta.subtitle is not None else "",),
        (GENERATED_LABEL, format_timestamp(meta.generated_at)),
        ("",),
    ]

    entries = prune_filters(filters)
    if entries:
        out.append((FILTERS_LABEL,))
        for label, value in entries:
            out.append((label, value))
        out.append(("",))

    out.append(tuple(headings_fn()))
    for row in rows:
        out.append(tuple(map_row_fn(row)))

    return tuple(out)


def compute_layout(
    filters: Optional[Mapping[str, Any]],
    row_count: int,
    column_count: int,
) -> LayoutHints:
    """
    Compute table coordinates for a grid built by build_grid.

    The arguments must describe the same filters and row count the grid was
    built from, otherwise the coordinates will not line up with it.
    """
    header_row = PREFIX_LINES + filter_block_size(filters) + 1
    return LayoutHints(
        header_row_index=header_row,
        first_data_row_index=header_row + 1,
        last_data_row_index=header_row + max(1, row_count),
        last_column_index=column_count,
    )


def assemble_report(
    variant,
    rows: Sequence[Mapping[str, Any]],
    filters: Optional[Mapping[str, Any]] = None,
    meta: Optional[ReportMetadata] = None,
) -> ReportSheet:
    """
    Build grid and layout for a report variant in one step.

    Args:
        variant: ReportVariant supplying headings, row mapping and columns
        rows: Flattened data rows
        filters: Active filters (label -> value)
        meta: Title block

    Returns:
        ReportSheet ready for any rendering backend
    """
    if meta is None:
        meta = ReportMetadata(title=variant.title)
    rows = list(rows)

    grid = build_grid(rows, filters, meta, variant.headings, variant.map_row)
    layout = compute_layout(filters, len(rows), len(variant.columns))

    logger.debug(
        "Assembled %s report: %d rows, %d filter lines, header at row %d",
        variant.key, len(rows), filter_block_size(filters), layout.header_row_index,
    )

    return ReportSheet(
        key=variant.key,
        filename=variant.filename,
        grid=grid,
        layout=layout,
        columns=variant.columns,
        meta=meta,
        row_count=len(rows),
    )
