"""Data models for report exports."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Union
from openpyxl.utils import get_column_letter
from pydantic import BaseModel, ConfigDict, Field


Cell = Union[str, int, float]
Line = Tuple[Cell, ...]
ReportGrid = Tuple[Line, ...]


class ReportMetadata(BaseModel):
    """Title block of a generated report."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = Field(None, description="Report title, first line of the sheet")
    subtitle: Optional[str] = Field(None, description="Report subtitle, second line of the sheet")
    generated_at: Optional[Union[datetime, str]] = Field(
        None, description="Generation timestamp; strings are rendered verbatim"
    )
    generated_by: Optional[str] = Field(None, description="Name of the requesting user")
    footer_left: Optional[str] = Field(None, description="Footer text for paged outputs")


@dataclass(frozen=True)
class ColumnSpec:
    """One output column: 1-based position, heading and display width."""
    index: int
    heading: str
    width: float

    @property
    def letter(self) -> str:
        return get_column_letter(self.index)


@dataclass(frozen=True)
class LayoutHints:
    """
    1-based coordinates of the table region inside a report grid.

    Row 1 is the title line. The data region always spans at least one row
    so border and wrap ranges never collapse onto the header.
    """
    header_row_index: int
    first_data_row_index: int
    last_data_row_index: int
    last_column_index: int

    @property
    def last_column_letter(self) -> str:
        return get_column_letter(self.last_column_index)

    @property
    def header_range(self) -> str:
        return f"A{self.header_row_index}:{self.last_column_letter}{self.header_row_index}"

    @property
    def table_range(self) -> str:
        return f"A{self.header_row_index}:{self.last_column_letter}{self.last_data_row_index}"

    @property
    def freeze_cell(self) -> str:
        return f"A{self.first_data_row_index}"


@dataclass(frozen=True)
class ReportSheet:
    """A built grid together with everything a rendering backend needs."""
    key: str
    filename: str
    grid: ReportGrid
    layout: LayoutHints
    columns: Tuple[ColumnSpec, ...]
    meta: ReportMetadata
    row_count: int

    @property
    def title(self) -> str:
        return str(self.grid[0][0])

    @property
    def subtitle(self) -> str:
        return str(self.grid[1][0])

    @property
    def generated_at(self) -> str:
        return str(self.grid[2][1])

    @property
    def prefix_lines(self) -> ReportGrid:
        """Title, subtitle, generated and filter lines above the header."""
        return self.grid[:self.layout.header_row_index - 1]

    @property
    def header_line(self) -> Line:
        return self.grid[self.layout.header_row_index - 1]

    @property
    def data_lines(self) -> ReportGrid:
        return self.grid[self.layout.header_row_index:]

    @property
    def filter_lines(self) -> ReportGrid:
        """Label/value pairs of the filter block, empty when no filter survived."""
        # Lines 1-4 are title/subtitle/generated/blank; the filter block is
        # "Filters", the entries, then a blank line.
        block = self.grid[4:self.layout.header_row_index - 1]
        return block[1:-1] if block else ()
