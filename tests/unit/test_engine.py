"""
Unit tests for the report grid engine.
Covers grid construction order, filter block omission and layout coordinates.
"""
import re
import pytest
from src.reporting.engine import (
    DEFAULT_TITLE,
    assemble_report,
    build_grid,
    compute_layout,
)
from src.reporting.formatting import PLACEHOLDER
from src.reporting.models import ReportMetadata
from src.reporting.variants import AREAS, REPORT_REGISTRY


class TestBuildGrid:
    """Test suite for build_grid."""

    def test_empty_report_has_prefix_and_header_only(self):
        """No rows and no filters yields title, subtitle, generated, blank, header."""
        meta = ReportMetadata(title="Areas", generated_at="2025-01-01 10:00")
        grid = build_grid([], {}, meta, AREAS.headings, AREAS.map_row)

        assert grid == (
            ("Areas",),
            ("",),
            ("Generated:", "2025-01-01 10:00"),
            ("",),
            tuple(AREAS.headings()),
        )

    def test_defaults_for_missing_metadata(self):
        grid = build_grid([], None, None, AREAS.headings, AREAS.map_row)

        assert grid[0] == (DEFAULT_TITLE,)
        assert grid[1] == ("",)
        assert grid[2][0] == "Generated:"
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}", grid[2][1])

    def test_datetime_is_formatted(self, fixed_meta):
        grid = build_grid([], {}, fixed_meta, AREAS.headings, AREAS.map_row)
        assert grid[2] == ("Generated:", "2025-03-14 09:26")

    def test_filter_block(self):
        """Only non-empty filters are rendered, between a heading and a blank line."""
        meta = ReportMetadata(title="Areas", generated_at="2025-01-01 10:00")
        filters = {"estatus": "ACTIVO", "corporativo": ""}
        grid = build_grid([], filters, meta, AREAS.headings, AREAS.map_row)

        assert grid[4] == ("Filters",)
        assert grid[5] == ("estatus", "ACTIVO")
        assert grid[6] == ("",)
        assert grid[7] == tuple(AREAS.headings())
        assert len(grid) == 8

    def test_all_empty_filters_omit_block(self):
        meta = ReportMetadata(generated_at="2025-01-01 10:00")
        grid = build_grid([], {"a": None, "b": "", "c": []}, meta, AREAS.headings, AREAS.map_row)

        assert "Filters" not in [line[0] for line in grid]
        assert grid[4] == tuple(AREAS.headings())

    def test_list_filter_values_are_joined(self):
        meta = ReportMetadata(generated_at="2025-01-01 10:00")
        grid = build_grid([], {"Sucursal": ["A", "B"]}, meta, AREAS.headings, AREAS.map_row)
        assert grid[5] == ("Sucursal", "A, B")

    def test_rows_follow_header(self, area_rows, fixed_meta):
        grid = build_grid(area_rows, {}, fixed_meta, AREAS.headings, AREAS.map_row)

        assert grid[5] == (1, "Grupo Lana", "Compras", "Activo", "2025-01-10 08:00", "2025-02-01 12:30")
        assert grid[6] == (2, PLACEHOLDER, "Tesorería", "Baja", "2025-01-11 09:15", PLACEHOLDER)

    def test_idempotent(self, area_rows, active_filters, fixed_meta):
        first = build_grid(area_rows, active_filters, fixed_meta, AREAS.headings, AREAS.map_row)
        second = build_grid(area_rows, active_filters, fixed_meta, AREAS.headings, AREAS.map_row)
        assert first == second

    def test_inputs_not_mutated(self, area_rows, active_filters, fixed_meta):
        rows_before = [dict(r) for r in area_rows]
        filters_before = dict(active_filters)

        build_grid(area_rows, active_filters, fixed_meta, AREAS.headings, AREAS.map_row)

        assert area_rows == rows_before
        assert active_filters == filters_before

    def test_grid_is_immutable(self, fixed_meta):
        grid = build_grid([], {}, fixed_meta, AREAS.headings, AREAS.map_row)
        assert isinstance(grid, tuple)
        assert all(isinstance(line, tuple) for line in grid)


class TestComputeLayout:
    """Test suite for compute_layout."""

    @pytest.mark.parametrize("row_count", [0, 1, 2, 50])
    def test_no_filters(self, row_count):
        layout = compute_layout({}, row_count, 6)

        assert layout.header_row_index == 5
        assert layout.first_data_row_index == 6
        assert layout.last_data_row_index == 5 + max(1, row_count)
        assert layout.last_column_index == 6

    @pytest.mark.parametrize("surviving", [1, 2, 5])
    def test_with_filters(self, surviving):
        filters = {f"f{i}": "x" for i in range(surviving)}
        filters["empty"] = ""

        layout = compute_layout(filters, 3, 4)

        assert layout.header_row_index == 7 + surviving
        assert layout.last_data_row_index == 7 + surviving + 3

    def test_empty_rows_keep_one_data_row(self):
        layout = compute_layout({}, 0, 6)
        assert layout.last_data_row_index == layout.header_row_index + 1

    def test_ranges(self):
        layout = compute_layout({"Estatus": "1"}, 2, 6)

        assert layout.header_range == "A8:F8"
        assert layout.table_range == "A8:F10"
        assert layout.freeze_cell == "A9"

    def test_column_letters_past_z(self):
        layout = compute_layout({}, 1, 27)
        assert layout.last_column_letter == "AA"


class TestAssembleReport:
    """Grid and layout must agree for every variant."""

    @pytest.mark.parametrize("key", sorted(REPORT_REGISTRY))
    def test_layout_matches_grid(self, key, active_filters):
        variant = REPORT_REGISTRY[key]
        rows = [{}, {"id": 1}, {"activo": True}]

        sheet = assemble_report(variant, rows, active_filters)

        assert sheet.header_line == tuple(variant.headings())
        assert sheet.grid[sheet.layout.header_row_index - 1] == tuple(variant.headings())
        assert len(sheet.grid) == sheet.layout.last_data_row_index
        assert sheet.layout.last_column_index == len(variant.columns)
        assert all(len(line) == len(variant.columns) for line in sheet.data_lines)

    def test_sheet_views(self, area_rows, active_filters, fixed_meta):
        sheet = assemble_report(AREAS, area_rows, active_filters, fixed_meta)

        assert sheet.title == "Reporte de Áreas"
        assert sheet.subtitle == "Exportación con filtros actuales"
        assert sheet.generated_at == "2025-03-14 09:26"
        assert sheet.filter_lines == (("Corporativo", "3"), ("Estatus", "1"))
        assert len(sheet.data_lines) == 2
        assert sheet.row_count == 2

    def test_default_title_from_variant(self):
        sheet = assemble_report(AREAS, [])
        assert sheet.title == AREAS.title
        assert sheet.filter_lines == ()
        assert sheet.data_lines == ()
