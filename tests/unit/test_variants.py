"""
Unit tests for the report variants: headings, widths and row mappings.
"""
import pytest
from src.reporting.formatting import PLACEHOLDER
from src.reporting.variants import (
    AREAS,
    CONCEPTOS,
    CORPORATIVOS,
    EMPLEADOS,
    REPORT_REGISTRY,
    REQUISICIONES,
    SUCURSALES,
    get_variant,
)


class TestRegistry:

    def test_all_variants_registered(self):
        assert set(REPORT_REGISTRY) == {
            "areas", "corporativos", "empleados", "requisiciones", "sucursales", "conceptos",
        }

    def test_unknown_variant(self):
        with pytest.raises(ValueError, match="Unknown report 'nope'"):
            get_variant("nope")

    @pytest.mark.parametrize("key", sorted(REPORT_REGISTRY))
    def test_columns_are_consecutive(self, key):
        variant = get_variant(key)
        assert [c.index for c in variant.columns] == list(range(1, len(variant.columns) + 1))
        assert len(variant.headings()) == len(variant.columns)

    @pytest.mark.parametrize("key", sorted(REPORT_REGISTRY))
    def test_empty_row_never_yields_none(self, key):
        variant = get_variant(key)
        cells = variant.map_row({})
        assert len(cells) == len(variant.columns)
        assert None not in cells

    @pytest.mark.parametrize("key", sorted(REPORT_REGISTRY))
    def test_malformed_row_is_coerced(self, key):
        variant = get_variant(key)
        cells = variant.map_row(None)
        assert len(cells) == len(variant.columns)
        assert None not in cells


class TestAreas:

    def test_headings_and_widths(self):
        assert AREAS.headings() == ["ID", "Corporativo", "Área", "Estatus", "Creado", "Actualizado"]
        assert AREAS.column_widths() == {"A": 8, "B": 30, "C": 34, "D": 12, "E": 18, "F": 18}

    def test_active_label(self):
        assert AREAS.map_row({"activo": True})[3] == "Activo"
        assert AREAS.map_row({"activo": False})[3] == "Baja"
        assert AREAS.map_row({})[3] == "Baja"

    def test_placeholders(self):
        assert AREAS.map_row({}) == [PLACEHOLDER, PLACEHOLDER, PLACEHOLDER, "Baja", PLACEHOLDER, PLACEHOLDER]


class TestCorporativos:

    def test_counts_default_to_zero(self):
        cells = CORPORATIVOS.map_row({"nombre": "Grupo Lana"})
        assert cells[1] == "Grupo Lana"
        assert cells[7] == 0
        assert cells[8] == 0

    def test_status_label_preferred(self):
        assert CORPORATIVOS.map_row({"estatus_label": "Suspendido", "activo": True})[9] == "Suspendido"
        assert CORPORATIVOS.map_row({"activo": True})[9] == "Activo"

    def test_widths(self):
        assert CORPORATIVOS.column_widths()["G"] == 40
        assert CORPORATIVOS.column_widths()["K"] == 18


class TestEmpleados:

    def test_inactive_label(self):
        assert EMPLEADOS.map_row({"activo": True})[6] == "Activo"
        assert EMPLEADOS.map_row({"activo": False})[6] == "Inactivo"
        assert EMPLEADOS.map_row({})[6] == "Inactivo"


class TestRequisiciones:

    def test_currency_columns(self, requisicion_rows):
        cells = REQUISICIONES.map_row(requisicion_rows[0])
        assert cells[9:12] == ["1000.00", "160.00", "1160.00"]
        assert cells[13] == PLACEHOLDER

    def test_missing_amounts_are_zero(self):
        cells = REQUISICIONES.map_row({"subtotal": "n/a"})
        assert cells[9:12] == ["0.00", "0.00", "0.00"]

    def test_fifteen_columns(self):
        assert len(REQUISICIONES.columns) == 15
        assert REQUISICIONES.columns[-1].letter == "O"


class TestSucursalesConceptos:

    def test_sucursales(self):
        cells = SUCURSALES.map_row({"sucursal": "Centro", "activo": 1})
        assert cells[2] == "Centro"
        assert cells[7] == "Activo"
        assert len(cells) == 10

    def test_conceptos(self):
        assert CONCEPTOS.map_row({"id": 4, "nombre": "Papelería"}) == [
            4, "Papelería", "Baja", PLACEHOLDER, PLACEHOLDER,
        ]
