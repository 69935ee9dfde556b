"""
Report variants.

Each variant is a data-only descriptor: its columns (heading + width), a
row mapping function and the labels of the request filters it understands.
The grid engine is the same for all of them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple, Union

from .formatting import cell, field as get, money, status_label
from .models import Cell, ColumnSpec


def _columns(*specs: Tuple[str, float]) -> Tuple[ColumnSpec, ...]:
    return tuple(ColumnSpec(index, heading, width) for index, (heading, width) in enumerate(specs, start=1))


@dataclass(frozen=True)
class ReportVariant:
    """Configuration of one exportable listing."""
    key: str
    title: str
    filename: str
    columns: Tuple[ColumnSpec, ...]
    map_row: Callable[[Mapping[str, Any]], List[Cell]]
    filter_labels: Dict[Union[str, Tuple[str, ...]], Union[str, Tuple[str, Any]]] = field(default_factory=dict)

    def headings(self) -> List[str]:
        return [c.heading for c in self.columns]

    def column_widths(self) -> Dict[str, float]:
        return {c.letter: c.width for c in self.columns}


def _as_row(row: Any) -> Mapping[str, Any]:
    # Malformed rows degrade to all placeholders.
    return row if isinstance(row, Mapping) else {}


def _count(row: Mapping[str, Any], name: str) -> Cell:
    value = row.get(name)
    return 0 if value is None else cell(value)


# --- Row mappings ---

def map_area(row: Mapping[str, Any]) -> List[Cell]:
    r = _as_row(row)
    return [
        get(r, 'id'),
        get(r, 'corporativo'),
        get(r, 'nombre'),
        status_label(r.get('activo')),
        get(r, 'created_at'),
        get(r, 'updated_at'),
    ]


def map_corporativo(row: Mapping[str, Any]) -> List[Cell]:
    r = _as_row(row)
    estatus = r.get('estatus_label')
    if estatus is None:
        estatus = status_label(r.get('activo'))
    return [
        get(r, 'id'),
        get(r, 'nombre'),
        get(r, 'rfc'),
        get(r, 'codigo'),
        get(r, 'telefono'),
        get(r, 'email'),
        get(r, 'direccion'),
        _count(r, 'sucursales_count'),
        _count(r, 'areas_count'),
        cell(estatus),
        get(r, 'created_at'),
    ]


def map_empleado(row: Mapping[str, Any]) -> List[Cell]:
    r = _as_row(row)
    return [
        get(r, 'empleado'),
        get(r, 'puesto'),
        get(r, 'corporativo'),
        get(r, 'sucursal'),
        get(r, 'area'),
        get(r, 'correo'),
        status_label(r.get('activo'), inactive="Inactivo"),
    ]


def map_requisicion(row: Mapping[str, Any]) -> List[Cell]:
    r = _as_row(row)
    return [
        get(r, 'folio'),
        get(r, 'tipo'),
        get(r, 'status'),
        get(r, 'comprador'),
        get(r, 'corporativo'),
        get(r, 'sucursal'),
        get(r, 'solicitante'),
        get(r, 'proveedor'),
        get(r, 'concepto'),
        money(r.get('subtotal')),
        money(r.get('iva')),
        money(r.get('total')),
        get(r, 'fecha_captura'),
        get(r, 'fecha_pago'),
        get(r, 'created_by'),
    ]


def map_sucursal(row: Mapping[str, Any]) -> List[Cell]:
    r = _as_row(row)
    return [
        get(r, 'id'),
        get(r, 'corporativo'),
        get(r, 'sucursal'),
        get(r, 'codigo'),
        get(r, 'ciudad'),
        get(r, 'estado'),
        get(r, 'direccion'),
        status_label(r.get('activo')),
        get(r, 'created_at'),
        get(r, 'updated_at'),
    ]


def map_concepto(row: Mapping[str, Any]) -> List[Cell]:
    r = _as_row(row)
    return [
        get(r, 'id'),
        get(r, 'nombre'),
        status_label(r.get('activo')),
        get(r, 'created_at'),
        get(r, 'updated_at'),
    ]


# --- Variants ---

AREAS = ReportVariant(
    key="areas",
    title="Reporte de Áreas",
    filename="areas",
    columns=_columns(
        ("ID", 8), ("Corporativo", 30), ("Área", 34), ("Estatus", 12),
        ("Creado", 18), ("Actualizado", 18),
    ),
    map_row=map_area,
    filter_labels={
        "corporativo_id": "Corporativo",
        "q": "Búsqueda",
        "activo": "Estatus",
        "sort": "Orden",
        "dir": "Dirección",
    },
)

CORPORATIVOS = ReportVariant(
    key="corporativos",
    title="Reporte de Corporativos",
    filename="corporativos",
    columns=_columns(
        ("ID", 8), ("Corporativo", 30), ("RFC", 18), ("Código", 14),
        ("Teléfono", 16), ("Email", 28), ("Dirección", 40), ("Sucursales", 12),
        ("Áreas", 10), ("Estatus", 12), ("Creado", 18),
    ),
    map_row=map_corporativo,
    filter_labels={
        "q": "Búsqueda",
        "activo": ("Estatus", "all"),
        "sort": ("Orden", "nombre_asc"),
        "perPage": "Por página",
    },
)

EMPLEADOS = ReportVariant(
    key="empleados",
    title="Reporte de Empleados",
    filename="empleados",
    columns=_columns(
        ("Empleado", 30), ("Puesto", 20), ("Corporativo", 22), ("Sucursal", 22),
        ("Área", 18), ("Correo", 32), ("Estatus", 12),
    ),
    map_row=map_empleado,
    filter_labels={
        "corporativo_id": "Corporativo",
        "sucursal_id": "Sucursal",
        "area_id": "Área",
        "q": "Búsqueda",
        "activo": "Estatus",
        "sort": "Orden",
        "perPage": "Por página",
    },
)

REQUISICIONES = ReportVariant(
    key="requisiciones",
    title="Reporte de Requisiciones",
    filename="requisiciones",
    columns=_columns(
        ("Folio", 16), ("Tipo", 14), ("Estatus", 16), ("Comprador", 22),
        ("Corporativo", 22), ("Sucursal", 20), ("Solicitante", 24),
        ("Proveedor", 24), ("Concepto", 22), ("Subtotal", 14), ("IVA", 12),
        ("Total", 14), ("Fecha captura", 18), ("Fecha pago", 14),
        ("Creada por", 22),
    ),
    map_row=map_requisicion,
    filter_labels={
        "corporativo_id": "Corporativo",
        "comprador_corp_id": "Comprador",
        "sucursal_id": "Sucursal",
        "solicitante_id": "Solicitante",
        "proveedor_id": "Proveedor",
        "concepto_id": "Concepto",
        "tipo": "Tipo",
        ("tab", "statusTab"): "Tab/Estatus",
        "q": "Búsqueda",
        ("from", "fecha_from"): "Desde",
        ("to", "fecha_to"): "Hasta",
        "sort": "Orden",
        "dir": "Dirección",
    },
)

SUCURSALES = ReportVariant(
    key="sucursales",
    title="Reporte de Sucursales",
    filename="sucursales",
    columns=_columns(
        ("ID", 8), ("Corporativo", 26), ("Sucursal", 26), ("Código", 14),
        ("Ciudad", 16), ("Estado", 14), ("Dirección", 38), ("Estatus", 12),
        ("Creado", 18), ("Actualizado", 18),
    ),
    map_row=map_sucursal,
    filter_labels={
        "corporativo_id": "Corporativo",
        "q": "Búsqueda",
        "activo": "Estatus",
        "sort": "Orden",
        "dir": "Dirección",
    },
)

CONCEPTOS = ReportVariant(
    key="conceptos",
    title="Reporte de Conceptos",
    filename="conceptos",
    columns=_columns(
        ("ID", 8), ("Concepto", 44), ("Estatus", 12), ("Creado", 18),
        ("Actualizado", 18),
    ),
    map_row=map_concepto,
    filter_labels={
        "q": "Búsqueda",
        "activo": "Estatus",
        "sort": "Orden",
        "dir": "Dirección",
    },
)


REPORT_REGISTRY: Dict[str, ReportVariant] = {
    v.key: v for v in (AREAS, CORPORATIVOS, EMPLEADOS, REQUISICIONES, SUCURSALES, CONCEPTOS)
}


def get_variant(key: str) -> ReportVariant:
    """Look up a report variant by key."""
    variant = REPORT_REGISTRY.get(key)
    if variant is None:
        raise ValueError(
            f"Unknown report '{key}'. Available: {', '.join(sorted(REPORT_REGISTRY))}"
        )
    return variant


def variant_keys() -> Sequence[str]:
    return list(REPORT_REGISTRY)
