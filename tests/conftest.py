"""
Shared pytest fixtures for the report export test suite.
"""
import io
import pytest
from datetime import datetime
from rich.console import Console

from src.reporting.models import ReportMetadata


# --- Metadata Fixtures ---

@pytest.fixture
def fixed_meta():
    """Metadata with a fixed timestamp so grids are reproducible."""
    return ReportMetadata(
        title="Reporte de Áreas",
        subtitle="Exportación con filtros actuales",
        generated_at=datetime(2025, 3, 14, 9, 26),
        generated_by="Ana López",
    )


@pytest.fixture
def quiet_console():
    """Rich console writing into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=200, record=True)


# --- Mock Data Fixtures ---

@pytest.fixture
def area_rows():
    """Flattened area rows as the query layer produces them."""
    return [
        {
            "id": 1,
            "corporativo": "Grupo Lana",
            "nombre": "Compras",
            "activo": True,
            "created_at": "2025-01-10 08:00",
            "updated_at": "2025-02-01 12:30",
        },
        {
            "id": 2,
            "corporativo": None,
            "nombre": "Tesorería",
            "activo": False,
            "created_at": "2025-01-11 09:15",
            "updated_at": None,
        },
    ]


@pytest.fixture
def requisicion_rows():
    return [
        {
            "id": 10,
            "folio": "REQ-0010",
            "tipo": "ANTICIPO",
            "status": "APROBADA",
            "comprador": "Grupo Lana",
            "corporativo": "Grupo Lana",
            "sucursal": "Centro",
            "solicitante": "Luis Pérez Gómez",
            "proveedor": "Papelería del Norte",
            "concepto": "Papelería",
            "subtotal": 1000,
            "iva": 160.0,
            "total": "1160",
            "fecha_captura": "2025-03-01 10:00",
            "fecha_pago": None,
            "created_by": "admin",
        },
    ]


@pytest.fixture
def active_filters():
    return {
        "Corporativo": "3",
        "Búsqueda": "",
        "Estatus": "1",
        "Orden": None,
    }
