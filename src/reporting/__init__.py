"""
Reporting Module - Report Grid Engine and Multi-format Exports.
"""

from src.reporting.service import (
    generate_report,
    assemble_report,
    build_grid,
    compute_layout,
    ReportMetadata,
    REPORT_REGISTRY,
    get_variant,
)

__all__ = [
    "generate_report",
    "assemble_report",
    "build_grid",
    "compute_layout",
    "ReportMetadata",
    "REPORT_REGISTRY",
    "get_variant",
]
