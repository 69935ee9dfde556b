"""Public service interface for the Reporting module."""
from src.reporting.workflow import generate_report
from src.reporting.engine import assemble_report, build_grid, compute_layout
from src.reporting.models import ReportMetadata
from src.reporting.variants import REPORT_REGISTRY, get_variant

# Re-export key functions
__all__ = [
    "generate_report",
    "assemble_report",
    "build_grid",
    "compute_layout",
    "ReportMetadata",
    "REPORT_REGISTRY",
    "get_variant",
]
