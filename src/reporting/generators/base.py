"""Base generator class."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from src.core.config import settings
from ..models import ReportSheet


class BaseGenerator(ABC):
    """Base class for report generators."""

    extension: str = ""

    def __init__(self, output_dir: Optional[Union[str, Path]] = None):
        """Initialize generator."""
        self.output_dir = Path(output_dir) if output_dir is not None else Path(settings.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @abstractmethod
    def generate(self, sheet: ReportSheet, filename: Optional[str] = None) -> str:
        """
        Render a report sheet.

        Args:
            sheet: Grid, layout hints and columns from assemble_report
            filename: Optional custom filename

        Returns:
            Path to generated file
        """
        pass

    def _get_filename(self, prefix: str, extension: str, custom_name: Optional[str] = None) -> str:
        """Generate filename with timestamp."""
        if custom_name:
            return custom_name
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{prefix}_{timestamp}.{extension}"

    def _output_path(self, sheet: ReportSheet, custom_name: Optional[str] = None) -> Path:
        return self.output_dir / self._get_filename(sheet.filename, self.extension, custom_name)

    def _footer_text(self, sheet: ReportSheet) -> str:
        return sheet.meta.footer_left or settings.report_footer
