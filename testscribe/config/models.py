"""
Typed report settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..reporting import ReportFormat, report_file_path

DEFAULT_REPORT_NAME = "testscribe-report"


@dataclass
class ReportConfig:
    """Where and how the suite report is written."""
    format: ReportFormat = ReportFormat.JSON
    name: str = DEFAULT_REPORT_NAME
    path: str | None = None  # Directory prefix, working directory if unset

    def file_path(self) -> Path:
        """Destination of the report file."""
        return report_file_path(self.name, self.format, self.path)


@dataclass
class Settings:
    """Fully parsed and validated settings file."""
    version: int
    report: ReportConfig = field(default_factory=ReportConfig)
