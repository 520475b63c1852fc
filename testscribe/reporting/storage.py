"""
Persistence of serialized reports.

Report files are created (or truncated) with owner-only read/write
permissions. Write errors propagate to the caller unchanged.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .factory import ReportFormat, get_serializer
from .models import SuiteReport
from .serializers import ReportSerializer

logger = logging.getLogger(__name__)

REPORT_FILE_MODE = 0o600


def report_file_path(
    report_name: str,
    report_format: ReportFormat | str,
    directory: str | Path | None = None,
) -> Path:
    """
    Build the destination path of a report file.

    Args:
        report_name: Base name of the report, may include a path
        report_format: Output format, its lowercased name is the extension
        directory: Optional directory the name is resolved against

    Returns:
        Path like "<directory>/<report_name>.json"
    """
    fmt = ReportFormat.parse(report_format)
    filename = f"{report_name}.{fmt.extension}"
    if directory is not None:
        return Path(directory) / filename
    return Path(filename)


def write_report_file(data: bytes, file_path: str | Path) -> None:
    """Write bytes to a file readable and writable by the owner only."""
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, REPORT_FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


def save_report(report: SuiteReport, serializer: ReportSerializer, file_path: str | Path) -> None:
    """
    Serialize a report and write it to a file.

    Args:
        report: The suite report to save
        serializer: Serializer for the desired format
        file_path: Destination file

    Raises:
        OSError: If the file cannot be written
    """
    data = serializer.serialize(report)
    write_report_file(data, file_path)
    logger.info(f"Saved report '{report.name}' to {file_path} ({len(data)} bytes)")


def save_report_based_on_type(
    report: SuiteReport,
    report_format: ReportFormat | str,
    report_name: str,
    directory: str | Path | None = None,
) -> Path:
    """
    Save a report in the given format, naming the file after the format.

    Args:
        report: The suite report to save
        report_format: Output format
        report_name: Base file name, without extension
        directory: Optional directory for the report file

    Returns:
        Path of the written file

    Raises:
        UnsupportedFormatError: If the format is not recognized
        OSError: If the file cannot be written
    """
    serializer = get_serializer(report_format)
    file_path = report_file_path(report_name, report_format, directory)
    save_report(report, serializer, file_path)
    return file_path


def load_report(file_path: str | Path) -> SuiteReport:
    """
    Load a report previously saved in JSON format.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the document is not a JSON object
    """
    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Report document must be a JSON object, got {type(data).__name__}")
    return SuiteReport.from_dict(data)
