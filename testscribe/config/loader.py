"""
Settings loader.

Public API for loading and validating report settings from disk or
from YAML strings. Problems are returned in a ValidationResult rather
than raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..reporting import ReportFormat
from .models import DEFAULT_REPORT_NAME, ReportConfig, Settings
from .validation import ConfigValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_report_config(path: str | Path) -> tuple[Settings | None, ValidationResult]:
    """
    Load and validate report settings from a YAML file.

    Args:
        path: Path to the YAML settings file

    Returns:
        Tuple of (Settings or None, ValidationResult)
        If validation fails, Settings will be None.

    Example:
        settings, result = load_report_config("testscribe.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        save_report_based_on_type(suite, settings.report.format, settings.report.name)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    logger.debug(f"Loading report settings from {path}")
    with open(path) as f:
        return _load(f.read(), str(path))


def validate_report_config_yaml(yaml_string: str) -> tuple[Settings | None, ValidationResult]:
    """
    Validate report settings from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (Settings or None, ValidationResult)
    """
    return _load(yaml_string, "yaml")


def _load(text: str, source: str) -> tuple[Settings | None, ValidationResult]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    validator = ConfigValidator(data)
    result = validator.validate()

    if not result.is_valid:
        logger.debug(f"Settings from {source} failed validation with {len(result.errors)} error(s)")
        return None, result

    return _parse(data), result


def _parse(data: dict[str, Any]) -> Settings:
    """Convert validated data to typed Settings."""
    report = data.get("report") or {}
    return Settings(
        version=data["version"],
        report=ReportConfig(
            format=ReportFormat.parse(report.get("format", ReportFormat.JSON)),
            name=report.get("name", DEFAULT_REPORT_NAME),
            path=report.get("path"),
        ),
    )
