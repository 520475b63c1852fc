"""
Report Settings

Loads the YAML file that tells a run where to write its report and in
which format.

Usage:
    from testscribe.config import load_report_config

    settings, result = load_report_config("testscribe.yaml")
    if not result.is_valid:
        print(result)
    else:
        print(settings.report.file_path())
"""

# Public API
from .loader import load_report_config, validate_report_config_yaml

# Models
from .models import DEFAULT_REPORT_NAME, ReportConfig, Settings

# Validation
from .validation import ConfigValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_report_config",
    "validate_report_config_yaml",
    # Models
    "DEFAULT_REPORT_NAME",
    "ReportConfig",
    "Settings",
    # Validation
    "ConfigValidator",
    "ValidationError",
    "ValidationResult",
]
