"""
testscribe - Test Run Reporting

This package records the outcome of a test run as a suite → test →
step → operation tree and writes it out as JSON or XML.

Subpackages:
    - reporting: Report models, serializers and persistence
    - config: Report settings files

Usage:
    from testscribe import SuiteReport, TestReport, Failure, save_report_based_on_type

    suite = SuiteReport("smoke")
    test = TestReport("t1")
    test.failure = Failure(message="boom", type="AssertionError")
    test.mark_end()
    suite.add_test(test)
    suite.close()

    save_report_based_on_type(suite, "XML", "smoke-report")
"""

__version__ = "0.1.0"

# Re-export the clock for runners that supply their own time source
from .clock import Clock, SystemClock

# Re-export reporting for convenience
from .reporting import (
    # Exceptions
    ReportError,
    ReportLifecycleError,
    UnsupportedFormatError,
    # Models
    Failure,
    OperationReport,
    OperationType,
    StepReport,
    SuiteReport,
    TestReport,
    calculate_duration,
    # Serializers
    ReportFormat,
    ReportSerializer,
    JSONSerializer,
    XMLSerializer,
    get_serializer,
    # Persistence
    load_report,
    report_file_path,
    save_report,
    save_report_based_on_type,
)

# Re-export config for convenience
from .config import (
    ReportConfig,
    Settings,
    ValidationResult,
    load_report_config,
    validate_report_config_yaml,
)

__all__ = [
    # Package info
    "__version__",
    # Clock
    "Clock",
    "SystemClock",
    # Reporting - Exceptions
    "ReportError",
    "ReportLifecycleError",
    "UnsupportedFormatError",
    # Reporting - Models
    "Failure",
    "OperationReport",
    "OperationType",
    "StepReport",
    "SuiteReport",
    "TestReport",
    "calculate_duration",
    # Reporting - Serializers
    "ReportFormat",
    "ReportSerializer",
    "JSONSerializer",
    "XMLSerializer",
    "get_serializer",
    # Reporting - Persistence
    "load_report",
    "report_file_path",
    "save_report",
    "save_report_based_on_type",
    # Config
    "ReportConfig",
    "Settings",
    "ValidationResult",
    "load_report_config",
    "validate_report_config_yaml",
]
