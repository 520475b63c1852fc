"""
Reporting for Test Runs

This package records a test run as a tree of reports and writes it out
as JSON or XML.

Features:
    - Suite → test → step → operation hierarchy
    - Per-node timing with three-decimal durations
    - Failure count computed when the suite is closed
    - JSON and XML serializers selected by format
    - Owner-only report files

Usage:
    from testscribe.reporting import (
        SuiteReport, TestReport, StepReport, OperationReport,
        OperationType, Failure, save_report_based_on_type,
    )

    suite = SuiteReport("smoke")

    test = TestReport("t1", namespace="ns1")
    step = StepReport("step1")
    op = OperationReport("op1", OperationType.APPLY)
    op.mark_end()
    step.add_operation(op)
    test.add_step(step)
    test.mark_end()
    suite.add_test(test)

    suite.close()
    save_report_based_on_type(suite, "JSON", "smoke-report")
"""

# Exceptions
from .exceptions import ReportError, ReportLifecycleError, UnsupportedFormatError

# Models
from .models import (
    Failure,
    OperationReport,
    OperationType,
    StepReport,
    SuiteReport,
    TestReport,
    calculate_duration,
)

# Serializers
from .factory import ReportFormat, get_serializer
from .serializers import JSONSerializer, ReportSerializer, XMLSerializer

# Persistence
from .storage import (
    load_report,
    report_file_path,
    save_report,
    save_report_based_on_type,
)

__all__ = [
    # Exceptions
    "ReportError",
    "ReportLifecycleError",
    "UnsupportedFormatError",
    # Models
    "Failure",
    "OperationReport",
    "OperationType",
    "StepReport",
    "SuiteReport",
    "TestReport",
    "calculate_duration",
    # Serializers
    "ReportFormat",
    "ReportSerializer",
    "JSONSerializer",
    "XMLSerializer",
    "get_serializer",
    # Persistence
    "load_report",
    "report_file_path",
    "save_report",
    "save_report_based_on_type",
]
