"""
Exceptions raised by the reporting package.

Encoding and I/O failures are not wrapped: they reach the caller as the
TypeError/ValueError/OSError raised by the underlying library.
"""

from __future__ import annotations


class ReportError(Exception):
    """Base class for reporting errors."""


class UnsupportedFormatError(ReportError, ValueError):
    """Raised when no serializer exists for a format identifier."""

    def __init__(self, report_format: object):
        self.report_format = report_format
        super().__init__(f"unsupported report format: {report_format!r}")


class ReportLifecycleError(ReportError, RuntimeError):
    """Raised when a report node is finalized more than once."""
