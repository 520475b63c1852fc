"""
Serializer factory.

Maps a ReportFormat to the serializer that produces it.
"""

from __future__ import annotations

import logging
from enum import Enum

from .exceptions import UnsupportedFormatError
from .serializers import JSONSerializer, ReportSerializer, XMLSerializer

logger = logging.getLogger(__name__)


class ReportFormat(str, Enum):
    """Supported report output formats."""
    JSON = "JSON"
    XML = "XML"

    @property
    def extension(self) -> str:
        """File extension for the format, e.g. 'json'."""
        return self.value.lower()

    @classmethod
    def parse(cls, value: ReportFormat | str) -> ReportFormat:
        """
        Resolve a format identifier, ignoring case.

        Raises:
            UnsupportedFormatError: If the identifier names no known format
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise UnsupportedFormatError(value)


_SERIALIZERS: dict[ReportFormat, type[ReportSerializer]] = {
    ReportFormat.JSON: JSONSerializer,
    ReportFormat.XML: XMLSerializer,
}


def get_serializer(report_format: ReportFormat | str) -> ReportSerializer:
    """
    Create the serializer for a report format.

    Args:
        report_format: A ReportFormat or its name ("JSON", "xml", ...)

    Returns:
        A serializer instance for the format

    Raises:
        UnsupportedFormatError: If the format is not recognized

    Example:
        serializer = get_serializer(ReportFormat.XML)
        data = serializer.serialize(report)
    """
    fmt = ReportFormat.parse(report_format)
    logger.debug(f"Using {_SERIALIZERS[fmt].__name__} for {fmt.value} reports")
    return _SERIALIZERS[fmt]()
