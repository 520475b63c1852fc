"""
Report serializers.

A serializer turns a SuiteReport into the bytes of one output format.
Errors raised by the underlying encoder are not caught here.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import OperationReport, StepReport, SuiteReport, TestReport


class ReportSerializer(ABC):
    """Interface implemented by every report output format."""

    @abstractmethod
    def serialize(self, report: SuiteReport) -> bytes:
        """
        Encode the whole report tree.

        Args:
            report: The suite report to encode

        Returns:
            The encoded document
        """
        pass


class JSONSerializer(ReportSerializer):
    """Indented JSON document, keys as produced by SuiteReport.to_dict()."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def serialize(self, report: SuiteReport) -> bytes:
        return json.dumps(report.to_dict(), indent=self.indent, ensure_ascii=False).encode("utf-8")


class XMLSerializer(ReportSerializer):
    """
    Indented XML document.

    Scalar fields become attributes; reports, steps and results become
    repeated child elements named after the collection. A test's
    failure and an operation's message are child elements.
    """

    ROOT_TAG = "TestsReport"

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def serialize(self, report: SuiteReport) -> bytes:
        root = ET.Element(self.ROOT_TAG)
        root.set("name", report.name)
        _set_time_attrs(root, report)
        for test in report.reports:
            self._add_test(root, test)
        root.set("failures", str(report.failures))

        ET.indent(root, space=self.indent)
        return ET.tostring(root, encoding="utf-8")

    def _add_test(self, parent: ET.Element, test: TestReport) -> None:
        element = ET.SubElement(parent, "reports")
        element.set("name", test.name)
        _set_time_attrs(element, test)
        if test.concurrent:
            element.set("concurrent", "true")
        if test.namespace:
            element.set("namespace", test.namespace)
        if test.skip:
            element.set("skip", "true")
        if test.skip_delete:
            element.set("skipDelete", "true")

        if test.failure is not None:
            failure = ET.SubElement(element, "failure")
            failure.set("message", test.failure.message)
            failure.set("type", test.failure.type)

        for step in test.steps:
            self._add_step(element, step)

    def _add_step(self, parent: ET.Element, step: StepReport) -> None:
        element = ET.SubElement(parent, "steps")
        if step.name:
            element.set("name", step.name)
        for operation in step.results:
            self._add_operation(element, operation)

    def _add_operation(self, parent: ET.Element, operation: OperationReport) -> None:
        element = ET.SubElement(parent, "results")
        element.set("name", operation.name)
        _set_time_attrs(element, operation)
        element.set("result", operation.result)
        element.set("operationType", _enum_value(operation.operation_type))
        if operation.message:
            ET.SubElement(element, "message").text = operation.message


def _enum_value(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else value


def _set_time_attrs(element: ET.Element, node: SuiteReport | TestReport | OperationReport) -> None:
    if node.start_time is not None:
        element.set("startTime", node.start_time.isoformat())
    if node.end_time is not None:
        element.set("endTime", node.end_time.isoformat())
    element.set("time", node.time)
