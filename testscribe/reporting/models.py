"""
Report data models for test runs.

This module defines the report tree built while a suite executes:

    SuiteReport -> TestReport -> StepReport -> OperationReport

Each node owns its children and exposes append-only mutators. Timed
nodes stamp their start time on construction and derive their duration
string from the start/end pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from ..clock import Clock, SystemClock
from .exceptions import ReportLifecycleError

logger = logging.getLogger(__name__)


class OperationType(str, Enum):
    """Kind of primitive action recorded in an OperationReport."""
    CREATE = "create"
    DELETE = "delete"
    APPLY = "apply"
    ASSERT = "assert"
    ERROR = "error"
    SCRIPT = "script"
    COMMAND = "command"


def calculate_duration(start: datetime, end: datetime) -> str:
    """
    Format the time elapsed between two instants.

    Args:
        start: Start instant
        end: End instant

    Returns:
        Seconds with exactly three decimals, e.g. "1.250". Negative
        when end precedes start.
    """
    return f"{(end - start).total_seconds():.3f}"


@dataclass
class Failure:
    """Details of why a test did not pass."""
    message: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Failure:
        return cls(
            message=data.get("message", ""),
            type=data.get("type", ""),
        )


# ─────────────────────────────────────────────────────────────────────────────
# Operations & Steps
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class OperationReport:
    """
    Outcome of a single operation within a step.

    The operation type must be one of OperationType; the model does not
    check it, producers are expected to pass a valid kind.
    """
    name: str
    operation_type: OperationType
    result: str = ""
    message: str | None = None

    # Timing
    start_time: datetime | None = None
    end_time: datetime | None = None

    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.start_time is None:
            self.start_time = self.clock.now()

    @property
    def time(self) -> str:
        """Elapsed seconds, empty until the operation has ended."""
        return _elapsed(self.start_time, self.end_time)

    def mark_end(self) -> None:
        """Stamp the end time of the operation."""
        if self.end_time is not None:
            raise ReportLifecycleError(f"Operation '{self.name}' has already ended")
        self.end_time = self.clock.now()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        data: dict[str, Any] = {
            "name": self.name,
            "startTime": _format_time(self.start_time),
            "endTime": _format_time(self.end_time),
            "time": self.time,
            "result": self.result,
        }
        if self.message:
            data["message"] = self.message
        data["operationType"] = _enum_value(self.operation_type)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock | None = None) -> OperationReport:
        operation = cls(
            name=data["name"],
            operation_type=OperationType(data["operationType"]),
            result=data.get("result", ""),
            message=data.get("message"),
            end_time=_parse_time(data.get("endTime")),
            clock=clock or SystemClock(),
        )
        operation.start_time = _parse_time(data.get("startTime"))
        return operation


@dataclass
class StepReport:
    """A logical step of a test and the operations it performed."""
    name: str = ""
    results: list[OperationReport] = field(default_factory=list)

    def add_operation(self, operation: OperationReport) -> None:
        """Append an operation report to the step."""
        self.results.append(operation)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name:
            data["name"] = self.name
        if self.results:
            data["results"] = [op.to_dict() for op in self.results]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock | None = None) -> StepReport:
        return cls(
            name=data.get("name", ""),
            results=[OperationReport.from_dict(op, clock) for op in data.get("results") or []],
        )


# ─────────────────────────────────────────────────────────────────────────────
# Tests
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class TestReport:
    """
    Record of a single test execution.

    `failure` stays None while the test passes or is still running; the
    runner assigns a Failure when it detects an unsuccessful outcome.
    """
    __test__ = False  # not a pytest test class

    name: str
    concurrent: bool = False
    namespace: str = ""
    skip: bool = False
    skip_delete: bool = False

    failure: Failure | None = None
    steps: list[StepReport] = field(default_factory=list)

    # Timing
    start_time: datetime | None = None
    end_time: datetime | None = None

    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.start_time is None:
            self.start_time = self.clock.now()

    @property
    def time(self) -> str:
        """Elapsed seconds, empty until the test has ended."""
        return _elapsed(self.start_time, self.end_time)

    def add_step(self, step: StepReport) -> None:
        """Append a step report to the test."""
        self.steps.append(step)

    def mark_end(self) -> None:
        """Stamp the end time of the test."""
        if self.end_time is not None:
            raise ReportLifecycleError(f"Test '{self.name}' has already ended")
        self.end_time = self.clock.now()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        data: dict[str, Any] = {
            "name": self.name,
            "startTime": _format_time(self.start_time),
            "endTime": _format_time(self.end_time),
            "time": self.time,
        }
        if self.failure is not None:
            data["failure"] = self.failure.to_dict()
        if self.steps:
            data["steps"] = [step.to_dict() for step in self.steps]
        if self.concurrent:
            data["concurrent"] = True
        if self.namespace:
            data["namespace"] = self.namespace
        if self.skip:
            data["skip"] = True
        if self.skip_delete:
            data["skipDelete"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock | None = None) -> TestReport:
        failure = data.get("failure")
        test = cls(
            name=data["name"],
            concurrent=data.get("concurrent", False),
            namespace=data.get("namespace", ""),
            skip=data.get("skip", False),
            skip_delete=data.get("skipDelete", False),
            failure=Failure.from_dict(failure) if failure is not None else None,
            steps=[StepReport.from_dict(step, clock) for step in data.get("steps") or []],
            end_time=_parse_time(data.get("endTime")),
            clock=clock or SystemClock(),
        )
        test.start_time = _parse_time(data.get("startTime"))
        return test


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class SuiteReport:
    """
    Complete record of a test suite run.

    Created once when the run starts and closed once when it finishes.
    The failure count is computed by close() and is read-only.
    """
    name: str
    reports: list[TestReport] = field(default_factory=list)

    # Timing
    start_time: datetime | None = None
    end_time: datetime | None = None

    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False)
    _failures: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.start_time is None:
            self.start_time = self.clock.now()

    @property
    def time(self) -> str:
        """Elapsed seconds, empty until the suite is closed."""
        return _elapsed(self.start_time, self.end_time)

    @property
    def failures(self) -> int:
        """Number of failed tests, as counted when the suite was closed."""
        return self._failures

    @property
    def is_closed(self) -> bool:
        return self.end_time is not None

    def add_test(self, test: TestReport) -> None:
        """Append a test report to the suite."""
        self.reports.append(test)

    def close(self) -> None:
        """
        Finalize the suite.

        Stamps the end time and counts the tests carrying a Failure.
        Steps and operations are not inspected.

        Raises:
            ReportLifecycleError: If the suite was already closed
        """
        if self.end_time is not None:
            raise ReportLifecycleError(f"Suite '{self.name}' has already been closed")
        self.end_time = self.clock.now()

        failures = 0
        for test in self.reports:
            if test.failure is not None:
                failures += 1
        self._failures = failures

        logger.info(
            f"Closed suite '{self.name}': {len(self.reports)} test(s), "
            f"{self._failures} failure(s) in {self.time}s"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "startTime": _format_time(self.start_time),
            "endTime": _format_time(self.end_time),
            "time": self.time,
            "reports": [test.to_dict() for test in self.reports],
            "failures": self._failures,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], clock: Clock | None = None) -> SuiteReport:
        """
        Rebuild a suite from a decoded JSON document.

        The failure count is taken from the document rather than
        recounted, so it reflects the value recorded at close time.
        Missing start times stay None instead of being stamped now.
        """
        report = cls(
            name=data["name"],
            reports=[TestReport.from_dict(test, clock) for test in data.get("reports") or []],
            end_time=_parse_time(data.get("endTime")),
            clock=clock or SystemClock(),
        )
        report.start_time = _parse_time(data.get("startTime"))
        report._failures = int(data.get("failures", 0))
        return report

    def summary(self) -> str:
        """Generate a human-readable summary."""
        passed = sum(
            1 for t in self.reports
            if t.failure is None and not t.skip and t.end_time is not None
        )
        running = sum(
            1 for t in self.reports
            if t.failure is None and not t.skip and t.end_time is None
        )
        skipped = sum(1 for t in self.reports if t.skip)
        lines = [
            f"═══════════════════════════════════════════════════════════",
            f"  Suite Report: {self.name}",
            f"═══════════════════════════════════════════════════════════",
            f"  Duration:   {self.time}s" if self.time else "  Duration:   N/A",
            f"  Started:    {self.start_time.strftime('%Y-%m-%d %H:%M:%S %Z') if self.start_time else 'N/A'}",
            f"───────────────────────────────────────────────────────────",
            f"  Tests: {passed} passed, {self._failures} failed, {skipped} skipped, {running} running",
            f"───────────────────────────────────────────────────────────",
        ]

        for test in self.reports:
            duration = f"{test.time}s" if test.time else "N/A"
            lines.append(f"  {_test_icon(test)} {test.name} - {duration}")
            if test.failure is not None:
                lines.append(f"      └─ {test.failure.type}: {test.failure.message}")

        lines.append(f"═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def _elapsed(start: datetime | None, end: datetime | None) -> str:
    if start is None or end is None:
        return ""
    return calculate_duration(start, end)


def _format_time(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _test_icon(test: TestReport) -> str:
    """Get icon for a test outcome."""
    if test.failure is not None:
        return "❌"
    if test.skip:
        return "⏭️"
    if test.end_time is None:
        return "🔄"
    return "✅"
