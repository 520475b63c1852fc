"""
Validation for report settings files.

Checks raw parsed YAML against the settings schema and collects every
problem found, with the offending value and a hint where one helps.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..reporting import ReportFormat


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "report.format"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of settings validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Settings validation passed"
        lines = [f"Settings validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class ConfigValidator:
    """Validates raw parsed YAML against the settings schema."""

    REQUIRED_TOP_LEVEL = {"version"}
    OPTIONAL_TOP_LEVEL = {"report"}
    REPORT_FIELDS = {"format", "name", "path"}
    VALID_FORMATS = {f.value for f in ReportFormat}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_report()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your settings file"
            )

        for key in sorted(unknown):
            self.result.add_error(
                key,
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_report(self) -> None:
        if "report" not in self.data:
            return

        report = self.data["report"]
        if not isinstance(report, dict):
            self.result.add_error(
                "report",
                "Must be an object",
                value=report
            )
            return

        for key in sorted(set(report.keys()) - self.REPORT_FIELDS):
            self.result.add_error(
                f"report.{key}",
                f"Unknown field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REPORT_FIELDS))}"
            )

        if "format" in report:
            fmt = report["format"]
            if not isinstance(fmt, str) or fmt.upper() not in self.VALID_FORMATS:
                self.result.add_error(
                    "report.format",
                    "Unsupported report format",
                    value=fmt,
                    suggestion=f"Use one of: {', '.join(sorted(self.VALID_FORMATS))}"
                )

        if "name" in report:
            name = report["name"]
            if not isinstance(name, str) or not name.strip():
                self.result.add_error(
                    "report.name",
                    "Must be a non-empty string",
                    value=name
                )

        if "path" in report and not isinstance(report["path"], str):
            self.result.add_error(
                "report.path",
                "Must be a string",
                value=report["path"]
            )
