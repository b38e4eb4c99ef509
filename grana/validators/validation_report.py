"""Validation report for collecting and formatting input issues."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        severity: The severity level of the issue
        field: The input field that has the issue
        message: Human-readable description of the issue
        value: The value that caused the issue
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.field}: {self.message}"


@dataclass
class ValidationReport:
    """Collects validation issues for one set of inputs.

    Example:
        >>> report = ValidationReport()
        >>> report.add(ValidationSeverity.ERROR, "hourly_rate", "Must not be negative", -5)
        >>> report.is_valid()
        False
        >>> report.summary()
        '1 error(s)'
    """

    issues: List[ValidationIssue] = field(default_factory=list)

    def add(
        self, severity: ValidationSeverity, field_name: str, message: str, value: Any = None
    ) -> None:
        self.issues.append(ValidationIssue(severity, field_name, message, value))

    def add_error(self, field_name: str, message: str, value: Any = None) -> None:
        self.add(ValidationSeverity.ERROR, field_name, message, value)

    def add_warning(self, field_name: str, message: str, value: Any = None) -> None:
        self.add(ValidationSeverity.WARNING, field_name, message, value)

    def count(self, severity: ValidationSeverity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    @property
    def error_count(self) -> int:
        return self.count(ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return self.count(ValidationSeverity.WARNING)

    def is_valid(self) -> bool:
        """Warnings do not affect validity; only errors do."""
        return self.error_count == 0

    def get_errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    def get_warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def summary(self) -> str:
        """Summarize the report as counts of errors and warnings."""
        parts = []
        if self.error_count:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count:
            parts.append(f"{self.warning_count} warning(s)")
        return ", ".join(parts) if parts else "No issues found"
