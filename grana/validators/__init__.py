"""Opt-in input validation for the calculators."""

from grana.validators.input_validators import (
    validate_overtime_inputs,
    validate_projection_inputs,
)
from grana.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "validate_overtime_inputs",
    "validate_projection_inputs",
]
