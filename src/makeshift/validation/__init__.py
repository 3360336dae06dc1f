"""Validation module for verifying schedule correctness."""

from makeshift.validation.validator import (
    ScheduleValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)

__all__ = [
    "ScheduleValidator",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
]
