"""Validation of a week's schedule.

This module is the single place where a schedule is checked against the
roster's hour bounds and the store's staffing requirements. Problems are
collected as findings rather than raised, so a caller sees every problem
with a schedule at once.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from makeshift.domain.models import Day
from makeshift.domain.policies import DefaultShiftLengthPolicy, ShiftLengthPolicy
from makeshift.domain.roster import Roster
from makeshift.domain.time import QUARTERS_PER_HOUR, Time

if TYPE_CHECKING:
    from makeshift.scheduling.schedule import Schedule

logger = logging.getLogger(__name__)


class ValidationErrorType(Enum):
    """Types of validation errors."""

    HOURS_BELOW_MINIMUM = "hours_below_minimum"
    HOURS_ABOVE_MAXIMUM = "hours_above_maximum"
    UNDER_COVERAGE = "under_coverage"
    SHIFT_LENGTH = "shift_length"


@dataclass
class ValidationError:
    """A single validation finding."""

    error_type: ValidationErrorType
    message: str
    emp_id: Optional[str] = None
    day: Optional[Day] = None
    slot: Optional[int] = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.emp_id:
            parts.append(f"Employee {self.emp_id}:")
        if self.day is not None:
            parts.append(f"{self.day.label}:")
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating a schedule."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False
        logger.warning("%s", error)

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> None:
        for error in other.errors:
            self.errors.append(error)
            self.is_valid = False
        self.warnings.extend(other.warnings)

    def errors_for(self, emp_id: str) -> list[ValidationError]:
        return [e for e in self.errors if e.emp_id == emp_id]

    def messages(self) -> list[str]:
        """Every finding rendered as text."""
        return [str(e) for e in self.errors]


class ScheduleValidator:
    """Validates a week's schedule.

    Example:
        >>> validator = ScheduleValidator()
        >>> result = validator.validate(schedule, roster)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def __init__(self, shift_length_policy: Optional[ShiftLengthPolicy] = None):
        self.shift_length_policy = shift_length_policy or DefaultShiftLengthPolicy()

    def validate(self, schedule: "Schedule", roster: Roster) -> ValidationResult:
        """Check hours for every roster member, coverage, and shift lengths.

        Args:
            schedule: The schedule to validate.
            roster: Source of each employee's hour bounds.

        Returns:
            ValidationResult holding every finding.
        """
        result = ValidationResult(is_valid=True)

        for emp_id, _employee in roster:
            result.merge(self.validate_hours(schedule, emp_id, roster))

        result.merge(self.validate_coverage(schedule))
        result.merge(self.validate_shift_lengths(schedule))

        for emp_id in sorted({s.emp_id for s in schedule.all_shifts()}):
            if emp_id not in roster:
                result.add_warning(f"Shifts assigned to {emp_id}, who is not on the roster")

        return result

    def validate_hours(
        self,
        schedule: "Schedule",
        emp_id: str,
        roster: Roster,
    ) -> ValidationResult:
        """Check an employee's weekly quarter hours against their bounds.

        Raises:
            UnknownEmployee: If the employee is not on the roster.
        """
        result = ValidationResult(is_valid=True)
        employee = roster.get(emp_id)
        total = schedule.total_quarters(emp_id)
        minimum = employee.min_hours() * QUARTERS_PER_HOUR
        maximum = employee.max_hours() * QUARTERS_PER_HOUR
        details = {"total_quarters": total, "min_quarters": minimum, "max_quarters": maximum}

        if total < minimum:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.HOURS_BELOW_MINIMUM,
                    message=(
                        f"{_hours(total)} h assigned, below minimum "
                        f"{employee.min_hours()} h"
                    ),
                    emp_id=emp_id,
                    details=details,
                )
            )
        elif total > maximum:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.HOURS_ABOVE_MAXIMUM,
                    message=(
                        f"{_hours(total)} h assigned, above maximum "
                        f"{employee.max_hours()} h"
                    ),
                    emp_id=emp_id,
                    details=details,
                )
            )
        return result

    def validate_coverage(self, schedule: "Schedule") -> ValidationResult:
        """Check free staff against the requirement at every slot.

        Consecutive short slots on a day are reported as one finding.
        """
        result = ValidationResult(is_valid=True)
        for day in Day:
            coverage = schedule.coverage(day)
            required = schedule.requirements(day)
            short = [qi for qi, (have, need) in enumerate(zip(coverage, required)) if have < need]
            for run in _runs(short):
                first, last = run[0], run[-1]
                worst = max(required[qi] - coverage[qi] for qi in run)
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.UNDER_COVERAGE,
                        message=(
                            f"Under-staffed {Time(first)} - {_slot_end(last)} "
                            f"(short by up to {worst})"
                        ),
                        day=day,
                        slot=first,
                        details={
                            "slots": run,
                            "coverage": [coverage[qi] for qi in run],
                            "required": [required[qi] for qi in run],
                        },
                    )
                )
        return result

    def validate_shift_lengths(self, schedule: "Schedule") -> ValidationResult:
        """Check every shift against the shift length policy."""
        result = ValidationResult(is_valid=True)
        for shift in schedule.all_shifts():
            if not self.shift_length_policy.is_acceptable(shift):
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.SHIFT_LENGTH,
                        message=f"Shift {shift.start} - {shift.end} has unacceptable length",
                        emp_id=shift.emp_id,
                        day=shift.day,
                        slot=shift.start.qi,
                        details={"length": shift.length},
                    )
                )
        return result


def _runs(slots: list[int]) -> list[list[int]]:
    """Split sorted slot indices into runs of consecutive values."""
    runs: list[list[int]] = []
    for qi in slots:
        if runs and runs[-1][-1] == qi - 1:
            runs[-1].append(qi)
        else:
            runs.append([qi])
    return runs


def _hours(quarters: int) -> str:
    return f"{quarters / QUARTERS_PER_HOUR:g}"


def _slot_end(qi: int) -> str:
    minutes = (qi + 1) * 15
    return f"{minutes // 60}:{minutes % 60:02d}"
