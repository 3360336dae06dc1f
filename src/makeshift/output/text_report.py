"""Plain-text rendering of schedules, rosters and validation results."""

from pathlib import Path
from typing import Union

from makeshift.domain.models import Day
from makeshift.domain.roster import Roster
from makeshift.domain.time import Time
from makeshift.scheduling.schedule import Schedule
from makeshift.validation.validator import ValidationResult


class TextReport:
    """Builds human-readable text for the console or a file.

    Example:
        >>> report = TextReport()
        >>> print(report.shifts(schedule))
    """

    def __init__(self, twelve_hour: bool = False):
        self.twelve_hour = twelve_hour

    def requirements(self, schedule: Schedule) -> str:
        """List every slot with a non-zero staffing requirement, by day."""
        lines = []
        for day in Day:
            lines.append("")
            lines.append(day.label)
            for qi, required in enumerate(schedule.requirements(day)):
                if required > 0:
                    lines.append(f"{self._time(Time(qi))} - {required}")
        return "\n".join(lines)

    def shifts(self, schedule: Schedule) -> str:
        """List every assigned shift, by day."""
        lines = []
        for day in Day:
            lines.append("")
            lines.append(day.label)
            lines.append("=" * 9)
            for shift in schedule.shifts_on(day):
                lines.append(
                    f"{shift.emp_id} => {self._time(shift.start)} - {self._time(shift.end)}"
                )
        return "\n".join(lines)

    def events(self, schedule: Schedule) -> str:
        lines = []
        for event in schedule.events:
            staff = ", ".join(event.required_emp_ids) or "unassigned"
            lines.append(
                f"{event.day.short_name} {self._time(event.start)}-{self._time(event.end)} "
                f"{event.name} [{event.kind_label}] x{event.num_emps}: {staff}"
            )
        return "\n".join(lines)

    def roster(self, roster: Roster) -> str:
        """Describe each employee's workable days, hours and abilities."""
        lines = []
        for emp_id, employee in roster:
            lines.append("")
            lines.append(f"=== ID: {emp_id} ===")
            days = " ".join(day.short_name for day in employee.workable_days())
            lines.append(f"Can work: {days}")
            lines.append(f"Hours range: {employee.min_hours()} - {employee.max_hours()}")
            lines.append("Can run:")
            abilities = employee.abilities.labels()
            if abilities:
                lines.extend(f"- {label}" for label in abilities)
            else:
                lines.append("Nothing.")
        return "\n".join(lines)

    def validation(self, result: ValidationResult, limit: int = 10) -> str:
        """Summarise a validation result, showing at most ``limit`` errors."""
        if result.is_valid:
            lines = ["Validation: PASSED"]
        else:
            lines = [f"Validation: FAILED ({len(result.errors)} errors)"]
            for error in result.errors[:limit]:
                lines.append(f"    - {error}")
            if len(result.errors) > limit:
                lines.append(f"    ... and {len(result.errors) - limit} more errors")
        for warning in result.warnings:
            lines.append(f"  Warning: {warning}")
        return "\n".join(lines)

    def write(self, content: str, output_path: Union[str, Path]) -> None:
        Path(output_path).write_text(content)

    def _time(self, t: Time) -> str:
        return t.to_12h_string() if self.twelve_hour else t.to_24h_string()
