"""makeshift - weekly staffing schedules for a single store."""

from makeshift.domain import (
    Day,
    Employee,
    Event,
    EventKind,
    Roster,
    Shift,
    Time,
)
from makeshift.scheduling import Schedule, StoreHours, create_week_schedule
from makeshift.validation import ScheduleValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "Day",
    "Employee",
    "Event",
    "EventKind",
    "Roster",
    "Schedule",
    "ScheduleValidator",
    "Shift",
    "StoreHours",
    "Time",
    "ValidationResult",
    "create_week_schedule",
]
