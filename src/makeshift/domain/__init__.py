"""Domain models and business rules for the store schedule."""

from makeshift.domain.errors import (
    GridBoundsError,
    InvalidFormat,
    MakeshiftError,
    OutOfRange,
    TimeError,
    TimeRangeError,
    UnknownEmployee,
)
from makeshift.domain.models import Day, Event, EventKind, Shift
from makeshift.domain.policies import (
    DefaultShiftLengthPolicy,
    DefaultStaffingPolicy,
    ShiftLengthPolicy,
    StaffingPolicy,
)
from makeshift.domain.roster import Abilities, Employee, Requirements, Roster
from makeshift.domain.time import QUARTERS_PER_DAY, Time

__all__ = [
    # Models
    "Day",
    "Event",
    "EventKind",
    "Shift",
    "Time",
    "QUARTERS_PER_DAY",
    # Roster
    "Abilities",
    "Employee",
    "Requirements",
    "Roster",
    # Policies
    "DefaultShiftLengthPolicy",
    "DefaultStaffingPolicy",
    "ShiftLengthPolicy",
    "StaffingPolicy",
    # Errors
    "GridBoundsError",
    "InvalidFormat",
    "MakeshiftError",
    "OutOfRange",
    "TimeError",
    "TimeRangeError",
    "UnknownEmployee",
]
