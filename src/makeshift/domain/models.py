"""Domain models for the weekly store schedule.

This module contains the days of the store week, the events that consume
staff, and the shifts that provide it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from makeshift.domain.time import Time


class Day(Enum):
    """Days of the store week.

    The store week begins on Saturday, so ``Day.SATURDAY.index`` is 0 and
    ``Day.FRIDAY.index`` is 6.
    """

    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @property
    def index(self) -> int:
        """Position of the day within the store week."""
        return self.value

    @property
    def label(self) -> str:
        """Display name, e.g. ``"Saturday"``."""
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        """Three-letter abbreviation, e.g. ``"Sat"``."""
        return self.label[:3]

    @classmethod
    def from_index(cls, index: int) -> "Day":
        """Look up a day by its position in the store week.

        Raises:
            ValueError: If ``index`` is not in ``[0, 7)``.
        """
        return cls(index)

    @classmethod
    def from_name(cls, name: str) -> "Day":
        """Look up a day by full name or three-letter abbreviation."""
        key = name.strip().lower()
        for day in cls:
            if key in (day.label.lower(), day.short_name.lower()):
                return day
        raise ValueError(f"Unknown day name: {name!r}")

    def __str__(self) -> str:
        return self.label


class EventKind(Enum):
    """Categories of store events."""

    POKEMON = "pkmn"
    MAGIC = "magic"
    CLASS = "class"
    ADULT_PARTY = "adult_party"
    KIDS_MAGIC = "kids_magic"
    OTHER = "other"

    @classmethod
    def parse(cls, text: str) -> "EventKind":
        """Map a free-text category tag onto a kind.

        Unrecognised tags become ``OTHER``.
        """
        key = text.strip().lower().replace(" ", "_").replace("'", "")
        return _KIND_ALIASES.get(key, cls.OTHER)


_KIND_ALIASES = {
    "pkmn": EventKind.POKEMON,
    "pokemon": EventKind.POKEMON,
    "magic": EventKind.MAGIC,
    "class": EventKind.CLASS,
    "adult_party": EventKind.ADULT_PARTY,
    "adultparty": EventKind.ADULT_PARTY,
    "adult_parties": EventKind.ADULT_PARTY,
    "kids_magic": EventKind.KIDS_MAGIC,
    "kidsmagic": EventKind.KIDS_MAGIC,
}

DEFAULT_SETUP = Time.from_quarter_index(2)  # 30 minutes
DEFAULT_BREAKDOWN = Time.from_hour(2)


@dataclass
class Event:
    """A named activity that ties up staff for a window of a day.

    ``end`` must be later than ``start``; this is not checked.

    Attributes:
        name: Display name of the event.
        day: Day the event runs.
        start: Nominal start time.
        end: Nominal end time.
        kind: Event category. Strings are parsed with :meth:`EventKind.parse`.
        kind_label: Original category text, kept for ``OTHER`` events.
        required_emp_ids: Employees who must work the event, in order.
            Duplicates are allowed.
        num_emps: Number of staff the event consumes while it runs.
        setup: Padding before ``start``, as a quarter-hour offset.
        breakdown: Padding after ``end``, as a quarter-hour offset.
    """

    name: str
    day: Day
    start: Time
    end: Time
    kind: Union[EventKind, str] = EventKind.OTHER
    kind_label: str = ""
    required_emp_ids: list[str] = field(default_factory=list)
    num_emps: int = 0
    setup: Time = DEFAULT_SETUP
    breakdown: Time = DEFAULT_BREAKDOWN

    def __post_init__(self):
        if isinstance(self.kind, str):
            if not self.kind_label:
                self.kind_label = self.kind
            self.kind = EventKind.parse(self.kind)
        if not self.kind_label:
            self.kind_label = self.kind.value
        self._sync_num_emps()

    def add_employee(self, emp_id: str) -> None:
        """Require an employee to work this event."""
        self.required_emp_ids.append(emp_id)
        self._sync_num_emps()

    def add_employees(self, emp_ids: list[str]) -> None:
        """Require several employees to work this event."""
        self.required_emp_ids.extend(emp_ids)
        self._sync_num_emps()

    def set_staffing_requirement(self, num_emps: int) -> None:
        """Override the staff count.

        The override is applied as given, even below the number of required
        employees.
        """
        self.num_emps = num_emps

    def set_setup_breakdown(
        self,
        setup: Union[Time, int],
        breakdown: Union[Time, int],
    ) -> None:
        """Replace the setup and breakdown padding (Times or quarter indices)."""
        self.setup = setup if isinstance(setup, Time) else Time.from_quarter_index(setup)
        self.breakdown = (
            breakdown
            if isinstance(breakdown, Time)
            else Time.from_quarter_index(breakdown)
        )

    def has_requirements(self) -> bool:
        """Check if any employees are required for this event."""
        return bool(self.required_emp_ids)

    def padded_start(self) -> Time:
        """Start of the event including setup."""
        return self.start.retract(self.setup)

    def padded_end(self) -> Time:
        """End of the event including breakdown."""
        return self.end.extend(self.breakdown)

    @property
    def duration_quarters(self) -> int:
        """Nominal length of the event in quarter hours."""
        return self.end.qi - self.start.qi

    def _sync_num_emps(self) -> None:
        self.num_emps = max(self.num_emps, len(self.required_emp_ids))

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.kind_label}) {self.day.label} "
            f"{self.start} - {self.end}"
        )


@dataclass
class Shift:
    """A block of time an employee is scheduled to work.

    Attributes:
        emp_id: ID of the employee working the shift.
        day: Day of the shift.
        start: First quarter hour worked.
        end: End of the shift (exclusive).
    """

    emp_id: str
    day: Day
    start: Time
    end: Time

    @property
    def length(self) -> int:
        """Length of the shift in quarter hours."""
        return self.end.qi - self.start.qi

    def contains(self, qi: int) -> bool:
        """Check if a quarter-hour slot falls within the shift."""
        return self.start.qi <= qi < self.end.qi

    def __str__(self) -> str:
        return f"{self.emp_id} => {self.start} - {self.end}"
