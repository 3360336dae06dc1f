"""The weekly store schedule.

A :class:`Schedule` owns everything about one store week: the events that
tie up staff, the quarter-hourly staffing requirements for each day, and
the shifts assigned so far. It also answers coverage and validity
questions about itself.
"""

import logging
import random
from typing import Optional

from makeshift.domain.errors import GridBoundsError, UnknownEmployee
from makeshift.domain.models import Day, Event, Shift
from makeshift.domain.policies import (
    DefaultShiftLengthPolicy,
    DefaultStaffingPolicy,
    ShiftLengthPolicy,
    StaffingPolicy,
)
from makeshift.domain.roster import Roster
from makeshift.domain.time import QUARTERS_PER_DAY, Time
from makeshift.scheduling.expander import ShiftExpander
from makeshift.validation.validator import ScheduleValidator, ValidationResult

logger = logging.getLogger(__name__)


class Schedule:
    """A week's schedule.

    Attributes:
        raw_reqs: Staff required per quarter hour, one row of 96 per day,
            indexed by ``Day.index``.
        rng: Random source used by shift expansion.

    Example:
        >>> sched = Schedule(rng=random.Random(7))
        >>> sched.set_hours(Day.SATURDAY, 9, 21)
        >>> _ = sched.assign_shift("Matt", Day.SATURDAY, Time.from_hour(9), Time.from_hour(17))
        >>> sched.coverage(Day.SATURDAY)[36]
        1
    """

    def __init__(
        self,
        staffing_policy: Optional[StaffingPolicy] = None,
        shift_length_policy: Optional[ShiftLengthPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.staffing_policy = staffing_policy or DefaultStaffingPolicy()
        self.shift_length_policy = shift_length_policy or DefaultShiftLengthPolicy()
        self.rng = rng or random.Random()
        self._events: list[Event] = []
        self.raw_reqs: list[list[int]] = [[0] * QUARTERS_PER_DAY for _ in Day]
        self._shifts: list[list[Shift]] = [[] for _ in Day]

    # Requirements

    def set_hours(self, day: Day, open_hour: int, close_hour: int) -> None:
        """Set a day's staffing requirements from the store's hours.

        Every slot from ``open_hour`` through ``close_hour`` (inclusive) gets
        the full staffing level. The slots just before opening and just
        after closing get the ramp-up and wind-down levels.

        Raises:
            GridBoundsError: If the padding would run off either end of the
                day. Nothing is written in that case.
        """
        policy = self.staffing_policy
        open_qi = Time.from_hour(open_hour).qi
        close_qi = Time.from_hour(close_hour).qi
        first = open_qi - policy.ramp_up_slots()
        last = close_qi + policy.wind_down_slots()
        if first < 0 or last >= QUARTERS_PER_DAY:
            raise GridBoundsError(
                f"Hours {open_hour}-{close_hour} on {day} pad to slots "
                f"{first}-{last}, outside [0, {QUARTERS_PER_DAY})"
            )

        row = self.raw_reqs[day.index]
        for qi in range(first, open_qi):
            row[qi] = policy.ramp_up_level()
        for qi in range(open_qi, close_qi + 1):
            row[qi] = policy.full_level()
        for qi in range(close_qi + 1, last + 1):
            row[qi] = policy.wind_down_level()

    def requirement(self, day: Day, qi: int) -> int:
        """Staff required on ``day`` at slot ``qi``.

        Raises:
            GridBoundsError: If ``qi`` is outside ``[0, 96)``.
        """
        if not 0 <= qi < QUARTERS_PER_DAY:
            raise GridBoundsError(
                f"Requirement slot {qi} on {day} is outside [0, {QUARTERS_PER_DAY})"
            )
        return self.raw_reqs[day.index][qi]

    def requirements(self, day: Day) -> list[int]:
        """Copy of a day's requirement row."""
        return list(self.raw_reqs[day.index])

    # Events

    @property
    def events(self) -> tuple[Event, ...]:
        """All registered events, in registration order."""
        return tuple(self._events)

    def add_event(self, event: Event) -> None:
        """Register an event with the schedule."""
        self._events.append(event)
        logger.debug("Registered event %s", event)

    def add_events(self, events: list[Event]) -> None:
        for event in events:
            self.add_event(event)

    def events_on(self, day: Day) -> list[Event]:
        return [event for event in self._events if event.day is day]

    # Shifts

    def shifts_on(self, day: Day) -> list[Shift]:
        """Shifts on a day, in the order they were assigned."""
        return list(self._shifts[day.index])

    def shifts_for(self, emp_id: str) -> list[Shift]:
        """All of an employee's shifts, Saturday first."""
        return [
            shift
            for day_shifts in self._shifts
            for shift in day_shifts
            if shift.emp_id == emp_id
        ]

    def all_shifts(self) -> list[Shift]:
        return [shift for day_shifts in self._shifts for shift in day_shifts]

    def assign_shift(self, emp_id: str, day: Day, start: Time, end: Time) -> Shift:
        """Add a shift exactly as given.

        No overlap or requirement checks are made.
        """
        shift = Shift(emp_id=emp_id, day=day, start=start, end=end)
        self._shifts[day.index].append(shift)
        logger.debug("Assigned %s on %s", shift, day)
        return shift

    def assign_event(self, emp_id: str, event: Event) -> Shift:
        """Give an employee a shift covering an event plus its setup and breakdown.

        Raises:
            TimeRangeError: If the padding runs off either end of the day.
        """
        return self.assign_shift(
            emp_id, event.day, event.padded_start(), event.padded_end()
        )

    def assign_required_shifts(self, roster: Optional[Roster] = None) -> list[Shift]:
        """Create a shift for every employee required by every event.

        Shifts are created in event order, then in the order each event
        lists its employees.

        Args:
            roster: If given, every required employee must be on it.

        Returns:
            The shifts created.

        Raises:
            UnknownEmployee: If a required employee is not on the roster.
                No shifts are created in that case.
        """
        pairs = [
            (emp_id, event)
            for event in self._events
            if event.has_requirements()
            for emp_id in event.required_emp_ids
        ]
        if roster is not None:
            for emp_id, event in pairs:
                if emp_id not in roster:
                    logger.error("Event %s requires unknown employee %s", event.name, emp_id)
                    raise UnknownEmployee(emp_id)

        created = [self.assign_event(emp_id, event) for emp_id, event in pairs]
        logger.info("Assigned %d required shifts", len(created))
        return created

    def remove_shift(self, day: Day, shift: Shift) -> None:
        """Remove one shift from a day.

        Raises:
            ValueError: If this shift object is not scheduled on that day.
                Equal but distinct shifts are left alone.
        """
        row = self._shifts[day.index]
        for i, scheduled in enumerate(row):
            if scheduled is shift:
                del row[i]
                break
        else:
            raise ValueError(f"{shift} is not scheduled on {day}")
        logger.debug("Removed %s on %s", shift, day)

    def remove_shifts_for(self, emp_id: str, day: Optional[Day] = None) -> int:
        """Remove an employee's shifts on one day, or on every day.

        Returns:
            Number of shifts removed.
        """
        days = [day] if day is not None else list(Day)
        removed = 0
        for d in days:
            kept = [s for s in self._shifts[d.index] if s.emp_id != emp_id]
            removed += len(self._shifts[d.index]) - len(kept)
            self._shifts[d.index] = kept
        return removed

    def expand_shifts(self, emp_id: str, rng: Optional[random.Random] = None) -> list[Shift]:
        """Grow an employee's shifts toward the target length.

        See :class:`makeshift.scheduling.expander.ShiftExpander`.
        """
        expander = ShiftExpander(
            shift_length_policy=self.shift_length_policy,
            rng=rng or self.rng,
        )
        return expander.expand(self, emp_id)

    # Coverage and validity

    def total_quarters(self, emp_id: str) -> int:
        """Quarter hours assigned to an employee across the week."""
        return sum(shift.length for shift in self.shifts_for(emp_id))

    def coverage(self, day: Day) -> list[int]:
        """Free staff at each quarter hour of a day.

        Each shift adds one for every slot it covers. Each event subtracts
        its staff count for every slot of its padded window.

        Raises:
            TimeRangeError: If an event's padding runs off the day.
        """
        timeline = [0] * QUARTERS_PER_DAY
        for shift in self._shifts[day.index]:
            for qi in range(shift.start.qi, shift.end.qi):
                timeline[qi] += 1
        for event in self.events_on(day):
            for qi in range(event.padded_start().qi, event.padded_end().qi):
                timeline[qi] -= event.num_emps
        return timeline

    def hours_assigned_valid(self, emp_id: str, roster: Roster) -> bool:
        """Check an employee's weekly total against their roster hour bounds.

        Raises:
            UnknownEmployee: If the employee is not on the roster.
        """
        return ScheduleValidator(self.shift_length_policy).validate_hours(
            self, emp_id, roster
        ).is_valid

    def adequate_coverage(self) -> bool:
        """Check that coverage meets the requirement at every slot of the week."""
        return ScheduleValidator(self.shift_length_policy).validate_coverage(self).is_valid

    def all_shifts_okay_length(self) -> bool:
        """Check every shift against the shift length policy."""
        return all(
            self.shift_length_policy.is_acceptable(shift) for shift in self.all_shifts()
        )

    def validate(self, roster: Roster) -> ValidationResult:
        """Run every check and collect all findings."""
        return ScheduleValidator(self.shift_length_policy).validate(self, roster)

    def is_valid(self, roster: Roster) -> bool:
        return self.validate(roster).is_valid
