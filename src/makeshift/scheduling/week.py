"""Store opening hours and construction of a seeded week schedule."""

import random
from dataclasses import dataclass, field
from typing import Optional

from makeshift.domain.models import Day
from makeshift.domain.policies import ShiftLengthPolicy, StaffingPolicy
from makeshift.scheduling.schedule import Schedule


def _default_hours() -> dict[Day, tuple[int, int]]:
    # Closed Mondays.
    return {
        Day.SATURDAY: (9, 21),
        Day.SUNDAY: (10, 18),
        Day.TUESDAY: (10, 22),
        Day.WEDNESDAY: (10, 21),
        Day.THURSDAY: (10, 22),
        Day.FRIDAY: (10, 22),
    }


@dataclass
class StoreHours:
    """Opening and closing hour for each day the store is open.

    Attributes:
        hours: Dict mapping days to ``(open_hour, close_hour)`` in 24-hour
            time. Days missing from the dict are closed.
    """

    hours: dict[Day, tuple[int, int]] = field(default_factory=_default_hours)

    @classmethod
    def default(cls) -> "StoreHours":
        """The store's regular week."""
        return cls()

    def is_open(self, day: Day) -> bool:
        return day in self.hours

    def open_days(self) -> list[Day]:
        """Open days in store-week order."""
        return [day for day in Day if day in self.hours]


def create_week_schedule(
    store_hours: Optional[StoreHours] = None,
    staffing_policy: Optional[StaffingPolicy] = None,
    shift_length_policy: Optional[ShiftLengthPolicy] = None,
    rng: Optional[random.Random] = None,
) -> Schedule:
    """Create a schedule with requirements seeded from the store's hours.

    Args:
        store_hours: Opening hours. Defaults to the regular week.
        staffing_policy: Requirement levels around opening hours.
        shift_length_policy: Target and limits for shift length.
        rng: Random source for shift expansion.
    """
    store_hours = store_hours or StoreHours.default()
    schedule = Schedule(
        staffing_policy=staffing_policy,
        shift_length_policy=shift_length_policy,
        rng=rng,
    )
    for day in store_hours.open_days():
        open_hour, close_hour = store_hours.hours[day]
        schedule.set_hours(day, open_hour, close_hour)
    return schedule
