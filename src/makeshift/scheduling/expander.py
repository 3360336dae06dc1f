"""Greedy shift expansion.

Expansion lengthens an employee's existing shifts toward the target shift
length, one quarter hour at a time, for as long as the store needs staff
on both sides of the shift.

For each shift a direction is drawn at random. The shift first grows in
that direction until it is long enough or a boundary slot needs no staff,
then grows in the other direction under the same rule. The result depends
on the draw; it is not a balanced expansion.
"""

import logging
import random
from typing import TYPE_CHECKING, Optional

from makeshift.domain.errors import GridBoundsError
from makeshift.domain.models import Shift
from makeshift.domain.policies import DefaultShiftLengthPolicy, ShiftLengthPolicy
from makeshift.domain.time import QUARTERS_PER_DAY

if TYPE_CHECKING:
    from makeshift.scheduling.schedule import Schedule

logger = logging.getLogger(__name__)


class ShiftExpander:
    """Two-phase greedy expansion of shifts.

    Args:
        shift_length_policy: Supplies the target length in quarter hours.
        rng: Source of the direction draw. Anything with a ``random()``
            method returning a float in ``[0, 1)`` works; values below 0.5
            grow the end of the shift first.
    """

    def __init__(
        self,
        shift_length_policy: Optional[ShiftLengthPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.shift_length_policy = shift_length_policy or DefaultShiftLengthPolicy()
        self.rng = rng or random.Random()

    def expand(self, schedule: "Schedule", emp_id: str) -> list[Shift]:
        """Expand every shift belonging to ``emp_id`` in place.

        Returns:
            The employee's shifts, after expansion.

        Raises:
            GridBoundsError: If a boundary check falls off the day, e.g. a
                short shift starting at midnight, or a shift would be pushed
                past the end of the day.
        """
        shifts = schedule.shifts_for(emp_id)
        for shift in shifts:
            before = shift.length
            forward_first = self.rng.random() < 0.5
            self._grow(schedule, shift, forward=forward_first)
            self._grow(schedule, shift, forward=not forward_first)
            if shift.length != before:
                logger.debug(
                    "Expanded %s on %s from %d to %d quarters",
                    shift, shift.day, before, shift.length,
                )
        logger.info("Expanded %d shifts for %s", len(shifts), emp_id)
        return shifts

    def _grow(self, schedule: "Schedule", shift: Shift, forward: bool) -> None:
        target = self.shift_length_policy.target_quarters()
        while shift.length < target and self._needed_on_both_sides(schedule, shift):
            if forward:
                if shift.end.qi + 1 >= QUARTERS_PER_DAY:
                    raise GridBoundsError(
                        f"Cannot extend {shift} on {shift.day} past the end of the day"
                    )
                shift.end = shift.end.extend(1)
            else:
                shift.start = shift.start.retract(1)
            logger.debug("Extended %s on %s", shift, shift.day)

    def _needed_on_both_sides(self, schedule: "Schedule", shift: Shift) -> bool:
        after = schedule.requirement(shift.day, shift.end.qi)
        before = schedule.requirement(shift.day, shift.start.qi - 1)
        return after != 0 and before != 0
