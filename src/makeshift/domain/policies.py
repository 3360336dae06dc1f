"""Policy definitions for staffing rules.

Policies hold the store's business rules for how many staff each part of
the day needs and how long shifts should be. They are kept separate from
the schedule so the rules can be tested and changed on their own.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from makeshift.domain.models import Shift


class StaffingPolicy(ABC):
    """Abstract base class for requirement levels around store hours."""

    @abstractmethod
    def ramp_up_level(self) -> int:
        """Staff required in the slots just before opening."""
        pass

    @abstractmethod
    def ramp_up_slots(self) -> int:
        """Number of quarter hours of ramp-up before opening."""
        pass

    @abstractmethod
    def full_level(self) -> int:
        """Staff required from opening through closing."""
        pass

    @abstractmethod
    def wind_down_level(self) -> int:
        """Staff required in the slots just after closing."""
        pass

    @abstractmethod
    def wind_down_slots(self) -> int:
        """Number of quarter hours of wind-down after closing."""
        pass


class ShiftLengthPolicy(ABC):
    """Abstract base class for shift length rules."""

    @abstractmethod
    def target_quarters(self) -> int:
        """Length in quarter hours that expansion grows shifts toward."""
        pass

    @abstractmethod
    def is_acceptable(self, shift: Shift) -> bool:
        """Check if a single shift has an acceptable length."""
        pass


@dataclass
class DefaultStaffingPolicy(StaffingPolicy):
    """Default staffing levels.

    - 1 quarter hour before opening: 3 staff
    - Opening through closing (inclusive): 4 staff
    - 3 quarter hours after closing: 3 staff
    """

    ramp_up: int = 3
    ramp_up_quarters: int = 1
    full: int = 4
    wind_down: int = 3
    wind_down_quarters: int = 3

    def ramp_up_level(self) -> int:
        return self.ramp_up

    def ramp_up_slots(self) -> int:
        return self.ramp_up_quarters

    def full_level(self) -> int:
        return self.full

    def wind_down_level(self) -> int:
        return self.wind_down

    def wind_down_slots(self) -> int:
        return self.wind_down_quarters


@dataclass
class DefaultShiftLengthPolicy(ShiftLengthPolicy):
    """Default shift length policy.

    Shifts are expanded toward 8 hours (32 quarter hours). No per-shift
    length rule is enforced yet, so every shift is acceptable.
    """

    target: int = 32  # 8 hours

    def target_quarters(self) -> int:
        return self.target

    def is_acceptable(self, shift: Shift) -> bool:
        return True
