"""Exception types raised by the scheduling core.

Construction and arithmetic problems are raised immediately. Schedule
validation problems are not exceptions; they are collected by
:class:`makeshift.validation.validator.ScheduleValidator`.
"""


class MakeshiftError(Exception):
    """Base class for all errors raised by makeshift."""


class TimeError(MakeshiftError, ValueError):
    """Base class for invalid time values."""


class InvalidFormat(TimeError):
    """A time string could not be parsed as ``H:MM`` or ``HH:MM``."""


class OutOfRange(TimeError):
    """A quarter-hour index fell outside ``[0, 96)``."""


class TimeRangeError(TimeError):
    """Arithmetic on a time left the valid day range."""


class GridBoundsError(MakeshiftError, IndexError):
    """A requirement grid index fell outside ``[0, 96)``."""


class UnknownEmployee(MakeshiftError, KeyError):
    """An employee ID is not on the roster."""

    def __init__(self, employee_id: str):
        super().__init__(employee_id)
        self.employee_id = employee_id

    def __str__(self) -> str:
        return f"Unknown employee: {self.employee_id}"
