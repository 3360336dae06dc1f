"""Quarter-hour time values.

A :class:`Time` is a point in the day rounded down to its 15-minute slot.
Slot 0 starts at midnight and slot 95 starts at 23:45.
"""

from dataclasses import dataclass
from typing import Union

from makeshift.domain.errors import InvalidFormat, OutOfRange, TimeRangeError

QUARTERS_PER_HOUR = 4
QUARTERS_PER_DAY = 24 * QUARTERS_PER_HOUR
SLOT_MINUTES = 15


@dataclass(frozen=True, order=True)
class Time:
    """A time of day, stored as its quarter-hour index (``qi``).

    Attributes:
        qi: Zero-based index of the 15-minute slot, in ``[0, 96)``.

    Example:
        >>> Time.from_string("10:30").qi
        42
        >>> Time.from_hour(14).to_24h_string()
        '14:00'
    """

    qi: int

    def __post_init__(self):
        if isinstance(self.qi, bool) or not isinstance(self.qi, int):
            raise OutOfRange(f"Quarter index must be an int, got {self.qi!r}")
        if not 0 <= self.qi < QUARTERS_PER_DAY:
            raise OutOfRange(
                f"Quarter index {self.qi} is outside [0, {QUARTERS_PER_DAY})"
            )

    # Constructors

    @classmethod
    def from_string(cls, text: str) -> "Time":
        """Parse a 24-hour ``H:MM`` or ``HH:MM`` string.

        Minutes are truncated to the start of their quarter hour, so
        ``"10:29"`` and ``"10:15"`` give the same time.

        Raises:
            InvalidFormat: If the text is not two unsigned integers
                separated by a single colon.
            OutOfRange: If the parsed time is 24:00 or later.
        """
        parts = text.strip().split(":")
        if len(parts) != 2 or not all(_is_unsigned(p) for p in parts):
            raise InvalidFormat(f"Cannot parse time {text!r}")
        hours, minutes = (int(p) for p in parts)
        return cls.from_quarter_index((hours * 60 + minutes) // SLOT_MINUTES)

    @classmethod
    def from_quarter_index(cls, qi: int) -> "Time":
        """Create a time directly from a quarter-hour index."""
        return cls(qi)

    @classmethod
    def from_hour(cls, hour: int) -> "Time":
        """Create a time on the hour, e.g. ``from_hour(14)`` is 14:00."""
        return cls.from_quarter_index(hour * QUARTERS_PER_HOUR)

    # Accessors

    @property
    def hour(self) -> int:
        """Hour of day, 0-23."""
        return self.qi // QUARTERS_PER_HOUR

    @property
    def minute(self) -> int:
        """Minute within the hour: 0, 15, 30 or 45."""
        return (self.qi % QUARTERS_PER_HOUR) * SLOT_MINUTES

    def to_24h_string(self) -> str:
        """Render as ``H:MM`` with the hour unpadded, e.g. ``"9:00"``."""
        return f"{self.hour}:{self.minute:02d}"

    def to_12h_string(self) -> str:
        """Render as a 12-hour clock with an ``a``/``p`` suffix, e.g. ``"5:15p"``."""
        if self.hour == 0:
            return f"12:{self.minute:02d}a"
        if self.hour < 12:
            return f"{self.hour}:{self.minute:02d}a"
        if self.hour == 12:
            return f"12:{self.minute:02d}p"
        return f"{self.hour - 12}:{self.minute:02d}p"

    # Arithmetic

    def extend(self, offset: Union["Time", int]) -> "Time":
        """Return the time ``offset`` quarter hours later.

        Raises:
            TimeRangeError: If the result would be 24:00 or later.
        """
        qi = self.qi + _quarters(offset)
        if qi >= QUARTERS_PER_DAY:
            raise TimeRangeError(
                f"{self} plus {_quarters(offset)} quarters runs past the end of the day"
            )
        return Time(qi)

    def retract(self, offset: Union["Time", int]) -> "Time":
        """Return the time ``offset`` quarter hours earlier.

        Raises:
            TimeRangeError: If the result would be before midnight.
        """
        qi = self.qi - _quarters(offset)
        if qi < 0:
            raise TimeRangeError(
                f"{self} minus {_quarters(offset)} quarters runs before midnight"
            )
        return Time(qi)

    def __str__(self) -> str:
        return self.to_24h_string()

    def __repr__(self) -> str:
        return f"Time({self.to_24h_string()})"


def _is_unsigned(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _quarters(offset: Union[Time, int]) -> int:
    if isinstance(offset, Time):
        return offset.qi
    if offset < 0:
        raise TimeRangeError(f"Time offsets must be non-negative, got {offset}")
    return offset
