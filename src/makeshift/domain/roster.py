"""Employees and the store roster.

The roster is a plain keyed collection of :class:`Employee` records. The
scheduling core only reads each employee's hour bounds from it; workable
days and abilities describe who could be given what.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from makeshift.domain.errors import UnknownEmployee
from makeshift.domain.models import Day, EventKind

MAX_WEEKLY_HOURS = 40


@dataclass
class Requirements:
    """Hour bounds and working restrictions for an employee.

    Attributes:
        can_work_days: One flag per day of the store week, Saturday first.
        minimum_hours: Fewest hours the employee must be scheduled per week.
        maximum_hours: Most hours the employee may be scheduled per week.
        closer_only: Employee may only be given closing shifts.
        class_only: Employee only teaches classes.
    """

    can_work_days: list[bool] = field(default_factory=lambda: [True] * 7)
    minimum_hours: int = 37
    maximum_hours: int = 39
    closer_only: bool = False
    class_only: bool = False


@dataclass
class Abilities:
    """Kinds of event an employee is able to run."""

    pkmn: bool = False
    magic: bool = False
    classes: bool = True
    adult_parties: bool = True
    kids_magic: bool = False

    def can_run(self, kind: EventKind) -> bool:
        """Check if these abilities cover an event kind."""
        if kind is EventKind.OTHER:
            return True
        return {
            EventKind.POKEMON: self.pkmn,
            EventKind.MAGIC: self.magic,
            EventKind.CLASS: self.classes,
            EventKind.ADULT_PARTY: self.adult_parties,
            EventKind.KIDS_MAGIC: self.kids_magic,
        }[kind]

    def labels(self) -> list[str]:
        """Human-readable names of every enabled ability."""
        names = [
            (self.pkmn, "Pokemon"),
            (self.magic, "Magic"),
            (self.classes, "Kids' classes"),
            (self.adult_parties, "Adult parties"),
            (self.kids_magic, "Kids' magic"),
        ]
        return [label for enabled, label in names if enabled]


@dataclass
class Employee:
    """An employee of the store, identified by ``id``."""

    id: str
    requirements: Requirements = field(default_factory=Requirements)
    abilities: Abilities = field(default_factory=Abilities)

    def min_hours(self) -> int:
        return self.requirements.minimum_hours

    def max_hours(self) -> int:
        return self.requirements.maximum_hours

    def change_hours(self, minimum: int, maximum: int) -> None:
        """Change the weekly hour bounds.

        Raises:
            ValueError: Unless ``0 <= minimum < maximum <= 40``.
        """
        if not (maximum > minimum and minimum >= 0 and maximum <= MAX_WEEKLY_HOURS):
            raise ValueError(
                f"Invalid hour range {minimum}-{maximum} for {self.id}: "
                f"need 0 <= min < max <= {MAX_WEEKLY_HOURS}"
            )
        self.requirements.minimum_hours = minimum
        self.requirements.maximum_hours = maximum

    def cant_work(self, day: Union[Day, int]) -> None:
        """Mark a day as unavailable.

        Raises:
            ValueError: If ``day`` is not a valid day index.
        """
        day = day if isinstance(day, Day) else Day.from_index(day)
        self.requirements.can_work_days[day.index] = False

    def can_work(self, day: Day) -> bool:
        return self.requirements.can_work_days[day.index]

    def can_do_pkmn(self) -> None:
        self.abilities.pkmn = True

    def can_do_magic(self) -> None:
        self.abilities.magic = True

    def can_do_kids_magic(self) -> None:
        self.abilities.kids_magic = True

    def cant_do_class(self) -> None:
        self.abilities.classes = False

    def cant_do_adult_parties(self) -> None:
        self.abilities.adult_parties = False

    def can_only_close(self) -> None:
        self.requirements.closer_only = True

    def is_class_only(self) -> None:
        """Restrict the employee to classes: 0-10 hours, no adult parties."""
        self.requirements.class_only = True
        self.change_hours(0, 10)
        self.cant_do_adult_parties()

    def can_run(self, kind: EventKind) -> bool:
        return self.abilities.can_run(kind)

    def workable_days(self) -> list[Day]:
        return [day for day in Day if self.can_work(day)]


class Roster:
    """The full set of employees working at the store.

    Iterating a roster yields ``(id, employee)`` pairs ordered by ID.

    Example:
        >>> roster = Roster()
        >>> roster.add(Employee("Matt"))
        >>> roster.get("Matt").max_hours()
        39
    """

    def __init__(self, employees: Optional[list[Employee]] = None):
        self._employees: dict[str, Employee] = {}
        for employee in employees or []:
            self.add(employee)

    def add(self, employee: Employee) -> None:
        """Add an employee, replacing any existing record with the same ID."""
        self._employees[employee.id] = employee

    def get(self, emp_id: str) -> Employee:
        """Look up an employee by ID.

        Raises:
            UnknownEmployee: If the ID is not on the roster.
        """
        try:
            return self._employees[emp_id]
        except KeyError:
            raise UnknownEmployee(emp_id) from None

    def remove(self, emp_id: str) -> Employee:
        """Remove and return an employee.

        Raises:
            UnknownEmployee: If the ID is not on the roster.
        """
        employee = self.get(emp_id)
        del self._employees[emp_id]
        return employee

    def ids(self) -> list[str]:
        return sorted(self._employees)

    def __contains__(self, emp_id: object) -> bool:
        return emp_id in self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[tuple[str, Employee]]:
        for emp_id in self.ids():
            yield emp_id, self._employees[emp_id]
