"""Tests for the weekly Schedule."""

import pytest

from makeshift.domain.errors import GridBoundsError, OutOfRange, TimeRangeError, UnknownEmployee
from makeshift.domain.models import Day, Event
from makeshift.domain.policies import DefaultStaffingPolicy
from makeshift.domain.roster import Employee, Roster
from makeshift.domain.time import QUARTERS_PER_DAY, Time
from makeshift.scheduling.schedule import Schedule
from makeshift.scheduling.week import StoreHours, create_week_schedule


class TestSetHours:
    """Tests for seeding the requirement grid."""

    @pytest.fixture
    def schedule(self):
        sched = Schedule()
        sched.set_hours(Day.SATURDAY, 9, 21)
        return sched

    def test_open_through_close_is_full_staffing(self, schedule):
        row = schedule.requirements(Day.SATURDAY)
        assert all(row[qi] == 4 for qi in range(36, 85))

    def test_one_slot_of_ramp_up(self, schedule):
        row = schedule.requirements(Day.SATURDAY)
        assert row[35] == 3
        assert row[34] == 0

    def test_three_slots_of_wind_down(self, schedule):
        row = schedule.requirements(Day.SATURDAY)
        assert row[85:88] == [3, 3, 3]
        assert row[88] == 0

    def test_everything_else_is_zero(self, schedule):
        row = schedule.requirements(Day.SATURDAY)
        assert not any(row[:35])
        assert not any(row[88:])
        for day in Day:
            if day is not Day.SATURDAY:
                assert schedule.requirements(day) == [0] * QUARTERS_PER_DAY

    def test_requirements_returns_copy(self, schedule):
        schedule.requirements(Day.SATURDAY)[40] = 99
        assert schedule.requirement(Day.SATURDAY, 40) == 4

    def test_ramp_up_before_midnight_fails(self):
        sched = Schedule()
        with pytest.raises(GridBoundsError):
            sched.set_hours(Day.SUNDAY, 0, 10)
        assert sched.requirements(Day.SUNDAY) == [0] * QUARTERS_PER_DAY

    def test_wind_down_past_midnight_fails(self):
        sched = Schedule(staffing_policy=DefaultStaffingPolicy(wind_down_quarters=5))
        with pytest.raises(GridBoundsError):
            sched.set_hours(Day.FRIDAY, 10, 23)
        assert sched.requirements(Day.FRIDAY) == [0] * QUARTERS_PER_DAY

    def test_latest_close_fits(self):
        sched = Schedule()
        sched.set_hours(Day.FRIDAY, 10, 23)
        assert sched.requirement(Day.FRIDAY, 95) == 3

    def test_close_hour_out_of_range(self):
        with pytest.raises(OutOfRange):
            Schedule().set_hours(Day.FRIDAY, 10, 24)

    def test_requirement_outside_grid_fails(self, schedule):
        with pytest.raises(GridBoundsError):
            schedule.requirement(Day.SATURDAY, -1)
        with pytest.raises(GridBoundsError):
            schedule.requirement(Day.SATURDAY, 96)

    def test_custom_staffing_levels(self):
        sched = Schedule(staffing_policy=DefaultStaffingPolicy(ramp_up=1, full=2, wind_down=1))
        sched.set_hours(Day.MONDAY, 10, 12)
        row = sched.requirements(Day.MONDAY)
        assert row[39] == 1
        assert row[40] == 2
        assert row[48] == 2
        assert row[49] == 1


class TestStoreWeek:
    """Tests for building the regular store week."""

    def test_default_hours(self):
        sched = create_week_schedule()
        assert sched.requirement(Day.SATURDAY, 36) == 4
        assert sched.requirement(Day.SUNDAY, 40) == 4
        assert sched.requirement(Day.SUNDAY, 36) == 0
        assert sched.requirements(Day.MONDAY) == [0] * QUARTERS_PER_DAY
        assert sched.requirement(Day.TUESDAY, 88) == 4

    def test_custom_hours(self):
        sched = create_week_schedule(StoreHours({Day.MONDAY: (8, 12)}))
        assert sched.requirement(Day.MONDAY, 32) == 4
        assert sched.requirements(Day.SATURDAY) == [0] * QUARTERS_PER_DAY

    def test_open_days(self):
        assert Day.MONDAY not in StoreHours.default().open_days()
        assert StoreHours.default().open_days()[0] is Day.SATURDAY


class TestAssignment:
    """Tests for assigning shifts."""

    @pytest.fixture
    def event(self):
        return Event("League", Day.SATURDAY, Time.from_hour(11), Time.from_hour(14), "Pkmn")

    @pytest.fixture
    def roster(self):
        return Roster([Employee("Matt"), Employee("Sam")])

    def test_assign_shift_verbatim(self):
        sched = Schedule()
        shift = sched.assign_shift("Matt", Day.MONDAY, Time.from_hour(20), Time.from_hour(9))
        assert sched.shifts_on(Day.MONDAY) == [shift]
        assert shift.start == Time.from_hour(20)

    def test_assign_event_pads_window(self, event):
        sched = Schedule()
        shift = sched.assign_event("Matt", event)
        assert shift.day is Day.SATURDAY
        assert shift.start == Time.from_string("10:30")
        assert shift.end == Time.from_hour(16)

    def test_assign_event_padding_before_midnight_fails(self):
        early = Event("Early", Day.SUNDAY, Time.from_string("0:15"), Time.from_hour(1))
        with pytest.raises(TimeRangeError):
            Schedule().assign_event("Matt", early)

    def test_assign_event_padding_past_midnight_fails(self):
        late = Event("Late", Day.SUNDAY, Time.from_hour(21), Time.from_hour(23))
        with pytest.raises(TimeRangeError):
            Schedule().assign_event("Matt", late)

    def test_required_shifts_one_per_employee(self, event, roster):
        event.add_employees(["Matt", "Sam"])
        sched = Schedule()
        sched.add_event(event)
        created = sched.assign_required_shifts(roster)
        assert [s.emp_id for s in created] == ["Matt", "Sam"]
        for shift in created:
            assert shift.start == event.start.retract(event.setup)
            assert shift.end == event.end.extend(event.breakdown)
        assert sched.shifts_on(Day.SATURDAY) == created

    def test_required_shifts_event_then_id_order(self, roster):
        first = Event("A", Day.SUNDAY, Time.from_hour(12), Time.from_hour(13))
        first.add_employees(["Sam", "Matt"])
        no_staff = Event("B", Day.SUNDAY, Time.from_hour(14), Time.from_hour(15))
        second = Event("C", Day.SATURDAY, Time.from_hour(12), Time.from_hour(13))
        second.add_employee("Matt")
        sched = Schedule()
        sched.add_events([first, no_staff, second])
        created = sched.assign_required_shifts(roster)
        assert [(s.emp_id, s.day) for s in created] == [
            ("Sam", Day.SUNDAY),
            ("Matt", Day.SUNDAY),
            ("Matt", Day.SATURDAY),
        ]

    def test_required_shifts_unknown_employee(self, event, roster):
        event.add_employees(["Matt", "Ghost"])
        sched = Schedule()
        sched.add_event(event)
        with pytest.raises(UnknownEmployee):
            sched.assign_required_shifts(roster)
        assert sched.all_shifts() == []

    def test_required_shifts_without_roster(self, event):
        event.add_employee("Anyone")
        sched = Schedule()
        sched.add_event(event)
        assert len(sched.assign_required_shifts()) == 1

    def test_shifts_for_spans_days(self):
        sched = Schedule()
        sched.assign_shift("Matt", Day.FRIDAY, Time.from_hour(9), Time.from_hour(10))
        sched.assign_shift("Sam", Day.SATURDAY, Time.from_hour(9), Time.from_hour(10))
        sched.assign_shift("Matt", Day.SATURDAY, Time.from_hour(11), Time.from_hour(13))
        assert [s.day for s in sched.shifts_for("Matt")] == [Day.SATURDAY, Day.FRIDAY]
        assert sched.total_quarters("Matt") == 12

    def test_remove_shift(self):
        sched = Schedule()
        shift = sched.assign_shift("Matt", Day.FRIDAY, Time.from_hour(9), Time.from_hour(10))
        sched.remove_shift(Day.FRIDAY, shift)
        assert sched.shifts_on(Day.FRIDAY) == []
        with pytest.raises(ValueError):
            sched.remove_shift(Day.FRIDAY, shift)

    def test_remove_shift_leaves_equal_shift_in_place(self):
        """Removing one of two identical shifts removes that object, not its twin."""
        sched = Schedule()
        first = sched.assign_shift("Matt", Day.FRIDAY, Time.from_hour(9), Time.from_hour(10))
        second = sched.assign_shift("Matt", Day.FRIDAY, Time.from_hour(9), Time.from_hour(10))
        assert first == second
        sched.remove_shift(Day.FRIDAY, second)
        assert len(sched.shifts_on(Day.FRIDAY)) == 1
        assert sched.shifts_on(Day.FRIDAY)[0] is first

    def test_remove_shifts_for(self):
        sched = Schedule()
        sched.assign_shift("Matt", Day.FRIDAY, Time.from_hour(9), Time.from_hour(10))
        sched.assign_shift("Matt", Day.SUNDAY, Time.from_hour(9), Time.from_hour(10))
        sched.assign_shift("Sam", Day.SUNDAY, Time.from_hour(9), Time.from_hour(10))
        assert sched.remove_shifts_for("Matt", Day.SUNDAY) == 1
        assert len(sched.shifts_for("Matt")) == 1
        assert sched.remove_shifts_for("Matt") == 1
        assert [s.emp_id for s in sched.all_shifts()] == ["Sam"]


class TestCoverage:
    """Tests for coverage accounting."""

    def test_single_shift(self):
        sched = Schedule()
        sched.assign_shift("Matt", Day.MONDAY, Time.from_quarter_index(36), Time.from_quarter_index(44))
        coverage = sched.coverage(Day.MONDAY)
        assert coverage[36:44] == [1] * 8
        assert not any(coverage[:36])
        assert not any(coverage[44:])

    def test_overlapping_shifts_add(self):
        sched = Schedule()
        sched.assign_shift("Matt", Day.MONDAY, Time.from_hour(9), Time.from_hour(11))
        sched.assign_shift("Sam", Day.MONDAY, Time.from_hour(10), Time.from_hour(12))
        coverage = sched.coverage(Day.MONDAY)
        assert coverage[36] == 1
        assert coverage[40] == 2
        assert coverage[47] == 1

    def test_event_consumes_staff_over_padded_window(self):
        sched = Schedule()
        event = Event("Class", Day.MONDAY, Time.from_hour(12), Time.from_hour(13))
        event.set_staffing_requirement(2)
        sched.add_event(event)
        coverage = sched.coverage(Day.MONDAY)
        assert coverage[45] == 0
        assert coverage[46:60] == [-2] * 14
        assert coverage[60] == 0

    def test_event_worker_nets_to_zero(self):
        sched = Schedule()
        event = Event("Class", Day.MONDAY, Time.from_hour(12), Time.from_hour(13))
        event.add_employee("Matt")
        sched.add_event(event)
        sched.assign_required_shifts()
        assert sched.coverage(Day.MONDAY) == [0] * QUARTERS_PER_DAY

    def test_other_days_unaffected(self):
        sched = Schedule()
        sched.assign_shift("Matt", Day.MONDAY, Time.from_hour(9), Time.from_hour(11))
        assert sched.coverage(Day.TUESDAY) == [0] * QUARTERS_PER_DAY
