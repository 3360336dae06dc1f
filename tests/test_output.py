"""Tests for text and PDF output."""

import pytest

from makeshift.domain.models import Day, Event
from makeshift.domain.roster import Employee, Roster
from makeshift.domain.time import Time
from makeshift.output.pdf_generator import PDFGenerator
from makeshift.output.text_report import TextReport
from makeshift.scheduling.schedule import Schedule


@pytest.fixture
def schedule():
    sched = Schedule()
    sched.set_hours(Day.SATURDAY, 9, 21)
    sched.assign_shift("Matt", Day.SATURDAY, Time.from_hour(9), Time.from_hour(17))
    event = Event("League", Day.SATURDAY, Time.from_hour(11), Time.from_hour(14), "Pkmn")
    event.add_employee("Matt")
    sched.add_event(event)
    return sched


@pytest.fixture
def roster():
    matt = Employee("Matt")
    matt.can_do_pkmn()
    return Roster([matt])


class TestTextReport:
    """Tests for TextReport."""

    def test_requirements(self, schedule):
        text = TextReport().requirements(schedule)
        assert "Saturday\n8:45 - 3\n9:00 - 4" in text
        assert "21:45 - 3" in text
        assert "22:00" not in text

    def test_shifts(self, schedule):
        text = TextReport().shifts(schedule)
        assert "Saturday\n=========\nMatt => 9:00 - 17:00" in text
        assert "Friday" in text

    def test_twelve_hour_shifts(self, schedule):
        assert "Matt => 9:00a - 5:00p" in TextReport(twelve_hour=True).shifts(schedule)

    def test_events(self, schedule):
        assert "Sat 11:00-14:00 League [Pkmn] x1: Matt" in TextReport().events(schedule)

    def test_roster(self, roster):
        text = TextReport().roster(roster)
        assert "=== ID: Matt ===" in text
        assert "Hours range: 37 - 39" in text
        assert "- Pokemon" in text
        assert "Can work: Sat Sun Mon Tue Wed Thu Fri" in text

    def test_validation_summary(self, schedule, roster):
        result = schedule.validate(roster)
        text = TextReport().validation(result, limit=1)
        assert text.startswith(f"Validation: FAILED ({len(result.errors)} errors)")
        assert "more errors" in text

    def test_write(self, schedule, tmp_path):
        path = tmp_path / "shifts.txt"
        report = TextReport()
        report.write(report.shifts(schedule), path)
        assert "Matt => 9:00 - 17:00" in path.read_text()


class TestPDFGenerator:
    """Tests for PDFGenerator."""

    def test_buffer_is_pdf(self, schedule, roster):
        buffer = PDFGenerator().generate_to_buffer(schedule, roster)
        assert buffer.read(4) == b"%PDF"

    def test_empty_schedule(self):
        buffer = PDFGenerator().generate_to_buffer(Schedule())
        assert buffer.read(4) == b"%PDF"

    def test_generate_file(self, schedule, tmp_path):
        path = tmp_path / "week.pdf"
        PDFGenerator().generate(schedule, path)
        assert path.read_bytes().startswith(b"%PDF")

    def test_many_events_continue_on_new_page(self, schedule):
        busy = Schedule()
        busy.set_hours(Day.SATURDAY, 9, 21)
        for i in range(40):
            busy.add_event(
                Event(f"Draft {i}", Day.SATURDAY, Time.from_hour(10), Time.from_hour(12), "Magic")
            )
        crowded = PDFGenerator().generate_to_buffer(busy).getvalue()
        single = PDFGenerator().generate_to_buffer(schedule).getvalue()
        assert crowded.startswith(b"%PDF")
        assert crowded.count(b"/Type /Page") > single.count(b"/Type /Page")
