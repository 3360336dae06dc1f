"""PDF generation for the weekly schedule.

This module creates a printable PDF with:
- One page per scheduled day showing each shift as a bar
- A requirement strip and a coverage strip above the shifts
- A summary page of weekly hours per employee
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from makeshift.domain.models import Day, Shift
from makeshift.domain.roster import Roster
from makeshift.domain.time import QUARTERS_PER_DAY, QUARTERS_PER_HOUR, Time
from makeshift.scheduling.schedule import Schedule

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "shift": (0.4, 0.6, 0.8),  # Blue
    "event": (0.8, 0.6, 0.2),  # Orange
    "covered": (0.4, 0.7, 0.4),  # Green
    "short": (0.85, 0.4, 0.4),  # Red
    "closed": (0.95, 0.95, 0.95),  # Light gray
}


class PDFGenerator:
    """Generates printable PDF schedules for a store week.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(schedule, "week.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        schedule: Schedule,
        output_path: Union[str, Path],
        roster: Optional[Roster] = None,
    ) -> None:
        """Generate the PDF and save it to a file.

        Args:
            schedule: The week to render.
            output_path: Path to save the PDF.
            roster: If given, the summary page shows each employee's hour bounds.
        """
        canvas = _canvas_module()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw(c, schedule, roster)
        c.save()

    def generate_to_buffer(
        self,
        schedule: Schedule,
        roster: Optional[Roster] = None,
    ) -> BytesIO:
        """Generate the PDF and return it as a bytes buffer."""
        canvas = _canvas_module()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw(c, schedule, roster)
        c.save()
        buffer.seek(0)
        return buffer

    def _draw(self, c, schedule: Schedule, roster: Optional[Roster]) -> None:
        for day in Day:
            window = self._day_window(schedule, day)
            if window is not None:
                self._draw_day_page(c, schedule, day, window)
        self._draw_summary_page(c, schedule, roster)

    def _day_window(self, schedule: Schedule, day: Day) -> Optional[tuple[int, int]]:
        """Hour-aligned slot range covering the day's requirements and shifts."""
        slots = [qi for qi, req in enumerate(schedule.requirements(day)) if req > 0]
        for shift in schedule.shifts_on(day):
            slots.extend([shift.start.qi, shift.end.qi - 1])
        if not slots:
            return None
        first = (min(slots) // QUARTERS_PER_HOUR) * QUARTERS_PER_HOUR
        last = min(
            QUARTERS_PER_DAY,
            (max(slots) // QUARTERS_PER_HOUR + 1) * QUARTERS_PER_HOUR,
        )
        return first, last

    def _draw_day_page(
        self,
        c,
        schedule: Schedule,
        day: Day,
        window: tuple[int, int],
    ) -> None:
        """Draw one day's requirements, coverage and shifts."""
        first, last = window
        timeline_left = self.margin + 110  # Space for names
        timeline_width = self.page_width - self.margin - 20 - timeline_left
        slot_width = timeline_width / (last - first)
        row_height = 18

        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, f"{day.label} Schedule")
        shifts = sorted(schedule.shifts_on(day), key=lambda s: (s.start.qi, s.emp_id))
        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 35,
            f"Shifts: {len(shifts)}    Events: {len(schedule.events_on(day))}",
        )

        y = self.page_height - self.margin - 70
        self._draw_time_axis(c, first, last, timeline_left, y, slot_width)

        required = schedule.requirements(day)
        coverage = schedule.coverage(day)

        y -= row_height + 4
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 8)
        c.drawString(self.margin, y + 5, "Required")
        c.drawString(self.margin, y - row_height + 5, "Coverage")
        c.setFont("Helvetica", 6)
        for qi in range(first, last):
            x = timeline_left + (qi - first) * slot_width
            if required[qi] == 0:
                c.setFillColorRGB(*COLORS["closed"])
            else:
                c.setFillColorRGB(*COLORS["shift"])
            c.rect(x, y, slot_width, row_height - 4, fill=1, stroke=0)
            color = COLORS["covered"] if coverage[qi] >= required[qi] else COLORS["short"]
            c.setFillColorRGB(*color)
            c.rect(x, y - row_height, slot_width, row_height - 4, fill=1, stroke=0)
            if qi % 2 == 0:
                c.setFillColorRGB(0, 0, 0)
                c.drawCentredString(x + slot_width / 2, y + 4, str(required[qi]))
                c.drawCentredString(x + slot_width / 2, y - row_height + 4, str(coverage[qi]))

        y -= 2 * row_height + 6
        for event in schedule.events_on(day):
            if y < self.margin + row_height:
                c.showPage()
                y = self.page_height - self.margin - 40
            self._draw_bar(
                c, event.name[:18], event.padded_start(), event.padded_end(),
                first, timeline_left, slot_width, y, row_height - 4, COLORS["event"],
            )
            y -= row_height
        for shift in shifts:
            if y < self.margin + row_height:
                c.showPage()
                y = self.page_height - self.margin - 40
            self._draw_shift_row(c, shift, first, timeline_left, slot_width, y, row_height - 4)
            y -= row_height

        c.showPage()

    def _draw_time_axis(
        self,
        c,
        first: int,
        last: int,
        x: float,
        y: float,
        slot_width: float,
    ) -> None:
        """Draw time axis with hour markers."""
        c.setFont("Helvetica", 8)
        c.setStrokeColorRGB(0.7, 0.7, 0.7)
        for qi in range(first, last + 1, QUARTERS_PER_HOUR):
            slot_x = x + (qi - first) * slot_width
            c.line(slot_x, y, slot_x, y - 5)
            if qi < last:
                c.drawCentredString(slot_x, y + 5, Time(qi).to_12h_string())

    def _draw_shift_row(
        self,
        c,
        shift: Shift,
        first: int,
        timeline_x: float,
        slot_width: float,
        y: float,
        height: float,
    ) -> None:
        label = f"{shift.emp_id[:12]} {shift.start}-{shift.end}"
        self._draw_bar(
            c, label, shift.start, shift.end,
            first, timeline_x, slot_width, y, height, COLORS["shift"],
        )

    def _draw_bar(
        self,
        c,
        label: str,
        start: Time,
        end: Time,
        first: int,
        timeline_x: float,
        slot_width: float,
        y: float,
        height: float,
        color: tuple[float, float, float],
    ) -> None:
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 8)
        c.drawString(self.margin, y + height / 2 - 3, label)

        bx = timeline_x + max(0, start.qi - first) * slot_width
        bw = max(0, end.qi - max(start.qi, first)) * slot_width
        c.setFillColorRGB(*color)
        c.rect(bx, y, bw, height, fill=1, stroke=0)
        c.setStrokeColorRGB(0.3, 0.3, 0.3)
        c.setLineWidth(0.5)
        c.rect(bx, y, bw, height, fill=0, stroke=1)

    def _draw_summary_page(self, c, schedule: Schedule, roster: Optional[Roster]) -> None:
        """Draw weekly hours per employee."""
        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, "Weekly Summary")

        emp_ids = {shift.emp_id for shift in schedule.all_shifts()}
        if roster is not None:
            emp_ids.update(roster.ids())

        y = self.page_height - self.margin - 50
        c.setFont("Helvetica", 10)
        if not emp_ids:
            c.drawString(self.margin, y, "No shifts assigned.")
        for emp_id in sorted(emp_ids):
            hours = schedule.total_quarters(emp_id) / QUARTERS_PER_HOUR
            line = f"{emp_id}: {hours:g} h"
            if roster is not None and emp_id in roster:
                employee = roster.get(emp_id)
                line += f" (range {employee.min_hours()} - {employee.max_hours()})"
            c.drawString(self.margin + 20, y, line)
            y -= 15
            if y < self.margin:
                c.showPage()
                c.setFont("Helvetica", 10)
                y = self.page_height - self.margin - 20

        c.showPage()


def _canvas_module():
    try:
        from reportlab.pdfgen import canvas
    except ImportError:
        raise ImportError(
            "reportlab is required for PDF generation. "
            "Install with: pip install reportlab"
        )
    return canvas
