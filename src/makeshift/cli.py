"""Command-line interface for the makeshift store scheduler."""

import argparse
import logging
import random
import sys
from typing import Optional

from makeshift.domain.models import Day, Event
from makeshift.domain.roster import Employee, Roster
from makeshift.domain.time import Time
from makeshift.output.pdf_generator import PDFGenerator
from makeshift.output.text_report import TextReport
from makeshift.scheduling.schedule import Schedule
from makeshift.scheduling.week import StoreHours, create_week_schedule


def create_sample_roster() -> Roster:
    """Create a small sample roster."""
    matt = Employee("Matt")
    matt.can_do_magic()
    matt.can_do_pkmn()

    sam = Employee("Sam")
    sam.can_do_pkmn()
    sam.cant_work(Day.SUNDAY)

    jess = Employee("Jess")
    jess.can_do_kids_magic()
    jess.change_hours(20, 30)

    ana = Employee("Ana")
    ana.is_class_only()

    rory = Employee("Rory")
    rory.can_only_close()
    rory.cant_work(Day.SATURDAY)

    return Roster([matt, sam, jess, ana, rory])


def create_sample_events() -> list[Event]:
    """Create a week of sample store events."""
    pkmn = Event("Pokemon League", Day.SATURDAY, Time.from_hour(11), Time.from_hour(14), "Pkmn")
    pkmn.add_employees(["Sam", "Matt"])

    fnm = Event("Friday Night Magic", Day.FRIDAY, Time.from_string("18:00"),
                Time.from_string("21:00"), "Magic")
    fnm.add_employee("Matt")

    kids = Event("Kids' Magic", Day.SUNDAY, Time.from_hour(12), Time.from_hour(14), "Kids Magic")
    kids.add_employee("Jess")

    pottery = Event("Pottery Class", Day.WEDNESDAY, Time.from_hour(16), Time.from_hour(18), "Class")
    pottery.add_employee("Ana")
    pottery.set_setup_breakdown(2, 4)

    party = Event("Game Night", Day.THURSDAY, Time.from_hour(18), Time.from_string("20:30"),
                  "Adult Party")
    party.set_staffing_requirement(2)

    return [pkmn, fnm, kids, pottery, party]


def build_demo_schedule(seed: Optional[int] = None) -> tuple[Schedule, Roster]:
    """Build the regular store week with sample events and required shifts."""
    roster = create_sample_roster()
    schedule = create_week_schedule(StoreHours.default(), rng=random.Random(seed))
    schedule.add_events(create_sample_events())
    schedule.assign_required_shifts(roster)
    return schedule, roster


def run_demo(
    seed: Optional[int] = None,
    expand: Optional[list[str]] = None,
    output_path: Optional[str] = None,
    twelve_hour: bool = False,
) -> bool:
    """Run the demo week and print the report.

    Returns:
        True if the resulting schedule is valid.
    """
    schedule, roster = build_demo_schedule(seed)
    for emp_id in expand or []:
        schedule.expand_shifts(emp_id)

    report = TextReport(twelve_hour=twelve_hour)
    print("Roster:")
    print(report.roster(roster))
    print("\nEvents:")
    print(report.events(schedule))
    print("\nShifts:")
    print(report.shifts(schedule))

    result = schedule.validate(roster)
    print()
    print(report.validation(result))

    if output_path:
        print(f"\nGenerating PDF: {output_path}")
        PDFGenerator().generate(schedule, output_path, roster)
        print("  PDF created successfully!")

    return result.is_valid


def run_requirements(twelve_hour: bool = False) -> None:
    """Print the staffing requirements for the regular store week."""
    schedule = create_week_schedule(StoreHours.default())
    print(TextReport(twelve_hour=twelve_hour).requirements(schedule))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="makeshift - weekly store staffing scheduler",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every scheduling step",
    )
    parser.add_argument(
        "--12h",
        dest="twelve_hour",
        action="store_true",
        help="Show times on a 12-hour clock",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    demo_parser = subparsers.add_parser("demo", help="Schedule a sample week")
    demo_parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for shift expansion",
    )
    demo_parser.add_argument(
        "--expand", "-e",
        action="append",
        default=[],
        metavar="ID",
        help="Expand this employee's shifts (repeatable)",
    )
    demo_parser.add_argument(
        "--output", "-o",
        type=str,
        help="Output PDF path",
    )

    subparsers.add_parser("requirements", help="Print the staffing requirements")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "demo":
        valid = run_demo(args.seed, args.expand, args.output, args.twelve_hour)
        return 0 if valid else 1
    elif args.command == "requirements":
        run_requirements(args.twelve_hour)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
