"""Scheduling engine for the store week."""

from makeshift.scheduling.expander import ShiftExpander
from makeshift.scheduling.schedule import Schedule
from makeshift.scheduling.week import StoreHours, create_week_schedule

__all__ = [
    "Schedule",
    "ShiftExpander",
    "StoreHours",
    "create_week_schedule",
]
