# src/medication_schedule/schedule/__init__.py
"""
Course scheduling: slot layout, edit normalization, intake tracking and
reminder planning.
"""

from .builder import ScheduleBuilder, slot_positions
from .editor import normalize_course
from .intake import IntakeTracker, IntakeKey, PlannedIntake
from .reminders import ReminderPlanner, ReminderRequest

__all__ = [
    "ScheduleBuilder",
    "slot_positions",
    "normalize_course",
    "IntakeTracker",
    "IntakeKey",
    "PlannedIntake",
    "ReminderPlanner",
    "ReminderRequest",
]
