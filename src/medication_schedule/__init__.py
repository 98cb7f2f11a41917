# ============================================================================
# src/medication_schedule/__init__.py
# ============================================================================
"""
Medication Schedule Engine

Parses free-form Russian prescriptions (typed or dictated) into
structured medication items and lays them out as a daily course:

    text -> normalize -> segment -> extract fields -> MedicationItem[]
         -> ScheduleBuilder -> Course (dose slots, reminders, intake tracking)
"""

__version__ = "0.1.0"

from .core import (
    IntakeStatus,
    FrequencySource,
    MedicationItem,
    DoseSlot,
    CourseMedication,
    Course,
)
from .parser import PrescriptionParser, parse_prescription, normalize, segment
from .schedule import (
    ScheduleBuilder,
    normalize_course,
    IntakeTracker,
    ReminderPlanner,
)

__all__ = [
    "IntakeStatus",
    "FrequencySource",
    "MedicationItem",
    "DoseSlot",
    "CourseMedication",
    "Course",
    "PrescriptionParser",
    "parse_prescription",
    "normalize",
    "segment",
    "ScheduleBuilder",
    "normalize_course",
    "IntakeTracker",
    "ReminderPlanner",
]
