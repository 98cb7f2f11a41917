# src/medication_schedule/core/__init__.py

from .enums import IntakeStatus, FrequencySource
from .models import MedicationItem, DoseSlot, CourseMedication, Course

__all__ = [
    "IntakeStatus",
    "FrequencySource",
    "MedicationItem",
    "DoseSlot",
    "CourseMedication",
    "Course",
]
