# ============================================================================
# src/medication_schedule/schedule/intake.py
# ============================================================================
"""
Intake Tracking

In-memory record of what the user did with each planned intake, keyed by
(course, medication, slot, calendar day). Unrecorded intakes are pending.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Union

from ..core.enums import IntakeStatus
from ..core.models import Course, DoseSlot, MedicationItem

logger = logging.getLogger(__name__)

DayLike = Union[date, datetime]


def to_day(value: DayLike) -> date:
    """Truncate a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class IntakeKey:
    course_id: uuid.UUID
    medication_id: uuid.UUID
    slot_index: int
    day: date

    @classmethod
    def create(
        cls,
        course_id: uuid.UUID,
        medication_id: uuid.UUID,
        slot_index: int,
        day: DayLike,
    ) -> "IntakeKey":
        return cls(course_id, medication_id, slot_index, to_day(day))


@dataclass(frozen=True)
class PlannedIntake:
    """One medication due at one slot on a given day."""
    course: Course
    slot: DoseSlot
    medication: MedicationItem

    @property
    def time(self) -> time:
        return self.slot.time


def iter_slot_medications(course: Course):
    """Yield (slot, medication) pairs in slot order, then course order."""
    for slot in course.dose_slots:
        for medication in course.medications_for_slot(slot.index_in_day):
            yield slot, medication


class IntakeTracker:
    """
    Records intake statuses and derives progress.

    Usage:
        tracker = IntakeTracker()
        tracker.mark(course.id, medication.id, 1, date.today(), IntakeStatus.TAKEN)
        tracker.day_progress(course, date.today())
    """

    def __init__(self):
        self._statuses: Dict[IntakeKey, IntakeStatus] = {}

    def __len__(self) -> int:
        return len(self._statuses)

    def mark(
        self,
        course_id: uuid.UUID,
        medication_id: uuid.UUID,
        slot_index: int,
        day: DayLike,
        status: IntakeStatus,
    ) -> IntakeKey:
        key = IntakeKey.create(course_id, medication_id, slot_index, day)
        self._statuses[key] = IntakeStatus(status)
        logger.debug(f"Intake {key} -> {self._statuses[key].value}")
        return key

    def status(
        self,
        course_id: uuid.UUID,
        medication_id: uuid.UUID,
        slot_index: int,
        day: DayLike,
    ) -> IntakeStatus:
        key = IntakeKey.create(course_id, medication_id, slot_index, day)
        return self._statuses.get(key, IntakeStatus.PENDING)

    def clear_course(self, course_id: uuid.UUID) -> int:
        """Forget every status recorded for a course. Returns how many were removed."""
        keys = [key for key in self._statuses if key.course_id == course_id]
        for key in keys:
            del self._statuses[key]
        return len(keys)

    def day_progress(self, course: Course, day: DayLike) -> float:
        """Share of the day's planned intakes marked taken (0.0 when nothing is planned)."""
        day = to_day(day)
        total = 0
        taken = 0

        for slot, medication in iter_slot_medications(course):
            total += 1
            status = self.status(course.id, medication.id, slot.index_in_day, day)
            if status == IntakeStatus.TAKEN:
                taken += 1

        if total == 0:
            return 0.0
        return taken / total

    @staticmethod
    def overall_progress(course: Course, today: DayLike) -> float:
        """Elapsed share of the course by calendar days, clamped to [0, 1]."""
        total_days = course.total_duration_in_days
        if total_days <= 0:
            return 0.0

        days_passed = max(0, (to_day(today) - course.start_date).days)
        return min(days_passed, total_days) / total_days

    @staticmethod
    def planned_intakes(courses: Iterable[Course], day: DayLike) -> List[PlannedIntake]:
        """All intakes due on a day across active courses, sorted by slot time."""
        day = to_day(day)
        result = [
            PlannedIntake(course=course, slot=slot, medication=medication)
            for course in courses
            if course.is_active_on(day)
            for slot, medication in iter_slot_medications(course)
        ]
        return sorted(result, key=lambda intake: intake.time)
