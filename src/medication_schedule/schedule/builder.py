# ============================================================================
# src/medication_schedule/schedule/builder.py
# ============================================================================
"""
Schedule Builder

Turns parsed medications into a Course with shared daily dose slots.

Slot layout:
- Number of slots = highest times_per_day among the medications
- Interval regimens (anyone taken more than 6 times a day) start at 08:00
  and step by 24 // slots hours, wrapping past midnight
- Otherwise one slot sits at 09:00, several are spread evenly 08:00-20:00

Each medication is then placed on slots matching its own frequency.
"""

import logging
import math
from datetime import date, time
from typing import Iterable, List, Optional, Sequence

from ..config import ScheduleSettings, schedule_settings
from ..core.models import Course, CourseMedication, DoseSlot, MedicationItem
from ..utils.exceptions import EmptyCourseError

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _time_from_minutes(minutes: int) -> time:
    minutes %= MINUTES_PER_DAY
    return time(hour=minutes // 60, minute=minutes % 60)


def slot_positions(times_per_day: int, total_slots: int) -> List[int]:
    """
    1-based slot indexes a medication is taken at.

    Examples (total_slots=3):
        3 -> [1, 2, 3]
        1 -> [2]
        2 -> [1, 3]
    """
    if total_slots <= 0:
        return []

    if times_per_day >= total_slots:
        return list(range(1, total_slots + 1))

    if times_per_day <= 1:
        return [1 + round_half_up((total_slots - 1) / 2)]

    if times_per_day == 2:
        return [1, total_slots]

    chosen = set()
    for i in range(times_per_day):
        position = round_half_up(i * (total_slots - 1) / (times_per_day - 1))
        chosen.add(1 + min(total_slots - 1, max(0, position)))
    return sorted(chosen)


class ScheduleBuilder:
    """
    Builds a Course from medication items.

    Usage:
        builder = ScheduleBuilder()
        course = builder.build_course(items, start_date=date.today())
    """

    def __init__(self, settings: Optional[ScheduleSettings] = None):
        self.settings = settings or schedule_settings
        self.logger = logging.getLogger(__name__)

    def is_interval_regimen(self, medications: Iterable[MedicationItem]) -> bool:
        threshold = self.settings.INTERVAL_REGIMEN_THRESHOLD
        return any(m.times_per_day > threshold for m in medications)

    def slot_times(self, total_slots: int, interval_based: bool = False) -> List[time]:
        """Default times for slots 1..total_slots."""
        if total_slots <= 0:
            return []

        start_minutes = self.settings.DAY_START_HOUR * 60

        if interval_based:
            step_hours = max(1, 24 // total_slots)
            return [
                _time_from_minutes(start_minutes + i * step_hours * 60)
                for i in range(total_slots)
            ]

        if total_slots == 1:
            return [time(hour=self.settings.SINGLE_SLOT_HOUR)]

        span = (self.settings.DAY_END_HOUR - self.settings.DAY_START_HOUR) * 60
        return [
            _time_from_minutes(start_minutes + round_half_up(i * span / (total_slots - 1)))
            for i in range(total_slots)
        ]

    def build_slots(self, medications: Sequence[MedicationItem]) -> List[DoseSlot]:
        total_slots = max((m.times_per_day for m in medications), default=0)
        times = self.slot_times(total_slots, self.is_interval_regimen(medications))
        return [DoseSlot(index_in_day=i, time=t) for i, t in enumerate(times, start=1)]

    def build_course(
        self,
        medications: Sequence[MedicationItem],
        start_date: Optional[date] = None,
        name: Optional[str] = None,
    ) -> Course:
        """
        Build a course with slots and medication placement.

        Args:
            medications: Items from the parser or manual entry
            start_date: First day of the course (defaults to today)
            name: Optional display name

        Returns:
            New Course

        Raises:
            EmptyCourseError: no medications given
        """
        if not medications:
            raise EmptyCourseError("Cannot build a course without medications")

        medications = list(medications)
        slots = self.build_slots(medications)

        course_medications = [
            CourseMedication(
                medication_id=medication.id,
                slot_indexes=slot_positions(medication.times_per_day, len(slots)),
            )
            for medication in medications
        ]

        total_duration = max(m.duration_in_days for m in medications)

        course = Course(
            start_date=start_date or date.today(),
            medications=medications,
            dose_slots=slots,
            course_medications=course_medications,
            total_duration_in_days=total_duration,
            reminders_enabled=self.settings.DEFAULT_REMINDERS_ENABLED,
            reminder_offset_minutes=self.settings.DEFAULT_REMINDER_OFFSET_MINUTES,
            name=name,
        )

        self.logger.info(
            f"Built course with {len(medications)} medications, "
            f"{len(slots)} daily slots, {total_duration} days",
            extra={
                "course_id": str(course.id),
                "medication_count": len(medications),
                "slot_count": len(slots),
            },
        )
        return course
