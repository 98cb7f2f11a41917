# ============================================================================
# src/medication_schedule/schedule/editor.py
# ============================================================================
"""
Course Normalization

Restores course invariants after medications, frequencies or slot times
were edited:
- total duration equals the longest medication duration
- slots exist for 1..max(times_per_day), keeping known times
- every medication references existing slots only
- no medication is left without slots, no slot is left without medications
- slot indexes are contiguous from 1
"""

import logging
from dataclasses import replace
from datetime import time
from typing import Dict, List, Optional

from ..config import ScheduleSettings, schedule_settings
from ..core.models import Course, CourseMedication, DoseSlot

logger = logging.getLogger(__name__)


def _fallback_time(index_in_day: int, base_hour: int) -> time:
    return time(hour=(base_hour + index_in_day - 1) % 24)


def _regenerate_slots(
    course: Course,
    slot_times: Dict[int, time],
    settings: ScheduleSettings,
) -> List[DoseSlot]:
    max_times = max((m.times_per_day for m in course.medications), default=0)

    slots = []
    for index in range(1, max_times + 1):
        if index in slot_times:
            slots.append(DoseSlot(index_in_day=index, time=slot_times[index]))
            continue

        existing = course.slot(index)
        if existing is not None:
            slots.append(replace(existing))
        else:
            slots.append(DoseSlot(
                index_in_day=index,
                time=_fallback_time(index, settings.EDIT_FALLBACK_HOUR),
            ))
    return slots


def normalize_course(
    course: Course,
    slot_times: Optional[Dict[int, time]] = None,
    settings: Optional[ScheduleSettings] = None,
) -> Course:
    """
    Return a normalized copy of an edited course.

    Args:
        course: Course after user edits (left unchanged)
        slot_times: Times chosen for slot indexes during the edit
        settings: Schedule settings (defaults to the global instance)

    Returns:
        New Course with the same id
    """
    settings = settings or schedule_settings
    slot_times = slot_times or {}

    total_duration = max((m.duration_in_days for m in course.medications), default=0)
    slots = _regenerate_slots(course, slot_times, settings)

    valid_indexes = {slot.index_in_day for slot in slots}
    medication_ids = {m.id for m in course.medications}

    pruned: List[CourseMedication] = []
    for cm in course.course_medications:
        if cm.medication_id not in medication_ids:
            continue
        indexes = sorted({i for i in cm.slot_indexes if i in valid_indexes})
        if indexes:
            pruned.append(replace(cm, slot_indexes=indexes))

    used_indexes = {i for cm in pruned for i in cm.slot_indexes}
    used_slots = sorted(
        (slot for slot in slots if slot.index_in_day in used_indexes),
        key=lambda slot: slot.index_in_day,
    )

    mapping = {slot.index_in_day: new_index for new_index, slot in enumerate(used_slots, start=1)}
    renumbered_slots = [replace(slot, index_in_day=mapping[slot.index_in_day]) for slot in used_slots]
    remapped = [
        replace(cm, slot_indexes=sorted(mapping[i] for i in cm.slot_indexes))
        for cm in pruned
    ]

    dropped = len(slots) - len(renumbered_slots)
    if dropped:
        logger.debug(f"Dropped {dropped} unused slots from course {course.id}")

    return replace(
        course,
        medications=list(course.medications),
        dose_slots=renumbered_slots,
        course_medications=remapped,
        total_duration_in_days=total_duration,
    )
