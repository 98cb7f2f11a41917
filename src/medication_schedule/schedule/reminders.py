# ============================================================================
# src/medication_schedule/schedule/reminders.py
# ============================================================================
"""
Reminder Planning

Computes what a notification collaborator should schedule for a course:
one daily repeating reminder per dose slot. Delivery is out of scope;
identifiers are stable so a course's reminders can be replaced or
cancelled by prefix.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from ..core.models import Course

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Приём лекарств"
EMPTY_SLOT_BODY = "Проверьте расписание приёма"


@dataclass(frozen=True)
class ReminderRequest:
    identifier: str
    title: str
    body: str
    fire_at: datetime
    repeats_daily: bool = True

    @property
    def hour(self) -> int:
        return self.fire_at.hour

    @property
    def minute(self) -> int:
        return self.fire_at.minute

    def to_dict(self):
        return {
            "identifier": self.identifier,
            "title": self.title,
            "body": self.body,
            "fire_at": self.fire_at.isoformat(),
            "repeats_daily": self.repeats_daily,
        }


class ReminderPlanner:
    """Plans daily reminders for the dose slots of a course."""

    @staticmethod
    def prefix_for(course_id: uuid.UUID) -> str:
        return f"course-{course_id}-"

    @classmethod
    def identifier_for(cls, course_id: uuid.UUID, slot_id: uuid.UUID) -> str:
        return f"{cls.prefix_for(course_id)}slot-{slot_id}"

    def plan(self, course: Course, now: Optional[datetime] = None) -> List[ReminderRequest]:
        """
        Build reminder requests for a course.

        Args:
            course: Course to remind about
            now: Reference moment (defaults to the current local time)

        Returns:
            One request per slot; empty when reminders are disabled
        """
        if not course.reminders_enabled:
            logger.debug(f"Reminders disabled for course {course.id}")
            return []

        now = now or datetime.now()
        requests = []

        for slot in course.dose_slots:
            medications = course.medications_for_slot(slot.index_in_day)

            if course.name:
                title_name = course.name
            elif medications:
                title_name = medications[0].name
            else:
                title_name = DEFAULT_TITLE

            if medications:
                names = ", ".join(m.name for m in medications)
            else:
                names = EMPTY_SLOT_BODY

            fire_at = datetime.combine(now.date(), slot.time)
            if course.reminder_offset_minutes > 0:
                fire_at -= timedelta(minutes=course.reminder_offset_minutes)

            # Never schedule in the past
            if fire_at < now:
                fire_at += timedelta(days=1)

            requests.append(ReminderRequest(
                identifier=self.identifier_for(course.id, slot.id),
                title=f"Курс: {title_name}",
                body=f"Время приёма: {names}",
                fire_at=fire_at,
            ))

        logger.info(f"Planned {len(requests)} reminders for course {course.id}")
        return requests
