# ============================================================================
# src/medication_schedule/core/models.py
# ============================================================================
"""
Domain model
- MedicationItem: one parsed or manually entered medication
- DoseSlot: a time-of-day position shared by medications
- CourseMedication: which slots a medication is taken at
- Course: aggregate of medications, slots and reminder settings
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional
import uuid


@dataclass
class MedicationItem:
    name: str
    dosage: str
    times_per_day: int = 1
    duration_in_days: int = 7
    comment: Optional[str] = None

    # Interval-derived frequency when it disagrees with an explicit count.
    # Informational: the caller decides whether to ask the user.
    alternative_times_per_day: Optional[int] = None

    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def has_frequency_conflict(self) -> bool:
        return (
            self.alternative_times_per_day is not None
            and self.alternative_times_per_day != self.times_per_day
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "dosage": self.dosage,
            "times_per_day": self.times_per_day,
            "duration_in_days": self.duration_in_days,
            "comment": self.comment,
            "alternative_times_per_day": self.alternative_times_per_day,
        }


@dataclass
class DoseSlot:
    index_in_day: int  # 1-based, dense within a course
    time: time
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "index_in_day": self.index_in_day,
            "time": self.time.strftime("%H:%M"),
        }


@dataclass
class CourseMedication:
    medication_id: uuid.UUID
    slot_indexes: List[int] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "medication_id": str(self.medication_id),
            "slot_indexes": list(self.slot_indexes),
        }


@dataclass
class Course:
    start_date: date
    medications: List[MedicationItem] = field(default_factory=list)
    dose_slots: List[DoseSlot] = field(default_factory=list)
    course_medications: List[CourseMedication] = field(default_factory=list)
    total_duration_in_days: int = 0
    reminders_enabled: bool = True
    reminder_offset_minutes: int = 0
    name: Optional[str] = None

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def end_date(self) -> date:
        """First day after the course (exclusive bound)."""
        return self.start_date + timedelta(days=self.total_duration_in_days)

    def is_active_on(self, day: date) -> bool:
        if self.total_duration_in_days <= 0:
            return False
        return self.start_date <= day < self.end_date

    def slot(self, index_in_day: int) -> Optional[DoseSlot]:
        for slot in self.dose_slots:
            if slot.index_in_day == index_in_day:
                return slot
        return None

    def medications_for_slot(self, index_in_day: int) -> List[MedicationItem]:
        """Medications taken at a slot, in course order."""
        medication_ids = {
            cm.medication_id
            for cm in self.course_medications
            if index_in_day in cm.slot_indexes
        }
        return [m for m in self.medications if m.id in medication_ids]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "created_at": self.created_at.isoformat(),
            "start_date": self.start_date.isoformat(),
            "total_duration_in_days": self.total_duration_in_days,
            "reminders_enabled": self.reminders_enabled,
            "reminder_offset_minutes": self.reminder_offset_minutes,
            "medications": [m.to_dict() for m in self.medications],
            "dose_slots": [s.to_dict() for s in self.dose_slots],
            "course_medications": [cm.to_dict() for cm in self.course_medications],
        }
