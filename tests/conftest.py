# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import date, datetime, time

from medication_schedule.core import (
    Course,
    CourseMedication,
    DoseSlot,
    MedicationItem,
)


@pytest.fixture
def nasal_drops_text():
    """Single-line ENT prescription"""
    return "Називин 2 капли 3 раза в день 7 дней, в каждый носовой ход"


@pytest.fixture
def two_medication_text():
    """Two medications separated by a blank line"""
    return (
        "Називин 2 капли 3 раза в день 7 дней\n"
        "\n"
        "Парацетамол по 1 таблетке каждые 6 часов"
    )


@pytest.fixture
def clinical_note_text():
    """Dictated clinical note with service lines and a recommendations header"""
    return (
        "Жалобы: заложенность носа\n"
        "Диагноз: острый ринит\n"
        "Рекомендации:\n"
        "1. Називин 2 капли 3 раза в день\n"
        "курс 5-7 дней\n"
        "2. Аква марис спрей 2 впрыска 4 раза в день\n"
        "на 10 дней"
    )


@pytest.fixture
def start_day():
    return date(2024, 3, 1)


@pytest.fixture
def morning():
    """Reference moment before every default slot"""
    return datetime(2024, 3, 1, 7, 0)


@pytest.fixture
def drops():
    return MedicationItem(name="називин", dosage="2 капли", times_per_day=3, duration_in_days=7)


@pytest.fixture
def tablets():
    return MedicationItem(name="парацетамол", dosage="1 таблетки", times_per_day=1, duration_in_days=5)


@pytest.fixture
def manual_course(start_day, drops, tablets):
    """Course with three slots: drops at every slot, tablets at the middle one"""
    slots = [
        DoseSlot(index_in_day=1, time=time(8, 0)),
        DoseSlot(index_in_day=2, time=time(14, 0)),
        DoseSlot(index_in_day=3, time=time(20, 0)),
    ]
    return Course(
        start_date=start_day,
        medications=[drops, tablets],
        dose_slots=slots,
        course_medications=[
            CourseMedication(medication_id=drops.id, slot_indexes=[1, 2, 3]),
            CourseMedication(medication_id=tablets.id, slot_indexes=[2]),
        ],
        total_duration_in_days=7,
        name="ЛОР",
    )
