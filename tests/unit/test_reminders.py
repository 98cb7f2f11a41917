# ============================================================================
# FILE: tests/unit/test_reminders.py
# ============================================================================
"""
Unit tests for reminder planning
"""

from datetime import datetime, time

from medication_schedule.core import DoseSlot
from medication_schedule.schedule import ReminderPlanner


def test_one_request_per_slot(manual_course, morning):
    """Test each slot gets a daily reminder"""
    requests = ReminderPlanner().plan(manual_course, now=morning)

    assert len(requests) == 3
    assert all(r.repeats_daily for r in requests)
    assert [(r.hour, r.minute) for r in requests] == [(8, 0), (14, 0), (20, 0)]


def test_identifiers(manual_course, morning):
    """Test identifiers carry course and slot ids"""
    planner = ReminderPlanner()
    requests = planner.plan(manual_course, now=morning)
    slot = manual_course.dose_slots[0]

    assert requests[0].identifier == f"course-{manual_course.id}-slot-{slot.id}"
    assert all(r.identifier.startswith(planner.prefix_for(manual_course.id)) for r in requests)


def test_title_and_body(manual_course, morning):
    """Test the course name is the title and medications are the body"""
    requests = ReminderPlanner().plan(manual_course, now=morning)

    assert requests[1].title == "Курс: ЛОР"
    assert requests[1].body == "Время приёма: називин, парацетамол"


def test_title_falls_back_to_first_medication(manual_course, morning):
    """Test an unnamed course is titled after the slot's first medication"""
    manual_course.name = None
    requests = ReminderPlanner().plan(manual_course, now=morning)

    assert requests[0].title == "Курс: називин"


def test_empty_slot(manual_course, morning):
    """Test a slot without medications asks to check the schedule"""
    manual_course.name = None
    manual_course.dose_slots.append(DoseSlot(index_in_day=4, time=time(22, 0)))

    request = ReminderPlanner().plan(manual_course, now=morning)[-1]

    assert request.title == "Курс: Приём лекарств"
    assert request.body == "Время приёма: Проверьте расписание приёма"


def test_offset_fires_earlier(manual_course, morning):
    """Test the reminder offset moves the fire time earlier"""
    manual_course.reminder_offset_minutes = 30
    requests = ReminderPlanner().plan(manual_course, now=morning)

    assert [(r.hour, r.minute) for r in requests] == [(7, 30), (13, 30), (19, 30)]


def test_past_times_move_to_tomorrow(manual_course):
    """Test reminders already past today start tomorrow"""
    now = datetime(2024, 3, 1, 15, 0)
    requests = ReminderPlanner().plan(manual_course, now=now)

    assert requests[0].fire_at == datetime(2024, 3, 2, 8, 0)
    assert requests[1].fire_at == datetime(2024, 3, 2, 14, 0)
    assert requests[2].fire_at == datetime(2024, 3, 1, 20, 0)


def test_disabled_reminders(manual_course, morning):
    """Test disabled reminders plan nothing"""
    manual_course.reminders_enabled = False
    assert ReminderPlanner().plan(manual_course, now=morning) == []


def test_to_dict(manual_course, morning):
    """Test serialization of a request"""
    data = ReminderPlanner().plan(manual_course, now=morning)[0].to_dict()

    assert data["fire_at"] == "2024-03-01T08:00:00"
    assert data["repeats_daily"] is True
