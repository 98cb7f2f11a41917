# ============================================================================
# FILE: tests/unit/test_duration_extractor.py
# ============================================================================
"""
Unit tests for duration extraction
"""

import pytest
from medication_schedule.parser.extractors import extract_duration
from medication_schedule.parser.extractors.duration import (
    duration_from_day_range,
    duration_from_delayed_start,
    duration_from_period,
)


@pytest.mark.parametrize("text, expected", [
    ("7 дней", 7),
    ("10 дней", 10),
    ("1 день", 1),
    ("5 суток", 5),
    ("пять дней", 5),
    ("в течение семи дней", 7),
])
def test_days(text, expected):
    """Test plain day counts"""
    assert extract_duration(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("2 недели", 14),
    ("две недели", 14),
    ("1 месяц", 30),
    ("3 мес", 90),
])
def test_weeks_and_months(text, expected):
    """Test week and month multipliers"""
    assert extract_duration(text) == expected


def test_day_range_upper_bound():
    """Test a range resolves to its upper bound"""
    assert extract_duration("курс: 5-7 дней") == 7
    assert duration_from_day_range("10–14 дней") == 14


def test_for_period():
    """Test 'на <period>' with and without a number"""
    assert duration_from_period("на 10 дней") == 10
    assert duration_from_period("на неделю") == 7
    assert duration_from_period("на две недели") == 14
    assert duration_from_period("на месяц") == 30
    assert duration_from_period("на ночь") is None


def test_for_period_day_needs_count():
    """Test 'на день' without a number is not a duration"""
    assert duration_from_period("2 раза на день") is None
    assert duration_from_period("на 1 день") == 1
    assert extract_duration("по 1 таблетке 2 раза на день") is None
    assert extract_duration("по 1 таблетке 2 раза на день 10 дней") == 10
    assert extract_duration("по 1 таблетке 2 раза на сутки") is None


def test_delayed_start():
    """Test 'через N дней'"""
    assert duration_from_delayed_start("через 3 дня") == 3
    assert duration_from_delayed_start("через день") is None


def test_frequency_day_not_read_as_duration():
    """Test 'в день' does not count as a duration"""
    assert extract_duration("3 раза в день") is None
    assert extract_duration("називин 2 капли 3 раза в день 7 дней") == 7


def test_no_duration():
    """Test text without a duration"""
    assert extract_duration("називин 2 капли") is None
    assert extract_duration("") is None
