# ============================================================================
# src/medication_schedule/parser/extractors/duration.py
# ============================================================================
"""
Duration Extraction

Course length in days, first match wins:
1. "через N дней" (delayed start read as the course length)
2. Day range "5-7 дней" -> upper bound
3. "на N дней / недель / месяцев"; N may be omitted for weeks and
   months only ("на неделю" -> 7, "на день" is a frequency)
4. "N недель" -> N * 7
5. "N месяцев" -> N * 30
6. "N дней"
Numbers may be digits or Russian number words.
"""

import re
from typing import Optional

from ...constants import parse_number
from .base import first_result, NUMBER_OR_WORD

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30

DAY_UNIT = r'(?:дн[а-яё]*|день|сут(?:ок|ки)?)'
WEEK_UNIT = r'недел[а-яё]*'
MONTH_UNIT = r'(?:месяц[а-яё]*|мес(?![а-яё])\.?)'

DELAYED_START_PATTERN = re.compile(
    r'(?<![а-яё])через\s+' + NUMBER_OR_WORD + r'\s+' + DAY_UNIT, re.IGNORECASE
)

DAY_RANGE_PATTERN = re.compile(
    r'(?<![\d.,])(\d+)\s*[-–—]\s*(\d+)\s*' + DAY_UNIT, re.IGNORECASE
)

FOR_PERIOD_PATTERN = re.compile(
    r'(?<![а-яё])на\s+(?:(\d+)\s*|([а-яё]+)\s+)?'
    r'(' + DAY_UNIT + '|' + WEEK_UNIT + '|' + MONTH_UNIT + r')',
    re.IGNORECASE,
)

WEEKS_PATTERN = re.compile(r'(?:(?<![\d.,])(\d+)\s*|(?<![а-яё])([а-яё]+)\s+)' + WEEK_UNIT, re.IGNORECASE)
MONTHS_PATTERN = re.compile(r'(?:(?<![\d.,])(\d+)\s*|(?<![а-яё])([а-яё]+)\s+)' + MONTH_UNIT, re.IGNORECASE)
DAYS_PATTERN = re.compile(r'(?:(?<![\d.,])(\d+)\s*|(?<![а-яё])([а-яё]+)\s+)' + DAY_UNIT, re.IGNORECASE)


def _unit_days(unit: str) -> int:
    unit = unit.lower()
    if unit.startswith("недел"):
        return DAYS_PER_WEEK
    if unit.startswith("мес"):
        return DAYS_PER_MONTH
    return 1


def _scaled_count(pattern: re.Pattern, text: str, multiplier: int) -> Optional[int]:
    for match in pattern.finditer(text):
        count = parse_number(match.group(1) or match.group(2))
        if count:
            return count * multiplier
    return None


def duration_from_delayed_start(text: str) -> Optional[int]:
    for match in DELAYED_START_PATTERN.finditer(text):
        days = parse_number(match.group(1))
        if days:
            return days
    return None


def duration_from_day_range(text: str) -> Optional[int]:
    match = DAY_RANGE_PATTERN.search(text)
    if not match:
        return None
    upper = max(int(match.group(1)), int(match.group(2)))
    return upper or None


def duration_from_period(text: str) -> Optional[int]:
    for match in FOR_PERIOD_PATTERN.finditer(text):
        raw_count = match.group(1) or match.group(2)
        unit_days = _unit_days(match.group(3))
        if not raw_count and unit_days == 1:
            continue
        count = parse_number(raw_count) if raw_count else 1
        if count:
            return count * unit_days
    return None


def duration_from_weeks(text: str) -> Optional[int]:
    return _scaled_count(WEEKS_PATTERN, text, DAYS_PER_WEEK)


def duration_from_months(text: str) -> Optional[int]:
    return _scaled_count(MONTHS_PATTERN, text, DAYS_PER_MONTH)


def duration_from_days(text: str) -> Optional[int]:
    return _scaled_count(DAYS_PATTERN, text, 1)


DURATION_STRATEGIES = (
    duration_from_delayed_start,
    duration_from_day_range,
    duration_from_period,
    duration_from_weeks,
    duration_from_months,
    duration_from_days,
)


def extract_duration(text: str) -> Optional[int]:
    """
    Read the course length in days.

    Examples:
        "7 дней"           -> 7
        "курс: 5-7 дней"   -> 7
        "на две недели"    -> 14
        "1 месяц"          -> 30
    """
    return first_result(DURATION_STRATEGIES, text)
