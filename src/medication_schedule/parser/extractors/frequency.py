# ============================================================================
# src/medication_schedule/parser/extractors/frequency.py
# ============================================================================
"""
Frequency Extraction

Two independent signals are read from every segment:
- Interval: "каждые 8 часов", "через 6 часов", "каждые 8:00" -> 24 // hours
- Explicit count: "3 раза", "2х раз", "3 р/д", "три раза", "дважды"

If both fire, the explicit count wins and a differing interval value is
kept as an alternative reading. Part-of-day phrasings ("утром и вечером")
are used only when neither signal fires.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ...constants import (
    PART_OF_DAY_PATTERNS,
    INTERVAL_HOUR_PATTERNS,
    COUNT_ADVERBS,
    parse_number,
)
from ...core.enums import FrequencySource
from .base import NUMBER_OR_WORD

logger = logging.getLogger(__name__)

HOUR_WORD = r'(?:час|ч(?![а-яё])\.?)'

INTERVAL_PATTERN = re.compile(
    r'(?<![а-яё])(?:каждые|каждый|через)\s+' + NUMBER_OR_WORD + r'\s*(?:-?\s*х\s+)?' + HOUR_WORD,
    re.IGNORECASE,
)

# "каждые 8:00" is a transcription slip for "каждые 8 часов"
CLOCK_INTERVAL_PATTERN = re.compile(r'(?:каждые|через)\s+(\d{1,2})[:.]00', re.IGNORECASE)

EXPLICIT_PATTERNS = (
    re.compile(r'(?<![\d.,])(\d+)(?:\s*-?\s*х)?\s*раз(?:а|ы)?(?![а-яё])', re.IGNORECASE),
    re.compile(r'(?<![\d.,])(\d+)\s*р\s*/\s*(?:д|сут)', re.IGNORECASE),
)

NUMERAL_COUNT_PATTERN = re.compile(r'(?<![а-яё])([а-яё]+)\s+раз(?:а)?(?![а-яё])', re.IGNORECASE)

COUNT_ADVERB_PATTERN = re.compile(
    r'(?<![а-яё])(' + '|'.join(COUNT_ADVERBS) + r')(?![а-яё])',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FrequencyEstimate:
    """Daily intake count read from a segment."""
    times_per_day: int
    alternative: Optional[int] = None
    source: FrequencySource = FrequencySource.EXPLICIT


def times_for_interval(hours: int) -> Optional[int]:
    if hours <= 0:
        return None
    return max(1, 24 // hours)


def interval_hours(text: str) -> Optional[int]:
    """Hours between intakes, if the segment states an interval."""
    for match in INTERVAL_PATTERN.finditer(text):
        hours = parse_number(match.group(1))
        if hours:
            return hours

    lower = text.lower()
    for phrase, hours in INTERVAL_HOUR_PATTERNS:
        if phrase in lower:
            return hours

    match = CLOCK_INTERVAL_PATTERN.search(text)
    if match:
        return int(match.group(1)) or None

    return None


def interval_signal(text: str) -> Optional[int]:
    hours = interval_hours(text)
    return times_for_interval(hours) if hours else None


def explicit_signal(text: str) -> Optional[int]:
    for pattern in EXPLICIT_PATTERNS:
        match = pattern.search(text)
        if match and int(match.group(1)) > 0:
            return int(match.group(1))

    for match in NUMERAL_COUNT_PATTERN.finditer(text):
        count = parse_number(match.group(1))
        if count:
            return count

    match = COUNT_ADVERB_PATTERN.search(text)
    if match:
        return COUNT_ADVERBS[match.group(1).lower()]

    return None


def part_of_day_signal(text: str) -> Optional[int]:
    lower = text.lower()
    for phrase, count in PART_OF_DAY_PATTERNS:
        if phrase in lower:
            return count
    return None


def extract_frequency(text: str) -> Optional[FrequencyEstimate]:
    """
    Read the daily intake count of a segment.

    Examples:
        "3 раза в день"               -> 3
        "каждые 6 часов"              -> 4 (interval)
        "2 раза в день каждые 8 часов" -> 2, alternative 3
        "утром и вечером"             -> 2 (part of day)

    Returns:
        FrequencyEstimate, or None when nothing is stated
    """
    interval = interval_signal(text)
    explicit = explicit_signal(text)

    if explicit is not None:
        alternative = interval if interval is not None and interval != explicit else None
        if alternative is not None:
            logger.debug(f"Frequency conflict: explicit {explicit}, interval {alternative}")
        return FrequencyEstimate(explicit, alternative, FrequencySource.EXPLICIT)

    if interval is not None:
        return FrequencyEstimate(interval, None, FrequencySource.INTERVAL)

    part_of_day = part_of_day_signal(text)
    if part_of_day is not None:
        return FrequencyEstimate(part_of_day, None, FrequencySource.PART_OF_DAY)

    return None
