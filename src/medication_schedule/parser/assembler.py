# ============================================================================
# src/medication_schedule/parser/assembler.py
# ============================================================================
"""
Item Assembler

Runs every field extractor over one segment, applies defaults and decides
whether the segment really describes a medication.
"""

import logging
from typing import Optional

from ..config import ParserSettings, parser_settings
from ..constants import NAME_BLACKLIST
from ..core.models import MedicationItem
from .extractors import (
    extract_name,
    extract_dosage,
    extract_frequency,
    extract_duration,
    extract_comment,
)


def is_valid_name(name: Optional[str], min_length: int = 3) -> bool:
    """Reject missing names, short fragments and dose-word leftovers."""
    if not name:
        return False
    name = name.strip()
    return len(name) >= min_length and name.lower() not in NAME_BLACKLIST


class ItemAssembler:
    """
    Turns a segment into a MedicationItem.

    Only the name is mandatory. Dosage, frequency and duration fall back
    to the configured defaults; the comment stays empty.
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or parser_settings
        self.logger = logging.getLogger(__name__)

    def assemble(self, segment: str) -> Optional[MedicationItem]:
        """
        Build one item from a segment.

        Args:
            segment: One medication mention from the segmenter

        Returns:
            MedicationItem, or None if no usable name was found
        """
        name = extract_name(segment)
        if not is_valid_name(name, self.settings.MIN_NAME_LENGTH):
            self.logger.debug(f"Dropping segment without a usable name: {segment!r}")
            return None

        dosage = extract_dosage(segment) or self.settings.DEFAULT_DOSAGE
        duration = extract_duration(segment) or self.settings.DEFAULT_DURATION_DAYS

        frequency = extract_frequency(segment)
        if frequency is not None:
            times_per_day = frequency.times_per_day
            alternative = frequency.alternative
        else:
            times_per_day = self.settings.DEFAULT_TIMES_PER_DAY
            alternative = None

        comment = extract_comment(segment, self.settings.MIN_COMMENT_TEXT_LENGTH)

        item = MedicationItem(
            name=name.strip(),
            dosage=dosage,
            times_per_day=times_per_day,
            duration_in_days=duration,
            comment=comment,
            alternative_times_per_day=alternative,
        )

        self.logger.debug(
            f"Assembled {item.name}: {item.dosage}, {item.times_per_day}x/day, "
            f"{item.duration_in_days} days"
        )
        return item
