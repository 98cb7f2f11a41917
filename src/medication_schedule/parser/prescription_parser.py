# ============================================================================
# src/medication_schedule/parser/prescription_parser.py
# ============================================================================
"""
Prescription Parser

Entry point of the text pipeline:

    raw text -> normalize -> segment -> assemble each segment -> items

Pure and deterministic apart from the generated item ids. Never raises
on malformed text; parse_or_raise() is available for callers that need
an explicit failure.
"""

import logging
from typing import List, Optional

from ..config import ParserSettings, parser_settings
from ..core.models import MedicationItem
from ..utils.exceptions import NoMedicationsRecognizedError
from ..utils.logging import log_performance
from .normalizer import normalize
from .segmenter import Segmenter
from .assembler import ItemAssembler

logger = logging.getLogger(__name__)


class PrescriptionParser:
    """
    Parses free-form Russian prescription text into medication items.

    Usage:
        parser = PrescriptionParser()
        items = parser.parse("Називин 2 капли 3 раза в день 7 дней")
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or parser_settings
        self.segmenter = Segmenter(self.settings.ANCHOR_MAX_CHARS)
        self.assembler = ItemAssembler(self.settings)
        self.logger = logging.getLogger(__name__)

    @log_performance(logger, "Prescription parsing")
    def parse(self, text: str) -> List[MedicationItem]:
        """
        Parse prescription text.

        Args:
            text: Typed or voice-transcribed prescription, possibly empty

        Returns:
            Items in the order their segments appear; empty if nothing
            was recognized
        """
        normalized = normalize(text or "")
        if not normalized:
            return []

        segments = self.segmenter.segment(normalized)
        self.logger.debug(f"Split prescription into {len(segments)} segments")

        items = []
        for segment in segments:
            item = self.assembler.assemble(segment)
            if item is not None:
                items.append(item)

        self.logger.info(
            f"Recognized {len(items)} of {len(segments)} segments",
            extra={"segment_count": len(segments), "medication_count": len(items)},
        )
        return items

    def parse_or_raise(self, text: str) -> List[MedicationItem]:
        """
        Parse and fail loudly when non-empty text yields nothing.

        Raises:
            NoMedicationsRecognizedError: text had content but no medication
        """
        items = self.parse(text)
        if not items and text and text.strip():
            raise NoMedicationsRecognizedError(
                "No medications recognized in prescription text", text=text
            )
        return items


def parse_prescription(text: str) -> List[MedicationItem]:
    """Parse with default settings."""
    return PrescriptionParser().parse(text)
