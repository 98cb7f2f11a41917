# src/medication_schedule/parser/extractors/__init__.py
"""
Field extractors. Each is a pure function of one segment's text.
"""

from .base import first_result
from .name import extract_name
from .dosage import extract_dosage
from .frequency import FrequencyEstimate, extract_frequency
from .duration import extract_duration
from .comment import extract_comment

__all__ = [
    "first_result",
    "extract_name",
    "extract_dosage",
    "FrequencyEstimate",
    "extract_frequency",
    "extract_duration",
    "extract_comment",
]
