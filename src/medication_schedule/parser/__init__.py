# src/medication_schedule/parser/__init__.py
"""
Prescription text parsing: normalization, segmentation, field extraction
and item assembly.
"""

from .normalizer import normalize
from .segmenter import Segmenter, segment
from .assembler import ItemAssembler, is_valid_name
from .prescription_parser import PrescriptionParser, parse_prescription

__all__ = [
    "normalize",
    "Segmenter",
    "segment",
    "ItemAssembler",
    "is_valid_name",
    "PrescriptionParser",
    "parse_prescription",
]
