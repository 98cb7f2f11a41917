# ============================================================================
# src/medication_schedule/parser/extractors/dosage.py
# ============================================================================
"""
Dosage Extraction

Produces a canonical "<amount> <unit>" string:
1. Count + dose-form unit family, optional leading "по"
   ("по 2 кап" -> "2 капли", "по 0,5 таблетки" -> "0.5 таблетки")
2. Compact or decimal measured amount ("500 мг", "0,5 мл" -> "0.5 мл",
   "5 мг/кг")
3. Russian number word + unit ("по две капли" -> "2 капли")
"""

import re
from typing import Optional

from ...constants import NUMERAL_WORDS, normalize_unit
from .base import first_result

# Tried in this order; each is a dose-form family
UNIT_FAMILIES = (
    r'капл[а-яё]*|капел[а-яё]*|кап(?![а-яё])\.?',
    r'таблет[а-яё]*|табл?(?![а-яё])\.?',
    r'капсул[а-яё]*',
    r'пшик[а-яё]*|впрыск[а-яё]*|нажати[а-яё]*',
    r'доз[а-яё]*',
    r'мл(?![а-яё])',
)

ANY_FAMILY = '|'.join(f'(?:{family})' for family in UNIT_FAMILIES)

FAMILY_PATTERNS = tuple(
    re.compile(r'(?:по\s+)?(?<![\d.,])(\d+(?:[.,]\d+)?)\s*(' + family + r')', re.IGNORECASE)
    for family in UNIT_FAMILIES
)

MEASURED_PATTERN = re.compile(
    r'(?<![\d.,])(\d+(?:[.,]\d+)?)\s*'
    r'(мкг|мг|мл|гр|г|ед|ме|mcg|mg|ml|%)(?![а-яёa-z])'
    r'(?:\s*/\s*([а-яёa-z]+))?',
    re.IGNORECASE,
)

WORD_WITH_PO_PATTERN = re.compile(r'(?<![а-яё])по\s+([а-яё]+)\s+(' + ANY_FAMILY + r')', re.IGNORECASE)
WORD_PATTERN = re.compile(r'(?<![а-яё])([а-яё]+)\s+(' + ANY_FAMILY + r')', re.IGNORECASE)


def _format(amount: str, unit: str) -> str:
    return f"{amount} {normalize_unit(unit)}"


def dosage_from_unit_family(text: str) -> Optional[str]:
    for pattern in FAMILY_PATTERNS:
        match = pattern.search(text)
        if match:
            return _format(match.group(1).replace(",", "."), match.group(2))
    return None


def dosage_from_measured_amount(text: str) -> Optional[str]:
    match = MEASURED_PATTERN.search(text)
    if not match:
        return None

    amount = match.group(1).replace(",", ".")
    unit = match.group(2)
    if match.group(3):
        unit = f"{unit}/{match.group(3)}"

    return _format(amount, unit)


def dosage_from_number_word(text: str) -> Optional[str]:
    for pattern in (WORD_WITH_PO_PATTERN, WORD_PATTERN):
        for match in pattern.finditer(text):
            amount = NUMERAL_WORDS.get(match.group(1).lower())
            if amount is not None:
                return _format(str(amount), match.group(2))
    return None


DOSAGE_STRATEGIES = (
    dosage_from_unit_family,
    dosage_from_measured_amount,
    dosage_from_number_word,
)


def extract_dosage(text: str) -> Optional[str]:
    """Return the canonical dosage of a segment, or None if none is stated."""
    return first_result(DOSAGE_STRATEGIES, text)
