# ============================================================================
# src/medication_schedule/constants/__init__.py
# ============================================================================
"""
Convenient imports for all lookup tables
"""

from .units import (
    UNIT_SYNONYMS,
    UNIT_STEMS,
    DOSE_FORM_PREFIXES,
    UNIT_ABBREVIATIONS,
    GENERIC_FORMS,
    normalize_unit,
)
from .numerals import NUMERAL_WORDS, COUNT_ADVERBS, parse_number, is_numeral
from .phrases import (
    FILLER_WORDS,
    DUPLICATE_TOKENS,
    SERVICE_LINE_MARKERS,
    SECTION_HEADERS,
    DURATION_NOUNS,
    CONTINUATION_LEADS,
    PART_OF_DAY_PATTERNS,
    INTERVAL_HOUR_PATTERNS,
    COMMENT_FLAGS,
    COMMENT_PATTERNS,
    NAME_STOP_TOKENS,
    NAME_FALLBACK_STOP_WORDS,
    NAME_BLACKLIST,
    INTERVAL_OPENERS,
    HOUR_WORD_PREFIXES,
    PUNCTUATION,
)
