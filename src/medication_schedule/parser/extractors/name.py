# ============================================================================
# src/medication_schedule/parser/extractors/name.py
# ============================================================================
"""
Medication Name Extraction

Layered fallback, first non-empty wins:
1. Quoted substring («…» or "…")
2. Compound name: up to three leading words, stopping at numbers,
   stop-words and dose-form words
3. The word right after a dose-form keyword ("по 2 капли отривин")
4. The first word that is not a stop-word or a number

The extractor only proposes a name. The assembler decides whether the
proposal is good enough to keep the segment.
"""

import re
from typing import List, Optional

from ...config import parser_settings
from ...constants import (
    DOSE_FORM_PREFIXES,
    UNIT_ABBREVIATIONS,
    UNIT_SYNONYMS,
    GENERIC_FORMS,
    NAME_STOP_TOKENS,
    NAME_FALLBACK_STOP_WORDS,
    INTERVAL_OPENERS,
    HOUR_WORD_PREFIXES,
)
from .base import first_result, clean_token, is_number, is_numeral_word

QUOTED_PATTERNS = (
    re.compile(r'«([^»]+)»'),
    re.compile(r'"([^"]+)"'),
    re.compile(r'“([^”]+)”'),
)


def is_dose_form_word(token: str) -> bool:
    return token.startswith(DOSE_FORM_PREFIXES)


def is_unit_word(token: str) -> bool:
    return token in UNIT_ABBREVIATIONS or token in UNIT_SYNONYMS


def _skip_interval_opener(words: List[str]) -> List[str]:
    """Drop a leading "каждые N час…" so "каждые 2 часа пурпурин" names пурпурин."""
    if len(words) < 4:
        return words

    first, second, third = (clean_token(w) for w in words[:3])
    if (
        first in INTERVAL_OPENERS
        and is_number(second)
        and third.startswith(HOUR_WORD_PREFIXES)
    ):
        rest = words[3:]
        # "каждые 2 часа - пурпурин"
        if rest and not clean_token(rest[0]):
            rest = rest[1:]
        return rest

    return words


def name_from_quotes(text: str) -> Optional[str]:
    for pattern in QUOTED_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def name_from_compound(text: str, max_tokens: Optional[int] = None) -> Optional[str]:
    max_tokens = max_tokens or parser_settings.MAX_NAME_TOKENS
    collected: List[str] = []

    for word in _skip_interval_opener(text.split()):
        token = clean_token(word)
        if not token:
            continue

        if is_number(token) or is_numeral_word(token):
            break
        if token in NAME_STOP_TOKENS:
            break
        if is_dose_form_word(token) or is_unit_word(token):
            break

        collected.append(token)

        # A comma closes the name phrase
        if len(collected) == max_tokens or word.endswith((",", ";")):
            break

    if not collected:
        return None

    if len(collected) == 1 and collected[0] in GENERIC_FORMS:
        return None

    return " ".join(collected)


def name_after_dose_keyword(text: str) -> Optional[str]:
    words = text.split()

    for index, word in enumerate(words[:-1]):
        if not is_dose_form_word(clean_token(word)):
            continue

        candidate = clean_token(words[index + 1])
        if (
            candidate
            and not is_number(candidate)
            and not is_numeral_word(candidate)
            and candidate not in NAME_FALLBACK_STOP_WORDS
            and not is_dose_form_word(candidate)
        ):
            return candidate

    return None


def name_fallback(text: str) -> Optional[str]:
    for word in text.split():
        token = clean_token(word)
        if not token or token in NAME_FALLBACK_STOP_WORDS:
            continue
        if is_number(token) or is_numeral_word(token):
            continue
        return token
    return None


NAME_STRATEGIES = (
    name_from_quotes,
    name_from_compound,
    name_after_dose_keyword,
    name_fallback,
)


def extract_name(text: str) -> Optional[str]:
    """
    Propose a medication name for one segment.

    Examples:
        "називин 2 капли 3 раза в день"         -> "називин"
        "аква марис спрей 2 впрыска"            -> "аква марис спрей"
        "каждые 2 часа пурпурин по 1 таблетке"  -> "пурпурин"
        "спрей «мометазон» 2 впрыска"           -> "мометазон"
    """
    return first_result(NAME_STRATEGIES, text)
