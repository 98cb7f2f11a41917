# ============================================================================
# src/medication_schedule/parser/extractors/base.py
# ============================================================================
"""
Shared helpers for field extractors.

Every field is extracted by an ordered list of pure `text -> Optional[T]`
strategies; the first one that returns a value wins.
"""

import logging
import re
from typing import Callable, Optional, Sequence, TypeVar

from ...constants import PUNCTUATION, NUMERAL_WORDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

Strategy = Callable[[str], Optional[T]]

NUMBER_PATTERN = re.compile(r'\d+')

# Digits or a Russian number word, for building patterns
NUMBER_OR_WORD = r'(\d+|[а-яё]+)'


def first_result(strategies: Sequence[Strategy], text: str) -> Optional[T]:
    """Evaluate strategies left to right and return the first non-empty value."""
    for strategy in strategies:
        value = strategy(text)
        if value is not None and value != "":
            logger.debug(f"{strategy.__name__} -> {value!r}")
            return value
    return None


def clean_token(word: str) -> str:
    """Lowercase a whitespace token and strip surrounding punctuation."""
    return word.strip(PUNCTUATION).lower()


def is_number(token: str) -> bool:
    return NUMBER_PATTERN.fullmatch(token) is not None


def is_numeral_word(token: str) -> bool:
    return token in NUMERAL_WORDS
