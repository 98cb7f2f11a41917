# ============================================================================
# src/medication_schedule/parser/normalizer.py
# ============================================================================
"""
Text Normalizer

Cleans raw prescription text (typed or voice-transcribed) before any
extraction runs:
- Unifies line breaks and exotic whitespace
- Lowercases everything
- Removes filler words ("ну", "значит", "типа")
- Collapses stuttered function words ("по по" -> "по")
- Separates digits from letters ("500мг" -> "500 мг", "0.5г" -> "0.5 г")
- Collapses repeated spaces and trims

The cleanup passes repeat until the text stops changing, so the result is
always a fixpoint: normalize(normalize(x)) == normalize(x).
"""

import logging
import re

from ..constants import FILLER_WORDS, DUPLICATE_TOKENS

logger = logging.getLogger(__name__)

# Whitespace that is not a line break
WHITESPACE_REPLACEMENTS = (
    ('\r\n', '\n'),
    ('\r', '\n'),
    ('\t', ' '),
    ('\u00a0', ' '),  # no-break space
    ('\u202f', ' '),  # narrow no-break space
    ('\u2009', ' '),  # thin space
    ('\u200b', ''),   # zero-width space
)

# Whole-word fillers; lookarounds keep the surrounding spaces so that
# consecutive fillers ("ну ну") all go in one pass.
FILLER_PATTERN = re.compile(
    r'(?<!\S)(?:' + '|'.join(re.escape(w) for w in FILLER_WORDS) + r')(?!\S)'
)

DUPLICATE_PATTERN = re.compile(
    r'(?<!\S)(' + '|'.join(re.escape(w) for w in DUPLICATE_TOKENS) + r')(?: +\1)+(?!\S)'
)

DIGIT_LETTER_PATTERN = re.compile(r'(\d)([^\W\d_])')
LETTER_DIGIT_PATTERN = re.compile(r'([^\W\d_])(\d)')

CLEANUP_PATTERNS = (
    (re.compile(r' {2,}'), ' '),
    (re.compile(r' *\n *'), '\n'),
    (re.compile(r'\n{3,}'), '\n\n'),
)

MAX_PASSES = 10


def _cleanup_pass(text: str) -> str:
    result = FILLER_PATTERN.sub(' ', text)
    result = DUPLICATE_PATTERN.sub(r'\1', result)
    result = DIGIT_LETTER_PATTERN.sub(r'\1 \2', result)
    result = LETTER_DIGIT_PATTERN.sub(r'\1 \2', result)

    for pattern, replacement in CLEANUP_PATTERNS:
        result = pattern.sub(replacement, result)

    return result.strip()


def normalize(raw: str) -> str:
    """
    Canonicalize prescription text.

    Args:
        raw: Free-form text, possibly empty

    Returns:
        Normalized text (possibly empty); never raises

    Examples:
        "Ну  Називин 2кап по по 3 р/д" -> "називин 2 кап по 3 р/д"
    """
    if not raw:
        return ""

    result = raw
    for old, new in WHITESPACE_REPLACEMENTS:
        result = result.replace(old, new)

    result = result.lower()

    for _ in range(MAX_PASSES):
        cleaned = _cleanup_pass(result)
        if cleaned == result:
            break
        result = cleaned
    else:
        logger.debug(f"Normalization did not settle within {MAX_PASSES} passes")

    return result
