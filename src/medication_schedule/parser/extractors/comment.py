# ============================================================================
# src/medication_schedule/parser/extractors/comment.py
# ============================================================================
"""
Comment Extraction

Collects clinical instruction notes ("после еды", "в каждый носовой ход")
and regimen flags ("через день", "по необходимости") into one
"; "-separated string.
"""

from typing import List, Optional

from ...config import parser_settings
from ...constants import COMMENT_FLAGS, COMMENT_PATTERNS


def collect_notes(text: str) -> List[str]:
    """Matched notes in table order, without duplicates."""
    lower = text.lower()
    notes: List[str] = []

    for phrases, note in COMMENT_FLAGS:
        if any(phrase in lower for phrase in phrases) and note not in notes:
            notes.append(note)

    for phrase, note in COMMENT_PATTERNS:
        if phrase in lower and note not in notes:
            notes.append(note)

    return notes


def extract_comment(text: str, min_length: Optional[int] = None) -> Optional[str]:
    """
    Build the comment of a segment.

    Segments shorter than the minimum length carry no instructions.
    Returns None when nothing matched.
    """
    min_length = parser_settings.MIN_COMMENT_TEXT_LENGTH if min_length is None else min_length
    if len(text.strip()) < min_length:
        return None

    notes = collect_notes(text)
    return "; ".join(notes) if notes else None
