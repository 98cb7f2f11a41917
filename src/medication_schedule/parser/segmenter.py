# ============================================================================
# src/medication_schedule/parser/segmenter.py
# ============================================================================
"""
Segmenter

Splits normalized prescription text into one chunk per medication mention.

Two strategies:
1. Anchors - names are often followed by a parenthetical form descriptor
   ("називин (капли) ..."). With two or more such anchors the text is cut
   at each anchor start.
2. Lines - the common case for dictated or plain text. Lines are grouped
   into medications using service markers, new-medication openers and
   duration-continuation cues.
"""

import logging
import re
from typing import List, Optional

from ..config import parser_settings
from ..constants import (
    SERVICE_LINE_MARKERS,
    SECTION_HEADERS,
    DURATION_NOUNS,
    CONTINUATION_LEADS,
    INTERVAL_OPENERS,
    NAME_FALLBACK_STOP_WORDS,
    PUNCTUATION,
)

logger = logging.getLogger(__name__)

# "1. ", "2) ", "- ", "• " at the start of a line
LIST_MARKER_PATTERN = re.compile(r'^(?:\d{1,2}[.)]|[-•*])\s+')

NUMBER_PATTERN = re.compile(r'\d+')
WORD_PATTERN = re.compile(r'\S+')


def _anchor_pattern(max_chars: int) -> re.Pattern:
    # The run may not cross a line break, a digit or sentence punctuation,
    # otherwise it would swallow the tail of the previous medication.
    return re.compile(r'\b[^\W\d_][^()\d\n.,;:!?]{0,%d}\(' % max_chars)


class Segmenter:
    """
    Splits normalized text into candidate medication segments.

    Stateless apart from the compiled anchor pattern; safe to share.
    """

    def __init__(self, anchor_max_chars: Optional[int] = None):
        max_chars = anchor_max_chars or parser_settings.ANCHOR_MAX_CHARS
        self.anchor_pattern = _anchor_pattern(max_chars)

    def segment(self, normalized: str) -> List[str]:
        """
        Split text into segments.

        Args:
            normalized: Output of normalize()

        Returns:
            Segments in input order; empty for degenerate input
        """
        if not normalized.strip():
            return []

        segments = self._split_by_anchors(normalized)
        if segments is not None:
            logger.debug(f"Anchor strategy produced {len(segments)} segments")
            return segments

        segments = self._split_by_lines(normalized)
        logger.debug(f"Line strategy produced {len(segments)} segments")
        return segments

    # ------------------------------------------------------------------
    # Anchor strategy
    # ------------------------------------------------------------------

    def _split_by_anchors(self, text: str) -> Optional[List[str]]:
        starts = []
        for match in self.anchor_pattern.finditer(text):
            start = anchor_start(match)
            if start is not None:
                starts.append(start)

        if len(starts) < 2:
            return None

        # Text before the first anchor is a preamble (headers, diagnosis)
        bounds = starts + [len(text)]
        chunks = (text[begin:end].strip() for begin, end in zip(bounds, bounds[1:]))
        return [chunk for chunk in chunks if chunk]

    # ------------------------------------------------------------------
    # Line strategy
    # ------------------------------------------------------------------

    def _split_by_lines(self, text: str) -> List[str]:
        result: List[str] = []
        current: List[str] = []

        def close_current():
            if current:
                result.append(" ".join(current))
                current.clear()

        for raw_line in text.split("\n"):
            stripped = raw_line.strip()
            enumerated = LIST_MARKER_PATTERN.match(stripped) is not None
            line = LIST_MARKER_PATTERN.sub("", stripped).strip()

            if not line:
                # A blank line always separates medications
                close_current()
                continue

            if is_service_line(line):
                continue

            line = strip_section_header(line)
            if not line:
                continue

            continuation = is_duration_line(line) and first_token(line) in CONTINUATION_LEADS

            # A list item always starts a new medication
            if enumerated or (looks_like_new_medication(line) and not continuation):
                close_current()
                current.append(line)
            else:
                # Duration continuations and plain lines extend the current item
                current.append(line)

        close_current()
        return result


def anchor_start(match: re.Match) -> Optional[int]:
    """
    Move an anchor match forward to the name right before "(".

    The leftmost match may begin inside the previous medication's tail
    ("3 раза в день отривин (спрей)"); only the trailing words that are
    not stop-words belong to the name. Returns None when no such word exists.
    """
    run = match.group(0)[:-1]
    start = None

    for word in reversed(list(WORD_PATTERN.finditer(run))):
        if word.group(0).strip(PUNCTUATION) in NAME_FALLBACK_STOP_WORDS:
            break
        start = word.start()

    return None if start is None else match.start() + start


def first_token(line: str) -> str:
    tokens = line.split()
    return tokens[0] if tokens else ""


def _is_number(token: str) -> bool:
    return NUMBER_PATTERN.fullmatch(token.strip(PUNCTUATION)) is not None


def is_service_line(line: str) -> bool:
    lower = line.lower()
    return any(lower.startswith(marker) for marker in SERVICE_LINE_MARKERS)


def strip_section_header(line: str) -> str:
    lower = line.lower()
    for header in SECTION_HEADERS:
        if lower.startswith(header):
            return line[len(header):].strip()
    return line


def is_duration_line(line: str) -> bool:
    padded = " " + line.lower()
    return any(noun in padded for noun in DURATION_NOUNS)


def looks_like_new_medication(line: str) -> bool:
    """
    Heuristic opener: "<word> <number|по> ..." or "каждые <number> <hours> <name> ...".

    Examples:
        "називин 2 капли"            -> True
        "парацетамол по 1 таблетке"  -> True
        "каждые 6 часов нурофен"     -> True
        "каждые 6 часов"             -> False
        "3 раза в день"              -> False
    """
    tokens = line.lower().split()
    if len(tokens) < 2:
        return False

    first, second = tokens[0], tokens[1]

    if first in INTERVAL_OPENERS and _is_number(second):
        # "каждые N <hours>" opens a medication only when a name word follows
        # the hours; a bare interval line is the previous item's frequency
        if len(tokens) < 4:
            return False
        name = tokens[3].strip(PUNCTUATION)
        return bool(name) and not _is_number(name) and name not in NAME_FALLBACK_STOP_WORDS

    return not _is_number(first) and (_is_number(second) or second == "по")


def segment(normalized: str) -> List[str]:
    """Module-level convenience wrapper around Segmenter."""
    return Segmenter().segment(normalized)
