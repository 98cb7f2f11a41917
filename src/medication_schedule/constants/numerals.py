# ============================================================================
# src/medication_schedule/constants/numerals.py
# ============================================================================
"""
Russian textual numerals 1-10 with the declined forms that show up in
dictated prescriptions ("по две капли", "каждые восемь часов",
"в течение пяти дней").
"""

import re
from types import MappingProxyType
from typing import Optional

NUMERAL_WORDS = MappingProxyType({
    "один": 1, "одна": 1, "одну": 1, "одно": 1, "одного": 1, "одной": 1,
    "два": 2, "две": 2, "двух": 2,
    "три": 3, "трёх": 3, "трех": 3,
    "четыре": 4, "четырёх": 4, "четырех": 4,
    "пять": 5, "пяти": 5,
    "шесть": 6, "шести": 6,
    "семь": 7, "семи": 7,
    "восемь": 8, "восьми": 8,
    "девять": 9, "девяти": 9,
    "десять": 10, "десяти": 10,
})

# Multiplicative adverbs that state a daily count on their own
COUNT_ADVERBS = MappingProxyType({
    "однократно": 1,
    "дважды": 2,
    "трижды": 3,
    "четырежды": 4,
})

_DIGITS = re.compile(r"\d+")


def parse_number(token: str) -> Optional[int]:
    """Resolve a digit string or a textual numeral to an int."""
    token = token.strip().lower()
    if _DIGITS.fullmatch(token):
        return int(token)
    return NUMERAL_WORDS.get(token)


def is_numeral(token: str) -> bool:
    return parse_number(token) is not None
