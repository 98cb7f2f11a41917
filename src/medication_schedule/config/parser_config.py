# ============================================================================
# src/medication_schedule/config/parser_config.py
# ============================================================================
"""
Prescription Parser Settings
- Field defaults applied by the assembler
- Name validity gate
- Comment noise suppression
- Segmenter anchor length
"""

from pydantic import Field
from pydantic_settings import BaseSettings

class ParserSettings(BaseSettings):
    DEFAULT_DOSAGE: str = Field(
        default="1 доза",
        description="Dosage used when no amount/unit could be extracted"
    )
    DEFAULT_TIMES_PER_DAY: int = Field(
        default=1,
        ge=1,
        description="Doses per day when no frequency signal fires"
    )
    DEFAULT_DURATION_DAYS: int = Field(
        default=7,
        ge=1,
        description="Course length in days when no duration is stated"
    )
    MIN_NAME_LENGTH: int = Field(
        default=3,
        ge=1,
        description="Shorter names are treated as leftovers and the segment is dropped"
    )
    MAX_NAME_TOKENS: int = Field(
        default=3,
        ge=1,
        description="Maximum words collected for a compound medication name"
    )
    MIN_COMMENT_TEXT_LENGTH: int = Field(
        default=10,
        ge=0,
        description="Segments shorter than this never get a comment"
    )
    ANCHOR_MAX_CHARS: int = Field(
        default=80,
        ge=1,
        description="Longest run before '(' recognised as a medication anchor"
    )

parser_settings = ParserSettings()
