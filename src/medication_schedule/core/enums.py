# ============================================================================
# src/medication_schedule/core/enums.py
# ============================================================================
"""
Domain Enums
- Per-dose intake status
- Where a frequency value came from
"""

from enum import Enum

class IntakeStatus(str, Enum):
    PENDING = "pending"    # default when nothing was recorded
    TAKEN = "taken"
    SKIPPED = "skipped"

class FrequencySource(str, Enum):
    EXPLICIT = "explicit"        # "3 раза в день", "2 р/д"
    INTERVAL = "interval"        # "каждые 8 часов"
    PART_OF_DAY = "part_of_day"  # "утром и вечером"
