# ============================================================================
# src/medication_schedule/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .parser_config import ParserSettings, parser_settings
from .schedule_config import ScheduleSettings, schedule_settings
from .logging_config import LoggingSettings, logging_settings
