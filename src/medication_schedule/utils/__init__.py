# ============================================================================
# src/medication_schedule/utils/__init__.py
# ============================================================================
"""
Utility modules for the medication schedule engine.
"""

from .exceptions import (
    MedicationScheduleError,
    ParsingError,
    NoMedicationsRecognizedError,
    ScheduleError,
    EmptyCourseError,
)

from .logging import (
    setup_logging,
    configure_logging,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'MedicationScheduleError',
    'ParsingError',
    'NoMedicationsRecognizedError',
    'ScheduleError',
    'EmptyCourseError',
    # Logging
    'setup_logging',
    'configure_logging',
    'JsonFormatter',
    'log_performance',
]
