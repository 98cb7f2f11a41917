# ============================================================================
# src/medication_schedule/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the medication schedule engine.

Extractors never raise: a missing field is an absence, not an error.
These exceptions cover the few places where callers need a hard signal.
"""


class MedicationScheduleError(Exception):
    """Base exception for all medication schedule errors."""
    pass


class ParsingError(MedicationScheduleError):
    """Error while turning prescription text into medications."""
    pass


class NoMedicationsRecognizedError(ParsingError):
    """Non-empty prescription text produced no medications."""
    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class ScheduleError(MedicationScheduleError):
    """Error while building or normalising a course schedule."""
    pass


class EmptyCourseError(ScheduleError):
    """A course was requested without any medications."""
    pass
