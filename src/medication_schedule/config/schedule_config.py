# ============================================================================
# src/medication_schedule/config/schedule_config.py
# ============================================================================
"""
Schedule Builder Settings
- Default daily window
- Interval regimen detection
- Reminder defaults
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

class ScheduleSettings(BaseSettings):
    DAY_START_HOUR: int = Field(
        default=8,
        ge=0, le=23,
        description="First dose of the day (also the start of interval regimens)"
    )
    DAY_END_HOUR: int = Field(
        default=20,
        ge=0, le=23,
        description="Last dose of the day for evenly spread schedules"
    )
    SINGLE_SLOT_HOUR: int = Field(
        default=9,
        ge=0, le=23,
        description="Time of the only slot when everything is taken once a day"
    )
    INTERVAL_REGIMEN_THRESHOLD: int = Field(
        default=6,
        ge=1,
        description="More doses per day than this means an 'every N hours' regimen"
    )
    EDIT_FALLBACK_HOUR: int = Field(
        default=9,
        ge=0, le=23,
        description="Base hour for slots that appear during a course edit without a time"
    )
    DEFAULT_REMINDERS_ENABLED: bool = Field(
        default=True,
        description="Whether new courses fire reminders"
    )
    DEFAULT_REMINDER_OFFSET_MINUTES: int = Field(
        default=0,
        ge=0,
        description="Minutes before a dose that the reminder fires"
    )

    @model_validator(mode="after")
    def check_window(self):
        if self.DAY_END_HOUR <= self.DAY_START_HOUR:
            raise ValueError("DAY_END_HOUR must be later than DAY_START_HOUR")
        return self

schedule_settings = ScheduleSettings()
