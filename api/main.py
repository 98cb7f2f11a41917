# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for the Medication Schedule Engine

Runs on port 8000.
Provides REST API for prescription parsing and course scheduling.
"""

import sys
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List
from datetime import date, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, model_validator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from medication_schedule.core import MedicationItem
from medication_schedule.parser import PrescriptionParser
from medication_schedule.schedule import ScheduleBuilder, ReminderPlanner
from medication_schedule.utils import (
    configure_logging,
    NoMedicationsRecognizedError,
    EmptyCourseError,
)

configure_logging()
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Medication Schedule Engine API",
    description="Parses Russian prescriptions into medications and daily courses",
    version="0.1.0",
)

parser = PrescriptionParser()
builder = ScheduleBuilder()
planner = ReminderPlanner()


# ============================================================================
# Models
# ============================================================================

class ParseRequest(BaseModel):
    text: str


class MedicationInput(BaseModel):
    name: str = Field(min_length=1)
    dosage: str = "1 доза"
    times_per_day: int = Field(default=1, ge=1)
    duration_in_days: int = Field(default=7, ge=1)
    comment: Optional[str] = None

    def to_item(self) -> MedicationItem:
        return MedicationItem(
            name=self.name,
            dosage=self.dosage,
            times_per_day=self.times_per_day,
            duration_in_days=self.duration_in_days,
            comment=self.comment,
        )


class ScheduleRequest(BaseModel):
    text: Optional[str] = None  # parsed when medications are not given
    medications: Optional[List[MedicationInput]] = None
    start_date: Optional[date] = None
    name: Optional[str] = None
    include_reminders: bool = True

    @model_validator(mode="after")
    def check_source(self):
        if self.text is None and self.medications is None:
            raise ValueError("Either 'text' or 'medications' is required")
        return self


# ============================================================================
# Error handlers
# ============================================================================

@app.exception_handler(NoMedicationsRecognizedError)
async def no_medications_handler(request: Request, exc: NoMedicationsRecognizedError):
    logger.info(f"No medications recognized ({len(exc.text)} chars of input)")
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Не удалось распознать лекарства. Попробуйте переформулировать назначение.",
            "dismissible": True,
        },
    )


@app.exception_handler(EmptyCourseError)
async def empty_course_handler(request: Request, exc: EmptyCourseError):
    return JSONResponse(status_code=422, content={"detail": str(exc), "dismissible": True})


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Medication Schedule Engine API"}


@app.get("/api/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy"}


@app.post("/api/parse")
async def parse(request: ParseRequest) -> Dict[str, Any]:
    """
    Parse prescription text into medication items.

    Returns 422 when non-empty text contains no recognizable medication.
    Conflicting frequency readings are reported, not rejected.
    """
    items = parser.parse_or_raise(request.text)

    return {
        "medications": [item.to_dict() for item in items],
        "count": len(items),
        "frequency_conflicts": [str(item.id) for item in items if item.has_frequency_conflict],
    }


@app.post("/api/schedule")
async def schedule(request: ScheduleRequest) -> Dict[str, Any]:
    """
    Build a course from prescription text or explicit medications.
    """
    if request.medications is not None:
        items = [m.to_item() for m in request.medications]
    else:
        items = parser.parse_or_raise(request.text)

    course = builder.build_course(items, start_date=request.start_date, name=request.name)

    response: Dict[str, Any] = {"course": course.to_dict()}
    if request.include_reminders:
        reminders = planner.plan(course, now=datetime.now())
        response["reminders"] = [r.to_dict() for r in reminders]

    return response


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
