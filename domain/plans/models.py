"""
Pydantic models for normalized starter plans.

These describe the wire shape returned by /api/create-workout-plan. The
pipeline itself works on plain dicts; WorkoutPlan.model_validate() is the last
step and never sees anything outside these bounds.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

from domain.plans.constants import COMPOUND_PATTERN

SessionType = Literal["upper_body", "lower_body", "full_body"]
CardioIntensity = Literal["easy", "moderate", "hard"]


class SetPrescription(BaseModel):
    """A single prescribed set. Starter plans never carry a load."""

    w: int = Field(default=0, ge=0, le=0)
    r: int = Field(..., ge=1)


class Exercise(BaseModel):
    name: str
    sets: List[SetPrescription] = Field(default_factory=list)
    rest_seconds: int = Field(..., ge=30, le=180)
    notes: str = Field(default="", max_length=160)

    @computed_field  # type: ignore[misc]
    @property
    def is_compound(self) -> bool:
        return bool(COMPOUND_PATTERN.search(self.name))


class Workout(BaseModel):
    session_type: SessionType = "full_body"
    title: str
    duration_minutes: int = Field(..., ge=20, le=120)
    exercises: List[Exercise] = Field(default_factory=list, max_length=10)
    coach_focus: List[str] = Field(default_factory=list, max_length=5)
    safety_notes: List[str] = Field(default_factory=list, max_length=4)


class CardioSession(BaseModel):
    type: str
    minutes: int = Field(..., ge=10, le=75)
    intensity: CardioIntensity
    notes: str = Field(default="", max_length=180)


class CardioPlan(BaseModel):
    sessions_per_week: int = Field(..., ge=1, le=5)
    sessions: List[CardioSession] = Field(default_factory=list)


class WorkoutPlan(BaseModel):
    """A starter plan after the full normalization pipeline."""

    plan_title: str
    days_per_week: int = Field(..., ge=1, le=6)
    workouts: List[Workout] = Field(default_factory=list)
    cardio_plan: Optional[CardioPlan] = None
