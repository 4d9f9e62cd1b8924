"""Starter workout plan normalization."""

from domain.plans.equipment import classify_equipment
from domain.plans.models import CardioPlan, CardioSession, Exercise, SetPrescription, Workout, WorkoutPlan
from domain.plans.pipeline import build_plan
from domain.plans.sanitizer import PlanRequest, sanitize_plan_request

__all__ = [
    "CardioPlan",
    "CardioSession",
    "Exercise",
    "PlanRequest",
    "SetPrescription",
    "Workout",
    "WorkoutPlan",
    "build_plan",
    "classify_equipment",
    "sanitize_plan_request",
]
