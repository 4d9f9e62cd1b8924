"""
Starter plan normalization pipeline.

    raw model output -> shape normalizer -> workout top-up -> equipment enforcer

build_plan() is pure: the same request and model output always give the same
plan.
"""

from typing import Any

from domain.plans.enforcer import enforce_workout
from domain.plans.equipment import classify_equipment
from domain.plans.fallback import top_up_workouts
from domain.plans.models import WorkoutPlan
from domain.plans.normalizer import normalize_plan_shape
from domain.plans.sanitizer import PlanRequest


def build_plan(raw_plan: Any, request: PlanRequest) -> WorkoutPlan:
    """
    Turn decoded model output into a WorkoutPlan with exactly request.days workouts.

    Args:
        raw_plan: Parsed JSON from the generation call (any shape, may be empty)
        request: Sanitized plan request

    Returns:
        Validated WorkoutPlan
    """
    equipment_mode = classify_equipment(request.equipment)
    plan = normalize_plan_shape(raw_plan, request)
    workouts = top_up_workouts(plan["workouts"], request.days, equipment_mode, request.time_minutes)
    plan["workouts"] = [
        enforce_workout(workout, equipment_mode, request.equipment) for workout in workouts
    ]
    return WorkoutPlan.model_validate(plan)
