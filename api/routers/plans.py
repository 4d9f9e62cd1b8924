"""
Plans router for starter plan generation and stored coaching state.

This router contains endpoints for:
- /api/create-workout-plan - Ping (GET) and starter plan generation (POST)
- /api/get-plan - Read the saved plan and onboarding flags
- /api/save-plan - Store a plan in the coach_plan metafield
- /api/state - Plan, daily logs and flags for the coach UI
"""

import logging
import time
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Body, Depends, Query

from api.deps import (
    get_create_workout_plan_use_case,
    get_get_plan_use_case,
    get_save_plan_use_case,
    get_state_use_case,
)
from api.schemas import CustomerRequest, SavePlanRequest
from application.use_cases import (
    CreateWorkoutPlanUseCase,
    GetPlanUseCase,
    GetStateUseCase,
    SavePlanUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Plans"],
)


def ping(route: str) -> Dict[str, Any]:
    return {"ok": True, "route": route, "ts": int(time.time() * 1000)}


@router.get("/create-workout-plan")
def create_workout_plan_ping():
    """Reachability check for the plan generator."""
    return ping("create-workout-plan")


@router.post("/create-workout-plan")
async def create_workout_plan(
    body: Optional[Dict[str, Any]] = Body(default=None),
    use_case: CreateWorkoutPlanUseCase = Depends(get_create_workout_plan_use_case),
):
    """
    Generate a starter workout plan.

    The body is read leniently: goal, experience, days_per_week, equipment,
    time_minutes, include_cardio, cardio_goal and cardio_sessions_per_week
    all fall back to defaults when missing or malformed.
    """
    result = await use_case.execute(body or {})
    return {"plan": result.plan.model_dump(), "debug": result.debug}


@router.post("/get-plan")
async def get_plan(
    request: CustomerRequest,
    use_case: GetPlanUseCase = Depends(get_get_plan_use_case),
):
    state = await use_case.execute(request.customerId)
    return {"ok": True, **state}


@router.post("/save-plan")
async def save_plan(
    request: SavePlanRequest,
    use_case: SavePlanUseCase = Depends(get_save_plan_use_case),
):
    result = await use_case.execute(request.customerId, request.plan)
    return {"ok": True, **result}


@router.get("/state")
async def get_state(
    customerId: Optional[Union[str, int]] = Query(default=None),
    use_case: GetStateUseCase = Depends(get_state_use_case),
):
    """Coach UI state. Accepts only a customer id; no email or other PII."""
    state = await use_case.execute(customerId)
    return {"ok": True, **state}
