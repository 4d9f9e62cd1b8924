"""
Workouts router for next-workout prescription.

This router contains endpoints for:
- /api/generate-workouts - Ping (GET), smoke check and prescription (POST)

A POST carrying the header x-pj-smoke: 1 returns immediately without
touching the model.
"""

import logging
import time
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header

from api.deps import get_generate_next_workout_use_case
from api.routers.plans import ping
from application.use_cases import GenerateNextWorkoutUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Workouts"],
)


@router.get("/generate-workouts")
def generate_workouts_ping():
    return ping("generate-workouts")


@router.post("/generate-workouts")
async def generate_workouts(
    body: Optional[Dict[str, Any]] = Body(default=None),
    x_pj_smoke: Optional[str] = Header(default=None, alias="x-pj-smoke"),
    use_case: GenerateNextWorkoutUseCase = Depends(get_generate_next_workout_use_case),
):
    """
    Prescribe the next workout from the last one.

    Requires last_workout.exercises; history, goal, experience, session_type,
    equipment, time_minutes and notes are optional.
    """
    if x_pj_smoke == "1":
        return {"ok": True, "smoke": True, "ts": int(time.time() * 1000)}

    result = await use_case.execute(body or {})
    return {"workout": result.workout, "debug": result.debug}
