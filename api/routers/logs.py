"""
Daily logs and onboarding router.

This router contains endpoints for:
- /api/save-daily-log - Merge a log into the daily_logs metafield
- /api/get-daily-logs - daily_log metaobjects for a customer email (GET or POST)
- /api/save-onboarding - Onboarding answers as customer metafields
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from api.deps import (
    get_daily_logs_use_case,
    get_save_daily_log_use_case,
    get_save_onboarding_use_case,
)
from api.schemas import GetDailyLogsRequest
from application.use_cases import GetDailyLogsUseCase, SaveDailyLogUseCase, SaveOnboardingUseCase
from application.use_cases.daily_logs import EMAIL_FIELDS, first_present

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Daily Logs"],
)


@router.post("/save-daily-log")
async def save_daily_log(
    body: Optional[Dict[str, Any]] = Body(default=None),
    use_case: SaveDailyLogUseCase = Depends(get_save_daily_log_use_case),
):
    """
    Save one day's log.

    The owner may be sent as ownerId, customerId, customer_id, customerGid or
    customer_gid; the log as log, daily_log or dailyLog.
    """
    result = await use_case.execute(body or {})
    return {
        "ok": True,
        "customerGid": result.customer_gid,
        "savedDate": result.saved_date,
        "logsCount": result.logs_count,
        "log": result.log,
    }


@router.get("/get-daily-logs")
async def get_daily_logs(
    email: Optional[str] = Query(default=None),
    userEmail: Optional[str] = Query(default=None),
    customerId: Optional[str] = Query(default=None),
    use_case: GetDailyLogsUseCase = Depends(get_daily_logs_use_case),
):
    identity = first_present({"email": email, "userEmail": userEmail, "customerId": customerId}, EMAIL_FIELDS)
    return {"ok": True, **await use_case.execute(identity)}


@router.post("/get-daily-logs")
async def post_daily_logs(
    request: GetDailyLogsRequest,
    use_case: GetDailyLogsUseCase = Depends(get_daily_logs_use_case),
):
    identity = first_present(request.model_dump(), EMAIL_FIELDS)
    return {"ok": True, **await use_case.execute(identity)}


@router.post("/save-onboarding")
async def save_onboarding(
    body: Optional[Dict[str, Any]] = Body(default=None),
    use_case: SaveOnboardingUseCase = Depends(get_save_onboarding_use_case),
):
    """
    Save onboarding answers.

    Accepts email plus any of startWeight, goalWeight, age, heightFeet,
    heightInches, avgSteps, alcoholNights and mealsOut.
    """
    return await use_case.execute(body or {})
