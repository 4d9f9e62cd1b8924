"""
Nutrition router.

This router contains endpoints for:
- /api/nutrition - Meal text to items, totals and clarification questions

GET (?q= or ?text=) exists for browser testing and behaves like POST.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_estimate_nutrition_use_case
from api.schemas import NutritionRequest
from application.exceptions import BadRequestError
from application.use_cases import EstimateNutritionUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Nutrition"],
)


@router.get("/nutrition")
async def nutrition_query(
    q: Optional[str] = Query(default=None),
    text: Optional[str] = Query(default=None),
    customerId: Optional[str] = Query(default=None),
    debug: Optional[str] = Query(default=None),
    use_case: EstimateNutritionUseCase = Depends(get_estimate_nutrition_use_case),
):
    meal_text = (q or text or "").strip()
    if not meal_text:
        raise BadRequestError("Missing q")
    result = await use_case.execute(meal_text, customer_id=customerId, debug=debug == "1")
    return {"ok": True, **result}


@router.post("/nutrition")
async def nutrition(
    request: NutritionRequest,
    debug: Optional[str] = Query(default=None),
    use_case: EstimateNutritionUseCase = Depends(get_estimate_nutrition_use_case),
):
    result = await use_case.execute(request.text, customer_id=request.customerId, debug=debug == "1")
    return {"ok": True, **result}
