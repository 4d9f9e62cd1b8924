"""
Coach router for chat, daily context and media endpoints.

This router contains endpoints for:
- /api/chat - Coaching reply; saves an embedded DAILY_LOG when possible
- /api/get-user-context - Sheet-derived daily context, optional summary
- /api/generate-daily-summary - Daily summary and coach flag
- /api/meal-photo-estimate - Vision calorie estimate with LOG_JSON
- /api/generate-speech - Coach voice MP3
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response

from api.deps import (
    get_coach_chat_use_case,
    get_daily_summary_use_case,
    get_generate_speech_use_case,
    get_meal_photo_use_case,
)
from api.schemas import DailySummaryRequest, MealPhotoRequest, SpeechRequest, UserContextRequest
from application.use_cases import (
    CoachChatUseCase,
    DailySummaryUseCase,
    GenerateSpeechUseCase,
    MealPhotoEstimateUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Coach"],
)


@router.post("/chat")
async def chat(
    body: Optional[Dict[str, Any]] = Body(default=None),
    use_case: CoachChatUseCase = Depends(get_coach_chat_use_case),
):
    """
    Coaching chat turn.

    Body: message and/or imageBase64 (data URL), optional identity
    (email, userEmail, userId, user_id), customerId and history turns of
    {"role", "content"}.
    """
    result = await use_case.execute(body or {})
    return {
        "reply": result.reply,
        "daily_log": result.daily_log,
        "saved_log": result.saved_log,
        "debug": result.debug,
    }


@router.post("/get-user-context")
async def get_user_context(
    request: UserContextRequest,
    use_case: DailySummaryUseCase = Depends(get_daily_summary_use_case),
):
    context = await use_case.get_user_context(
        request.user_id,
        client_date=request.clientDate,
        action=request.action,
    )
    return {"ok": True, **context}


@router.post("/generate-daily-summary")
async def generate_daily_summary(
    request: DailySummaryRequest,
    use_case: DailySummaryUseCase = Depends(get_daily_summary_use_case),
):
    summary = await use_case.generate_daily_summary(request.user_id, client_date=request.clientDate)
    return {"ok": True, **summary}


@router.post("/meal-photo-estimate")
async def meal_photo_estimate(
    request: MealPhotoRequest,
    use_case: MealPhotoEstimateUseCase = Depends(get_meal_photo_use_case),
):
    logger.info(f"Photo estimate request (customer={request.customerId})")
    return await use_case.execute(request.image_base64)


@router.post("/generate-speech")
async def generate_speech(
    request: SpeechRequest,
    use_case: GenerateSpeechUseCase = Depends(get_generate_speech_use_case),
):
    audio = await use_case.execute(request.text)
    return Response(content=audio, media_type="audio/mpeg")
