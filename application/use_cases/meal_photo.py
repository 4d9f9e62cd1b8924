"""
Meal Photo Estimate Use Case.

Sends a meal photo to a vision-capable chat model and returns the reply with
its embedded LOG_JSON block decoded. Nothing is persisted.
"""
import logging
from typing import Any, Dict

from application.exceptions import BadRequestError
from application.ports import LanguageModel
from backend.ai.prompts import MEAL_PHOTO_SYSTEM_PROMPT, MEAL_PHOTO_TEMPERATURE, MEAL_PHOTO_USER_PROMPT
from domain.logs.coach_text import extract_log_json

logger = logging.getLogger(__name__)


class MealPhotoEstimateUseCase:
    def __init__(self, model: LanguageModel):
        self._model = model

    async def execute(self, image_data_url: Any) -> Dict[str, Any]:
        if not image_data_url:
            raise BadRequestError("image_base64 is required")

        generation = await self._model.complete_chat(
            messages=[
                {"role": "system", "content": MEAL_PHOTO_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": MEAL_PHOTO_USER_PROMPT},
                        {"type": "image_url", "image_url": {"url": str(image_data_url)}},
                    ],
                },
            ],
            temperature=MEAL_PHOTO_TEMPERATURE,
            feature="meal_photo_estimate",
        )
        log_json = extract_log_json(generation.text)
        if log_json is None:
            logger.warning("Meal photo reply had no usable LOG_JSON block")
        return {"reply": generation.text, "log_json": log_json}
