"""
Create Workout Plan Use Case.

Turns onboarding answers into a starter plan: sanitize the request, ask the
model for a draft, then force the draft through the plan normalization
pipeline. The model output is never returned as-is.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from application.exceptions import UpstreamError, truncate
from application.ports import GenerationResult, LanguageModel
from backend.ai.prompts import (
    STARTER_PLAN_MAX_OUTPUT_TOKENS,
    STARTER_PLAN_SYSTEM_PROMPT,
    STARTER_PLAN_TEMPERATURE,
    build_starter_plan_prompt,
)
from domain.plans import WorkoutPlan, build_plan, classify_equipment, sanitize_plan_request

logger = logging.getLogger(__name__)


def decode_model_json(result: GenerationResult, debug: Dict[str, Any]) -> Any:
    """
    Decode the model's JSON text.

    Raises:
        UpstreamError: Text is not valid JSON (debug carries a preview)
    """
    try:
        return json.loads(result.text)
    except ValueError as e:
        logger.error(f"Model returned invalid JSON: {e}")
        raise UpstreamError(
            "Model returned invalid JSON",
            debug={**debug, "parse_error": str(e), "output_preview": truncate(result.text)},
        ) from e


@dataclass
class CreateWorkoutPlanResult:
    """Normalized plan plus timing and mode diagnostics."""
    plan: WorkoutPlan
    debug: Dict[str, Any] = field(default_factory=dict)


class CreateWorkoutPlanUseCase:
    """Generate and normalize a starter workout plan."""

    def __init__(self, model: LanguageModel):
        """
        Args:
            model: Language model used to draft the plan
        """
        self._model = model

    async def execute(self, payload: Any) -> CreateWorkoutPlanResult:
        """
        Build a plan from a raw onboarding payload.

        Args:
            payload: Request body; unknown or malformed fields fall back to defaults

        Returns:
            CreateWorkoutPlanResult whose plan satisfies every pipeline invariant
        """
        request = sanitize_plan_request(payload)
        mode = classify_equipment(request.equipment)
        debug: Dict[str, Any] = {
            "goal": request.goal,
            "days": request.days,
            "equipment_mode": mode,
            "include_cardio": request.include_cardio,
        }
        logger.info(f"Creating starter plan: {request.days} days, mode={mode}")

        user_prompt = build_starter_plan_prompt(
            goal=request.goal,
            experience=request.experience,
            days=request.days,
            time_minutes=request.time_minutes,
            equipment=request.equipment,
            include_cardio=request.include_cardio,
            cardio_goal=request.cardio_goal,
        )
        generation = await self._model.generate_json(
            system=STARTER_PLAN_SYSTEM_PROMPT,
            user=user_prompt,
            max_output_tokens=STARTER_PLAN_MAX_OUTPUT_TOKENS,
            temperature=STARTER_PLAN_TEMPERATURE,
            feature="create_workout_plan",
        )
        debug["ms"] = generation.elapsed_ms
        debug["model"] = generation.model

        raw_plan = decode_model_json(generation, debug)
        plan = build_plan(raw_plan, request)
        return CreateWorkoutPlanResult(plan=plan, debug=debug)
