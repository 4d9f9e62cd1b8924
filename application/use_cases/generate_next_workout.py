"""
Generate Next Workout Use Case.

Prescribes the user's next session from their last workout using the model,
then repairs the result so every exercise carries usable sets.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from application.exceptions import BadRequestError
from application.ports import LanguageModel
from application.use_cases.create_workout_plan import decode_model_json
from backend.ai.prompts import (
    NEXT_WORKOUT_MAX_OUTPUT_TOKENS,
    NEXT_WORKOUT_SYSTEM_PROMPT,
    NEXT_WORKOUT_TEMPERATURE,
    build_next_workout_prompt,
)
from domain.workouts import compact_workout, normalize_next_workout
from domain.workouts.next_workout import parse_number

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 2


@dataclass
class GenerateNextWorkoutResult:
    """Next workout plus request diagnostics."""
    workout: Dict[str, Any]
    debug: Dict[str, Any] = field(default_factory=dict)


class GenerateNextWorkoutUseCase:
    """Progressive-overload next workout prescription."""

    def __init__(self, model: LanguageModel):
        self._model = model

    async def execute(self, body: Dict[str, Any]) -> GenerateNextWorkoutResult:
        """
        Args:
            body: Request body with last_workout and optional history

        Raises:
            BadRequestError: last_workout has no exercises list
        """
        goal = str(body.get("goal") or "muscle_gain")
        experience = str(body.get("experience") or "intermediate")
        session_type = str(body.get("session_type") or "full_body")
        equipment = body.get("equipment") if isinstance(body.get("equipment"), list) else []
        time_minutes = parse_number(body.get("time_minutes"))
        if time_minutes is None:
            time_minutes = 60
        elif time_minutes.is_integer():
            time_minutes = int(time_minutes)
        notes = str(body.get("notes") or "")
        last_workout = body.get("last_workout")
        history = body.get("history") if isinstance(body.get("history"), list) else []

        debug: Dict[str, Any] = {
            "goal": goal,
            "experience": experience,
            "session_type": session_type,
            "time_minutes": time_minutes,
            "has_last_workout": bool(last_workout),
        }

        if not isinstance(last_workout, dict) or not isinstance(last_workout.get("exercises"), list):
            raise BadRequestError(
                "Missing last_workout with exercises[]. Needed to prescribe weights/reps.",
                debug=debug,
            )

        compact_last = compact_workout(last_workout)
        compact_history = [compact_workout(w) for w in history[-HISTORY_WINDOW:]]

        generation = await self._model.generate_json(
            system=NEXT_WORKOUT_SYSTEM_PROMPT,
            user=build_next_workout_prompt(
                goal=goal,
                experience=experience,
                session_type=session_type,
                time_minutes=time_minutes,
                equipment=equipment,
                notes=notes,
                last_workout=compact_last,
                history=compact_history,
            ),
            max_output_tokens=NEXT_WORKOUT_MAX_OUTPUT_TOKENS,
            temperature=NEXT_WORKOUT_TEMPERATURE,
            feature="generate_workouts",
        )
        debug["openai_ms"] = generation.elapsed_ms
        debug["model"] = generation.model

        raw_workout = decode_model_json(generation, debug)
        workout = normalize_next_workout(
            raw_workout,
            session_type=session_type,
            time_minutes=time_minutes,
            last_workout=compact_last,
        )
        logger.info(f"Next workout prescribed with {len(workout['exercises'])} exercises")
        return GenerateNextWorkoutResult(workout=workout, debug=debug)
