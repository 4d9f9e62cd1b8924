"""
Equipment enforcer.

Removes exercises the user cannot do with their equipment, substitutes a
template when too few remain, then re-applies the set/rep/rest rules and fills
empty coaching lists. Running it on its own output changes nothing.
"""

import logging
from typing import Any, Dict, List

from domain.plans.constants import (
    DEFAULT_COACH_FOCUS,
    DEFAULT_SAFETY_NOTES,
    DUMBBELLS,
    HOME_GYM,
    MAX_DEFAULT_SAFETY_NOTES,
    MAX_EXERCISES_AFTER_ENFORCEMENT,
    MIN_FILTERED_EXERCISES,
    MIN_HOME_TEMPLATE_EXERCISES,
)
from domain.plans.equipment import HomeGym, allowed_in_home_gym, allowed_with_dumbbells
from domain.plans.exercises import normalize_exercise
from domain.plans.fallback import bodyweight_exercises, template_exercises

logger = logging.getLogger(__name__)


def _filter_dumbbells(exercises: List[Dict[str, Any]], session_type: str) -> List[Dict[str, Any]]:
    kept = [ex for ex in exercises if allowed_with_dumbbells(ex["name"])]
    if len(kept) >= MIN_FILTERED_EXERCISES:
        return kept
    logger.info(
        f"Only {len(kept)} dumbbell-safe exercises left for {session_type}; using dumbbell template"
    )
    return template_exercises(session_type, DUMBBELLS)


def _filter_home_gym(
    exercises: List[Dict[str, Any]],
    session_type: str,
    equipment: List[str],
) -> List[Dict[str, Any]]:
    gym = HomeGym(equipment)
    kept = [ex for ex in exercises if allowed_in_home_gym(ex["name"], gym)]
    if len(kept) >= MIN_FILTERED_EXERCISES:
        return kept

    template = [
        ex for ex in template_exercises(session_type, HOME_GYM)
        if allowed_in_home_gym(ex["name"], gym)
    ]
    if len(template) >= MIN_HOME_TEMPLATE_EXERCISES:
        logger.info(f"Home gym {session_type}: {len(kept)} upstream exercises allowed; using filtered template")
        return template

    logger.info(f"Home gym {session_type}: nothing usable for declared items; using bodyweight template")
    return bodyweight_exercises()


def enforce_workout(
    workout: Dict[str, Any],
    equipment_mode: str,
    equipment: List[str],
) -> Dict[str, Any]:
    """
    Apply the equipment mode to one normalized workout.

    Args:
        workout: Workout dict from the shape normalizer or fallback generator
        equipment_mode: full_gym, home_gym or dumbbells
        equipment: Sanitized equipment tags (home-gym items)

    Returns:
        New workout dict; the input is not mutated
    """
    session_type = workout.get("session_type", "full_body")
    exercises = [ex for ex in workout.get("exercises", []) if ex and ex.get("name")]

    if equipment_mode == DUMBBELLS:
        exercises = _filter_dumbbells(exercises, session_type)
    elif equipment_mode == HOME_GYM:
        exercises = _filter_home_gym(exercises, session_type, equipment)
    elif not exercises:
        exercises = template_exercises(session_type, equipment_mode)

    normalized = [normalize_exercise(ex) for ex in exercises]
    normalized = [ex for ex in normalized if ex is not None][:MAX_EXERCISES_AFTER_ENFORCEMENT]

    coach_focus = list(workout.get("coach_focus") or []) or list(DEFAULT_COACH_FOCUS)
    safety_notes = list(workout.get("safety_notes") or []) or list(
        DEFAULT_SAFETY_NOTES[:MAX_DEFAULT_SAFETY_NOTES]
    )

    return {
        **workout,
        "exercises": normalized,
        "coach_focus": coach_focus,
        "safety_notes": safety_notes,
    }
