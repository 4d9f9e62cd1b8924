"""
Plan shape normalizer.

Coerces whatever the generation step returned into the WorkoutPlan dict shape.
Workouts are truncated to the requested day count but never padded here; see
fallback.top_up_workouts(). Coach focus and safety notes are capped, not filled.
"""

import logging
from typing import Any, Dict, List, Optional

from domain.plans.constants import (
    CARDIO_INTENSITIES,
    CARDIO_MINUTES_RANGE,
    CARDIO_SESSIONS_RANGE,
    DEFAULT_PLAN_TITLE,
    FULL_BODY,
    LOWER_BODY,
    MAX_CARDIO_NOTES_LENGTH,
    MAX_COACH_FOCUS,
    MAX_EXERCISES_PER_WORKOUT,
    MAX_LIST_ITEM_LENGTH,
    MAX_SAFETY_NOTES,
    MAX_SESSION_MINUTES,
    MIN_SESSION_MINUTES,
    SESSION_TITLES,
    UPPER_BODY,
)
from domain.plans.exercises import normalize_exercise
from domain.plans.fallback import (
    default_cardio_intensity,
    default_cardio_minutes,
    default_cardio_notes,
    default_cardio_sessions,
)
from domain.plans.sanitizer import PlanRequest, clamp_int, clip_text, pick, to_int

logger = logging.getLogger(__name__)


def classify_session_type(text: Any) -> str:
    """Keyword classification of a session label, lower body checked first."""
    label = str(text or "").lower()
    if "lower" in label or "leg" in label:
        return LOWER_BODY
    if "full" in label:
        return FULL_BODY
    if "upper" in label or "push" in label or "pull" in label:
        return UPPER_BODY
    return FULL_BODY


def normalize_text_list(value: Any, cap: int) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if not isinstance(item, str):
            continue
        text = item.strip()
        if text:
            items.append(clip_text(text, MAX_LIST_ITEM_LENGTH))
        if len(items) >= cap:
            break
    return items


def normalize_workout(raw: Dict[str, Any], index: int, request: PlanRequest) -> Dict[str, Any]:
    session_label = pick(raw, "session_type", "sessionType", "type")
    title = pick(raw, "title", "name")
    session_type = classify_session_type(session_label or title)

    if not isinstance(title, str) or not title.strip():
        title = f"Day {index + 1} - {SESSION_TITLES[session_type]}"

    exercises = []
    raw_exercises = raw.get("exercises")
    if isinstance(raw_exercises, list):
        for item in raw_exercises:
            exercise = normalize_exercise(item)
            if exercise is not None:
                exercises.append(exercise)
            if len(exercises) >= MAX_EXERCISES_PER_WORKOUT:
                break

    return {
        "session_type": session_type,
        "title": clip_text(title, MAX_LIST_ITEM_LENGTH),
        "duration_minutes": clamp_int(
            pick(raw, "duration_minutes", "durationMinutes"),
            MIN_SESSION_MINUTES,
            MAX_SESSION_MINUTES,
            request.time_minutes,
        ),
        "exercises": exercises,
        "coach_focus": normalize_text_list(pick(raw, "coach_focus", "coachFocus"), MAX_COACH_FOCUS),
        "safety_notes": normalize_text_list(
            pick(raw, "safety_notes", "safetyNotes"), MAX_SAFETY_NOTES
        ),
    }


def _normalize_cardio_session(raw: Dict[str, Any], request: PlanRequest) -> Dict[str, Any]:
    cardio_type = raw.get("type")
    cardio_type = cardio_type.strip() if isinstance(cardio_type, str) and cardio_type.strip() else request.cardio_goal
    intensity = str(raw.get("intensity") or "").strip().lower()
    if intensity not in CARDIO_INTENSITIES:
        intensity = default_cardio_intensity(cardio_type)
    notes = raw.get("notes")
    if not isinstance(notes, str) or not notes.strip():
        notes = default_cardio_notes(request.equipment)
    low, high = CARDIO_MINUTES_RANGE
    return {
        "type": cardio_type,
        "minutes": clamp_int(raw.get("minutes"), low, high, default_cardio_minutes(request.cardio_goal)),
        "intensity": intensity,
        "notes": clip_text(notes, MAX_CARDIO_NOTES_LENGTH),
    }


def normalize_cardio_plan(raw: Any, request: PlanRequest) -> Optional[Dict[str, Any]]:
    """
    Cardio block for the plan, or None when cardio was not requested.

    Sessions per week come from the request, then the model, then the
    day-count default (2 on 5+ training days, else 3).
    """
    if not request.include_cardio:
        return None

    source = raw if isinstance(raw, dict) else {}
    low, high = CARDIO_SESSIONS_RANGE
    sessions_per_week = request.cardio_sessions_per_week
    if sessions_per_week is None:
        sessions_per_week = to_int(pick(source, "sessions_per_week", "sessionsPerWeek"))
    if sessions_per_week is None:
        sessions_per_week = 2 if request.days >= 5 else 3
    sessions_per_week = max(low, min(high, sessions_per_week))

    raw_sessions = source.get("sessions")
    sessions = []
    if isinstance(raw_sessions, list):
        sessions = [
            _normalize_cardio_session(item, request)
            for item in raw_sessions
            if isinstance(item, dict)
        ][:sessions_per_week]

    if not sessions:
        sessions = default_cardio_sessions(request.cardio_goal, sessions_per_week, request.equipment)

    return {"sessions_per_week": sessions_per_week, "sessions": sessions}


def normalize_plan_shape(raw: Any, request: PlanRequest) -> Dict[str, Any]:
    """
    Force an arbitrary JSON value into the plan dict shape.

    Args:
        raw: Decoded model output, any type
        request: Sanitized request

    Returns:
        Plan dict with at most request.days workouts
    """
    if not isinstance(raw, dict):
        logger.warning(f"Plan output was {type(raw).__name__}, not an object; normalizing from empty")
        raw = {}

    title = pick(raw, "plan_title", "planTitle", "title")
    if not isinstance(title, str) or not title.strip():
        title = DEFAULT_PLAN_TITLE

    raw_workouts = raw.get("workouts")
    workouts = []
    if isinstance(raw_workouts, list):
        for item in raw_workouts:
            if not isinstance(item, dict):
                continue
            workouts.append(normalize_workout(item, len(workouts), request))
            if len(workouts) >= request.days:
                break

    return {
        "plan_title": clip_text(title, MAX_LIST_ITEM_LENGTH),
        "days_per_week": request.days,
        "workouts": workouts,
        "cardio_plan": normalize_cardio_plan(pick(raw, "cardio_plan", "cardioPlan"), request),
    }
