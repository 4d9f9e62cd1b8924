"""
Next-workout prescription shaping.

compact_workout() trims logged workouts before they go into a prompt.
normalize_next_workout() repairs the model's answer, falling back to the last
logged performance for any exercise that came back without usable sets.
"""

import math
from typing import Any, Dict, List, Optional

DEFAULT_TITLE = "Next Workout"
DEFAULT_SESSION_TYPE = "full_body"
DEFAULT_REST_SECONDS = 90
DEFAULT_EXERCISE_NAME = "Exercise"

MAX_COMPACT_EXERCISES = 8
MAX_COMPACT_SETS = 5
MAX_EXERCISES = 10
MAX_SETS = 6
BASELINE_SETS = 3
DEFAULT_BASELINE = {"w": 0, "r": 8}


def parse_number(value: Any) -> Optional[float]:
    """Finite float from a number or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def to_number(value: Any) -> float:
    """Loose numeric parse; anything unusable becomes 0."""
    number = parse_number(value)
    return 0.0 if number is None else number


def _tidy(number: float):
    return int(number) if float(number).is_integer() else number


def _is_done(raw_set: Dict[str, Any]) -> bool:
    done = raw_set.get("done")
    return done is True or done == "true"


def compact_workout(workout: Any) -> Dict[str, Any]:
    """Reduce a logged workout to name plus up to 5 {w, r} sets per exercise, done sets first."""
    source = workout if isinstance(workout, dict) else {}
    exercises = source.get("exercises") if isinstance(source.get("exercises"), list) else []

    compact = []
    for exercise in exercises[:MAX_COMPACT_EXERCISES]:
        exercise = exercise if isinstance(exercise, dict) else {}
        sets = [s for s in exercise.get("sets") or [] if isinstance(s, dict)]
        done = [s for s in sets if _is_done(s)]
        use = done or sets
        compact.append({
            "name": exercise.get("name") or "",
            "sets": [
                {"w": _tidy(to_number(s.get("w"))), "r": _tidy(to_number(s.get("r")))}
                for s in use[:MAX_COMPACT_SETS]
            ],
        })

    return {
        "date": source.get("date") or "",
        "split": source.get("split") or source.get("session_type") or "",
        "workout_name": source.get("workout_name") or "",
        "exercises": compact,
    }


def find_baseline(last_workout: Optional[Dict[str, Any]], exercise_name: str) -> Optional[Dict[str, Any]]:
    """
    Final logged set of the matching exercise in the last workout.

    Names match when equal or when either contains the other
    (case-insensitive). Returns None when nothing with a positive weight and
    rep count is found.
    """
    name = str(exercise_name or "").lower()
    exercises = (last_workout or {}).get("exercises")
    if not isinstance(exercises, list):
        return None

    for exercise in exercises:
        if not isinstance(exercise, dict):
            continue
        candidate = str(exercise.get("name") or "").lower()
        if not candidate:
            continue
        if candidate == name or name in candidate or candidate in name:
            sets = exercise.get("sets") or []
            last = sets[-1] if sets and isinstance(sets[-1], dict) else {}
            weight = to_number(last.get("w"))
            reps = to_number(last.get("r"))
            if weight > 0 and reps > 0:
                return {"w": _tidy(weight), "r": _tidy(reps)}
    return None


def _normalize_sets(raw_sets: Any) -> List[Dict[str, Any]]:
    if not isinstance(raw_sets, list):
        return []
    sets = []
    for raw_set in [s for s in raw_sets if s][:MAX_SETS]:
        raw_set = raw_set if isinstance(raw_set, dict) else {}
        weight = to_number(raw_set.get("w"))
        reps = to_number(raw_set.get("r"))
        if weight > 0 and reps > 0:
            sets.append({"w": _tidy(weight), "r": _tidy(reps)})
    return sets


def normalize_next_workout(
    workout: Any,
    session_type: Optional[str],
    time_minutes: Any,
    last_workout: Optional[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Repair a model-produced next workout.

    Args:
        workout: Decoded model output
        session_type: Requested session type
        time_minutes: Requested session length
        last_workout: compact_workout() output of the previous session

    Returns:
        Workout dict with at most 10 exercises, each with 1-6 positive sets
    """
    result = dict(workout) if isinstance(workout, dict) else {}

    if not result.get("title"):
        result["title"] = DEFAULT_TITLE
    if not result.get("session_type"):
        result["session_type"] = session_type or (last_workout or {}).get("split") or DEFAULT_SESSION_TYPE
    if parse_number(result.get("duration_minutes")) is None:
        result["duration_minutes"] = _tidy(to_number(time_minutes)) or 60

    for key in ("coach_focus", "safety_notes"):
        if not isinstance(result.get(key), list):
            result[key] = []

    raw_exercises = result.get("exercises") if isinstance(result.get("exercises"), list) else []
    exercises = []
    for raw in [e for e in raw_exercises if e][:MAX_EXERCISES]:
        exercise = dict(raw) if isinstance(raw, dict) else {}
        if not exercise.get("name"):
            exercise["name"] = DEFAULT_EXERCISE_NAME
        if parse_number(exercise.get("rest_seconds")) is None:
            exercise["rest_seconds"] = DEFAULT_REST_SECONDS
        if not isinstance(exercise.get("notes"), str):
            exercise["notes"] = ""

        sets = _normalize_sets(exercise.get("sets"))
        if not sets:
            base = find_baseline(last_workout, exercise["name"]) or DEFAULT_BASELINE
            sets = [{"w": base["w"], "r": base["r"]} for _ in range(BASELINE_SETS)]
        exercise["sets"] = sets
        exercises.append(exercise)

    result["exercises"] = exercises
    return result
