"""
Deterministic filler content for under-delivered plans.

Everything here is a pure function of its arguments: the same days, session
type and equipment mode always produce the same workouts and cardio sessions.
"""

from typing import Any, Dict, Iterable, List

from domain.plans.constants import (
    CARDIO_EQUIPMENT,
    CARDIO_MINUTES_BY_GOAL,
    CARDIO_NOTES_WITH_EQUIPMENT,
    CARDIO_NOTES_WITHOUT_EQUIPMENT,
    COMPOUND_DEFAULT_REST,
    COMPOUND_SETS,
    COMPOUND_TEMPLATE_REPS,
    DUMBBELLS,
    FULL_BODY,
    ISOLATION_DEFAULT_REST,
    ISOLATION_SETS,
    ISOLATION_TEMPLATE_REPS,
    LOWER_BODY,
    SESSION_ROTATIONS,
    SESSION_TITLES,
    SHORT_WEEK_ROTATION,
    TEMPLATE_COACH_FOCUS,
    TEMPLATE_SAFETY_NOTE,
    UPPER_BODY,
)
from domain.plans.exercises import is_compound

DUMBBELL_TEMPLATES: Dict[str, List[str]] = {
    UPPER_BODY: [
        "Dumbbell Bench Press",
        "One-Arm Dumbbell Row",
        "Seated Dumbbell Shoulder Press",
        "Dumbbell Lateral Raise",
        "Dumbbell Biceps Curl",
        "Overhead Dumbbell Triceps Extension",
    ],
    LOWER_BODY: [
        "Dumbbell Goblet Squat",
        "Dumbbell Romanian Deadlift",
        "Dumbbell Walking Lunge",
        "Dumbbell Step-Up",
        "Dumbbell Calf Raise",
    ],
    FULL_BODY: [
        "Dumbbell Goblet Squat",
        "Dumbbell Bench Press",
        "One-Arm Dumbbell Row",
        "Dumbbell Romanian Deadlift",
        "Dumbbell Lateral Raise",
    ],
}

GENERAL_TEMPLATES: Dict[str, List[str]] = {
    UPPER_BODY: [
        "Barbell Bench Press",
        "Barbell Row",
        "Overhead Press",
        "Lat Pulldown",
        "Cable Triceps Pushdown",
        "Dumbbell Lateral Raise",
    ],
    LOWER_BODY: [
        "Barbell Back Squat",
        "Romanian Deadlift",
        "Leg Press",
        "Lying Leg Curl",
        "Standing Calf Raise",
    ],
    FULL_BODY: [
        "Barbell Back Squat",
        "Barbell Bench Press",
        "Barbell Row",
        "Romanian Deadlift",
        "Lat Pulldown",
    ],
}

BODYWEIGHT_TEMPLATE = ["Bodyweight Squat", "Push-Up", "Band Row"]


def session_rotation(days: int) -> List[str]:
    """Session types for a week of the given length."""
    if days in SESSION_ROTATIONS:
        return list(SESSION_ROTATIONS[days])
    return SHORT_WEEK_ROTATION[:max(days, 0)]


def template_exercise(name: str) -> Dict[str, Any]:
    """A fixed prescription: 3x6 for compound lifts, 2x12 otherwise."""
    if is_compound(name):
        sets, reps, rest = COMPOUND_SETS, COMPOUND_TEMPLATE_REPS, COMPOUND_DEFAULT_REST
    else:
        sets, reps, rest = ISOLATION_SETS, ISOLATION_TEMPLATE_REPS, ISOLATION_DEFAULT_REST
    return {
        "name": name,
        "sets": [{"w": 0, "r": reps} for _ in range(sets)],
        "rest_seconds": rest,
        "notes": "",
    }


def template_names(session_type: str, equipment_mode: str) -> List[str]:
    table = DUMBBELL_TEMPLATES if equipment_mode == DUMBBELLS else GENERAL_TEMPLATES
    return list(table.get(session_type, table[FULL_BODY]))


def template_exercises(session_type: str, equipment_mode: str) -> List[Dict[str, Any]]:
    return [template_exercise(name) for name in template_names(session_type, equipment_mode)]


def bodyweight_exercises() -> List[Dict[str, Any]]:
    return [template_exercise(name) for name in BODYWEIGHT_TEMPLATE]


def fallback_workout(index: int, session_type: str, equipment_mode: str, time_minutes: int) -> Dict[str, Any]:
    """Build synthetic workout number index (0-based) of the week."""
    return {
        "session_type": session_type,
        "title": f"Day {index + 1} - {SESSION_TITLES[session_type]}",
        "duration_minutes": time_minutes,
        "exercises": template_exercises(session_type, equipment_mode),
        "coach_focus": [TEMPLATE_COACH_FOCUS],
        "safety_notes": [TEMPLATE_SAFETY_NOTE],
    }


def top_up_workouts(
    workouts: List[Dict[str, Any]],
    days: int,
    equipment_mode: str,
    time_minutes: int,
) -> List[Dict[str, Any]]:
    """
    Append synthetic workouts until the week has exactly `days` entries.

    Synthetic workouts follow the rotation from the position they fill, so a
    plan that came back with one upper day on a 4-day week gets lower, upper,
    lower appended.
    """
    result = list(workouts[:days])
    rotation = session_rotation(days)
    for index in range(len(result), days):
        result.append(fallback_workout(index, rotation[index], equipment_mode, time_minutes))
    return result


# ---------------------------------------------------------------------------
# Cardio
# ---------------------------------------------------------------------------

def has_cardio_equipment(equipment: Iterable[str]) -> bool:
    return any(tag in CARDIO_EQUIPMENT for tag in equipment)


def default_cardio_intensity(cardio_type: str) -> str:
    return "hard" if cardio_type == "intervals" else "easy"


def default_cardio_minutes(cardio_goal: str) -> int:
    return CARDIO_MINUTES_BY_GOAL.get(cardio_goal, CARDIO_MINUTES_BY_GOAL["zone2"])


def default_cardio_notes(equipment: Iterable[str]) -> str:
    if has_cardio_equipment(equipment):
        return CARDIO_NOTES_WITH_EQUIPMENT
    return CARDIO_NOTES_WITHOUT_EQUIPMENT


def default_cardio_sessions(
    cardio_goal: str,
    sessions_per_week: int,
    equipment: Iterable[str],
) -> List[Dict[str, Any]]:
    """sessions_per_week identical sessions for the requested cardio goal."""
    notes = default_cardio_notes(equipment)
    return [
        {
            "type": cardio_goal,
            "minutes": default_cardio_minutes(cardio_goal),
            "intensity": default_cardio_intensity(cardio_goal),
            "notes": notes,
        }
        for _ in range(sessions_per_week)
    ]
