"""
Input sanitizer for starter plan requests.

Coerces an untyped request payload into a bounded PlanRequest. Every field
falls back to a default when missing or malformed; nothing here raises.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from domain.plans.constants import (
    CARDIO_GOALS,
    DEFAULT_CARDIO_GOAL,
    DEFAULT_DAYS,
    DEFAULT_EXPERIENCE,
    DEFAULT_GOAL,
    DEFAULT_SESSION_MINUTES,
    MAX_DAYS,
    MAX_EQUIPMENT_TAGS,
    MAX_SESSION_MINUTES,
    MIN_DAYS,
    MIN_SESSION_MINUTES,
)

GOAL_SYNONYMS = {
    "fat_loss": "fat_loss",
    "fatloss": "fat_loss",
    "fat loss": "fat_loss",
    "lose_fat": "fat_loss",
    "lose fat": "fat_loss",
    "weight_loss": "fat_loss",
    "weight loss": "fat_loss",
    "lose_weight": "fat_loss",
    "lose weight": "fat_loss",
    "cut": "fat_loss",
    "muscle_gain": "muscle_gain",
    "muscle gain": "muscle_gain",
    "gain_muscle": "muscle_gain",
    "build_muscle": "muscle_gain",
    "build muscle": "muscle_gain",
    "hypertrophy": "muscle_gain",
    "bulk": "muscle_gain",
    "maintain": "maintain",
    "maintenance": "maintain",
    "recomp": "maintain",
    "general_fitness": "maintain",
}

CARDIO_GOAL_SYNONYMS = {
    "zone2": "zone2",
    "zone 2": "zone2",
    "zone_2": "zone2",
    "steady": "zone2",
    "intervals": "intervals",
    "interval": "intervals",
    "hiit": "intervals",
    "steps": "steps",
    "walking": "steps",
    "incline_walk": "incline_walk",
    "incline walk": "incline_walk",
    "incline": "incline_walk",
}

TRUTHY = {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class PlanRequest:
    """Bounded, typed starter plan configuration."""

    goal: str = DEFAULT_GOAL
    experience: str = DEFAULT_EXPERIENCE
    days: int = DEFAULT_DAYS
    equipment: List[str] = field(default_factory=list)
    time_minutes: int = DEFAULT_SESSION_MINUTES
    include_cardio: bool = False
    cardio_goal: str = DEFAULT_CARDIO_GOAL
    cardio_sessions_per_week: Optional[int] = None


def to_int(value: Any) -> Optional[int]:
    """Parse an int from numbers or numeric strings, None when not possible."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return int(round(number))


def clamp_int(value: Any, low: int, high: int, default: int) -> int:
    """Clamp a loosely-typed number into [low, high], using default when unparseable."""
    number = to_int(value)
    if number is None:
        number = default
    return max(low, min(high, number))


def pick(source: Mapping[str, Any], *keys: str) -> Any:
    """First present, non-null key; clients and the model both send camelCase."""
    for key in keys:
        if source.get(key) is not None:
            return source[key]
    return None


def clip_text(text: str, limit: int) -> str:
    """Strip and cap text; the result never ends in whitespace."""
    return text.strip()[:limit].rstrip()


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return False


def normalize_goal(value: Any) -> str:
    key = str(value or "").strip().lower()
    return GOAL_SYNONYMS.get(key, GOAL_SYNONYMS.get(key.replace("-", "_"), DEFAULT_GOAL))


def normalize_cardio_goal(value: Any) -> str:
    key = str(value or "").strip().lower().replace("-", "_")
    if key in CARDIO_GOALS:
        return key
    return CARDIO_GOAL_SYNONYMS.get(key, CARDIO_GOAL_SYNONYMS.get(key.replace("_", " "), DEFAULT_CARDIO_GOAL))


def normalize_equipment(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    tags = []
    for item in value[:MAX_EQUIPMENT_TAGS]:
        if not isinstance(item, str):
            continue
        tag = item.strip().lower()
        if tag:
            tags.append(tag)
    return tags


def sanitize_plan_request(payload: Any) -> PlanRequest:
    """
    Build a PlanRequest from a raw request body.

    Accepts the onboarding field names (days_per_week, time_minutes), their
    camelCase forms (daysPerWeek, includeCardio, ...) and the short forms
    (days, minutes).

    Args:
        payload: Decoded JSON body, any type

    Returns:
        PlanRequest with every field inside its documented bounds
    """
    body: Mapping[str, Any] = payload if isinstance(payload, Mapping) else {}

    experience = str(body.get("experience") or "").strip() or DEFAULT_EXPERIENCE
    days_raw = pick(body, "days_per_week", "daysPerWeek", "days")
    minutes_raw = pick(body, "time_minutes", "timeMinutes", "minutes")

    cardio_sessions = to_int(pick(body, "cardio_sessions_per_week", "cardioSessionsPerWeek"))

    return PlanRequest(
        goal=normalize_goal(body.get("goal")),
        experience=experience,
        days=clamp_int(days_raw, MIN_DAYS, MAX_DAYS, DEFAULT_DAYS),
        equipment=normalize_equipment(body.get("equipment")),
        time_minutes=clamp_int(
            minutes_raw, MIN_SESSION_MINUTES, MAX_SESSION_MINUTES, DEFAULT_SESSION_MINUTES
        ),
        include_cardio=to_bool(pick(body, "include_cardio", "includeCardio")),
        cardio_goal=normalize_cardio_goal(pick(body, "cardio_goal", "cardioGoal")),
        cardio_sessions_per_week=cardio_sessions,
    )
