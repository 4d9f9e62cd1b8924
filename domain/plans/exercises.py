"""Per-exercise normalization: compound classification, sets, reps and rest."""

from typing import Any, Dict, List, Optional

from domain.plans.constants import (
    COMPOUND_DEFAULT_REPS,
    COMPOUND_DEFAULT_REST,
    COMPOUND_PATTERN,
    COMPOUND_REP_RANGE,
    COMPOUND_SETS,
    ISOLATION_DEFAULT_REPS,
    ISOLATION_DEFAULT_REST,
    ISOLATION_REP_RANGE,
    ISOLATION_SETS,
    MAX_EXERCISE_NOTES_LENGTH,
    REST_RANGE,
)
from domain.plans.sanitizer import clip_text, to_int


def is_compound(name: str) -> bool:
    """True when the exercise name contains a compound-lift keyword."""
    return bool(COMPOUND_PATTERN.search(name or ""))


def _clamp(value: int, bounds) -> int:
    low, high = bounds
    return max(low, min(high, value))


def _raw_reps(raw_set: Any) -> Optional[int]:
    if isinstance(raw_set, dict):
        return to_int(raw_set.get("r", raw_set.get("reps")))
    return to_int(raw_set)


def normalize_sets(raw_sets: Any, compound: bool, fallback_reps: Any = None) -> List[Dict[str, int]]:
    """
    Force a set list to the target count and rep range.

    Excess sets are truncated. Missing sets repeat the first set's reps.
    Weight is always reset to 0.

    Args:
        raw_sets: Upstream sets (list of {w, r} / {reps} dicts or bare numbers)
        compound: Whether the exercise is a compound lift
        fallback_reps: Exercise-level reps used when no set carries a value

    Returns:
        List of {"w": 0, "r": reps} dicts of exactly the target length
    """
    target = COMPOUND_SETS if compound else ISOLATION_SETS
    rep_range = COMPOUND_REP_RANGE if compound else ISOLATION_REP_RANGE
    default_reps = COMPOUND_DEFAULT_REPS if compound else ISOLATION_DEFAULT_REPS

    items = raw_sets if isinstance(raw_sets, list) else []
    reps: List[int] = []
    for raw_set in items[:target]:
        value = _raw_reps(raw_set)
        reps.append(value if value is not None else -1)

    first = reps[0] if reps else -1
    if first < 0:
        first = to_int(fallback_reps)
        if first is None:
            first = default_reps
    reps = [first if value < 0 else value for value in reps]
    while len(reps) < target:
        reps.append(first)

    return [{"w": 0, "r": _clamp(value, rep_range)} for value in reps]


def normalize_rest(raw_rest: Any, compound: bool) -> int:
    rest = to_int(raw_rest)
    if rest is None:
        rest = COMPOUND_DEFAULT_REST if compound else ISOLATION_DEFAULT_REST
    return _clamp(rest, REST_RANGE)


def normalize_exercise(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Coerce one upstream exercise into the wire shape.

    Returns None for entries that are not objects or have no usable name.
    """
    if not isinstance(raw, dict):
        return None
    name = str(raw.get("name") or raw.get("exercise") or "").strip()
    if not name:
        return None

    compound = is_compound(name)
    notes = raw.get("notes")
    notes = clip_text(notes, MAX_EXERCISE_NOTES_LENGTH) if isinstance(notes, str) else ""

    return {
        "name": name,
        "sets": normalize_sets(raw.get("sets"), compound, raw.get("reps")),
        "rest_seconds": normalize_rest(raw.get("rest_seconds", raw.get("restSeconds")), compound),
        "notes": notes,
    }
