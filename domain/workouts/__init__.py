"""Next-workout prescription helpers."""

from domain.workouts.next_workout import compact_workout, find_baseline, normalize_next_workout

__all__ = ["compact_workout", "find_baseline", "normalize_next_workout"]
