"""
Equipment classification and per-mode exercise filters.

classify_equipment() picks one equipment mode from the declared tags. The
allow-checks decide, by exercise name alone, whether a movement is possible
with what the user declared. First matching rule wins in the home-gym table.
"""

import re
from typing import Callable, Iterable, List, Set, Tuple

from domain.plans.constants import (
    DUMBBELL_EXCLUSION_PATTERN,
    DUMBBELL_TAGS,
    DUMBBELLS,
    FULL_GYM,
    HOME_GYM,
)


def classify_equipment(equipment: Iterable[str]) -> str:
    """Resolve equipment tags to full_gym, home_gym or dumbbells (in that priority)."""
    tags = set(equipment)
    if FULL_GYM in tags:
        return FULL_GYM
    if HOME_GYM in tags:
        return HOME_GYM
    if DUMBBELLS in tags:
        return DUMBBELLS
    return FULL_GYM


def allowed_with_dumbbells(name: str) -> bool:
    return not DUMBBELL_EXCLUSION_PATTERN.search(name or "")


# ---------------------------------------------------------------------------
# Home gym rule table
# ---------------------------------------------------------------------------

BODYWEIGHT_PATTERN = re.compile(
    r"push[\s-]?ups?|bodyweight|air squat|plank|dead bug|glute bridge", re.IGNORECASE
)
LEG_PRESS_PATTERN = re.compile(r"leg press", re.IGNORECASE)
MACHINE_PATTERN = re.compile(r"smith|pec deck|machine|leg curl|leg extension", re.IGNORECASE)
CABLE_PATTERN = re.compile(
    r"cable|pull[\s-]?down|push[\s-]?down|face pull|crossover", re.IGNORECASE
)
PULLUP_PATTERN = re.compile(r"pull[\s-]?ups?|chin[\s-]?ups?", re.IGNORECASE)
BAND_PATTERN = re.compile(r"\bbands?\b", re.IGNORECASE)
BARBELL_SQUAT_PATTERN = re.compile(r"back squat|front squat|barbell squat", re.IGNORECASE)
BENCH_PRESS_PATTERN = re.compile(r"bench press", re.IGNORECASE)
DEADLIFT_PATTERN = re.compile(r"deadlift|\brdl\b|romanian", re.IGNORECASE)
BARBELL_PATTERN = re.compile(r"barbell", re.IGNORECASE)
DUMBBELL_PATTERN = re.compile(r"dumbbell|\bdb\b", re.IGNORECASE)


class HomeGym:
    """Declared home-gym items as booleans."""

    def __init__(self, equipment: Iterable[str]):
        tags: Set[str] = set(equipment)
        self.rack = "rack" in tags or "squat_rack" in tags or "power_rack" in tags
        self.bench = "bench" in tags
        self.barbell = "barbell" in tags
        self.cables = "cables" in tags or "cable" in tags
        self.leg_press = "leg_press" in tags
        self.pullup_bar = "pullup_bar" in tags or "pull_up_bar" in tags
        self.bands = "bands" in tags or "resistance_bands" in tags
        self.dumbbells = bool(tags & DUMBBELL_TAGS)


def _bench_press_allowed(name: str, gym: HomeGym) -> bool:
    if not gym.bench:
        return False
    if BARBELL_PATTERN.search(name):
        return gym.barbell
    if DUMBBELL_PATTERN.search(name):
        return gym.dumbbells
    return gym.barbell or gym.dumbbells


HomeRule = Tuple[re.Pattern, Callable[[str, HomeGym], bool]]

HOME_GYM_RULES: List[HomeRule] = [
    (BODYWEIGHT_PATTERN, lambda name, gym: True),
    (LEG_PRESS_PATTERN, lambda name, gym: gym.leg_press),
    (MACHINE_PATTERN, lambda name, gym: False),
    (CABLE_PATTERN, lambda name, gym: gym.cables),
    (PULLUP_PATTERN, lambda name, gym: gym.pullup_bar),
    (BAND_PATTERN, lambda name, gym: gym.bands),
    (BARBELL_SQUAT_PATTERN, lambda name, gym: gym.barbell and gym.rack),
    (BENCH_PRESS_PATTERN, _bench_press_allowed),
    (DEADLIFT_PATTERN, lambda name, gym: gym.barbell or gym.dumbbells),
    (BARBELL_PATTERN, lambda name, gym: gym.barbell),
    (DUMBBELL_PATTERN, lambda name, gym: gym.dumbbells),
]


def allowed_in_home_gym(name: str, gym: HomeGym) -> bool:
    """
    Check one exercise name against the home-gym rule table.

    Anything no rule claims is a free-weight movement and needs either
    dumbbells or a barbell.
    """
    name = name or ""
    for pattern, check in HOME_GYM_RULES:
        if pattern.search(name):
            return bool(check(name, gym))
    return gym.dumbbells or gym.barbell
