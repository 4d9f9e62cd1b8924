"""
Bounds, keyword patterns and fixed templates for starter plans.

This module has no dependencies on models or services to avoid circular imports.
The keyword lists are literal behaviour: changing one changes which exercises
a user is allowed to see.
"""

import re

# ---------------------------------------------------------------------------
# Request bounds
# ---------------------------------------------------------------------------

MIN_DAYS = 1
MAX_DAYS = 6
DEFAULT_DAYS = 4

MIN_SESSION_MINUTES = 20
MAX_SESSION_MINUTES = 120
DEFAULT_SESSION_MINUTES = 60

MAX_EQUIPMENT_TAGS = 50

DEFAULT_GOAL = "fat_loss"
DEFAULT_EXPERIENCE = "intermediate"
DEFAULT_CARDIO_GOAL = "zone2"

# ---------------------------------------------------------------------------
# Plan shape caps
# ---------------------------------------------------------------------------

MAX_EXERCISES_PER_WORKOUT = 10
MAX_EXERCISES_AFTER_ENFORCEMENT = 8
MAX_COACH_FOCUS = 5
MAX_SAFETY_NOTES = 4
MAX_DEFAULT_SAFETY_NOTES = 2
MAX_EXERCISE_NOTES_LENGTH = 160
MAX_LIST_ITEM_LENGTH = 200

# Minimum survivors before an equipment-filtered session is replaced
MIN_FILTERED_EXERCISES = 4
MIN_HOME_TEMPLATE_EXERCISES = 3

# ---------------------------------------------------------------------------
# Set / rep / rest targets
# ---------------------------------------------------------------------------

COMPOUND_SETS = 3
ISOLATION_SETS = 2

COMPOUND_REP_RANGE = (4, 12)
ISOLATION_REP_RANGE = (8, 20)

# Reps used when the upstream value is missing or not a number
COMPOUND_DEFAULT_REPS = 8
ISOLATION_DEFAULT_REPS = 12

# Fallback template prescriptions
COMPOUND_TEMPLATE_REPS = 6
ISOLATION_TEMPLATE_REPS = 12

REST_RANGE = (30, 180)
COMPOUND_DEFAULT_REST = 90
ISOLATION_DEFAULT_REST = 60

# ---------------------------------------------------------------------------
# Cardio
# ---------------------------------------------------------------------------

CARDIO_SESSIONS_RANGE = (1, 5)
CARDIO_MINUTES_RANGE = (10, 75)
MAX_CARDIO_NOTES_LENGTH = 180
CARDIO_INTENSITIES = ("easy", "moderate", "hard")

CARDIO_GOALS = ("zone2", "intervals", "steps", "incline_walk")

CARDIO_MINUTES_BY_GOAL = {
    "intervals": 20,
    "steps": 30,
    "incline_walk": 30,
    "zone2": 35,
}

CARDIO_EQUIPMENT = frozenset({
    "treadmill",
    "bike",
    "stationary_bike",
    "spin_bike",
    "assault_bike",
    "rower",
    "rowing_machine",
    "elliptical",
    "stair_climber",
    "stairmaster",
    "jump_rope",
})

CARDIO_NOTES_WITH_EQUIPMENT = (
    "Use your cardio machine. Keep the pace conversational unless the session is intervals."
)
CARDIO_NOTES_WITHOUT_EQUIPMENT = (
    "Brisk outdoor walk or any steady movement works. Keep it conversational."
)

# ---------------------------------------------------------------------------
# Session types
# ---------------------------------------------------------------------------

UPPER_BODY = "upper_body"
LOWER_BODY = "lower_body"
FULL_BODY = "full_body"

SESSION_TITLES = {
    UPPER_BODY: "Upper Body",
    LOWER_BODY: "Lower Body",
    FULL_BODY: "Full Body",
}

# Weekly rotations keyed by training days
SESSION_ROTATIONS = {
    4: [UPPER_BODY, LOWER_BODY, UPPER_BODY, LOWER_BODY],
    5: [UPPER_BODY, LOWER_BODY, UPPER_BODY, LOWER_BODY, FULL_BODY],
    6: [UPPER_BODY, LOWER_BODY, UPPER_BODY, LOWER_BODY, UPPER_BODY, LOWER_BODY],
}
SHORT_WEEK_ROTATION = [FULL_BODY, UPPER_BODY, LOWER_BODY]

# ---------------------------------------------------------------------------
# Equipment modes
# ---------------------------------------------------------------------------

FULL_GYM = "full_gym"
HOME_GYM = "home_gym"
DUMBBELLS = "dumbbells"

DUMBBELL_TAGS = frozenset({"dumbbells", "adjustable_dumbbells", "fixed_dumbbells"})

# ---------------------------------------------------------------------------
# Name patterns
# ---------------------------------------------------------------------------

COMPOUND_PATTERN = re.compile(
    r"squat|deadlift|bench|press|\brows?\b|pull[\s-]?ups?|pull[\s-]?downs?|\brdl\b|romanian|lunge|leg press",
    re.IGNORECASE,
)

DUMBBELL_EXCLUSION_PATTERN = re.compile(
    r"barbell|smith|cable|machine|leg press|lat pull[\s-]?down|pec deck",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Boilerplate
# ---------------------------------------------------------------------------

DEFAULT_PLAN_TITLE = "PJiFitness Starter Plan"

TEMPLATE_COACH_FOCUS = "Controlled reps with clean form. Leave 1-2 reps in the tank on every set."
TEMPLATE_SAFETY_NOTE = "Warm up for 5-10 minutes and stop any movement that causes sharp pain."

DEFAULT_COACH_FOCUS = [
    "Controlled reps with clean form.",
    "Leave 1-2 reps in the tank on every set.",
]
DEFAULT_SAFETY_NOTES = [
    "Warm up for 5-10 minutes before your first working set.",
    "Stop any movement that causes sharp or joint pain.",
    "Use a load you can control through the full range of motion.",
]
