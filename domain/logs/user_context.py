"""Daily context built from weight and meal sheet rows."""

import re
from datetime import date as date_type
from typing import Any, Dict, List, Optional, Sequence

WEEKLY_WINDOW = 7

_CALORIE_RANGE = re.compile(r"(\d+)[–-](\d+)")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Row = Sequence[Any]


def resolve_day(client_date: Optional[str]) -> str:
    """The client's YYYY-MM-DD when well formed, else today."""
    if isinstance(client_date, str) and _ISO_DATE.match(client_date):
        return client_date
    return date_type.today().isoformat()


def _cell(row: Row, index: int) -> Any:
    return row[index] if len(row) > index else None


def _number(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def weekly_average(weight_rows: List[Row], user_id: str) -> Optional[float]:
    """Mean of the user's last 7 logged weights, one decimal."""
    weights = []
    for row in [r for r in weight_rows if _cell(r, 1) == user_id][-WEEKLY_WINDOW:]:
        weight = _number(_cell(row, 2))
        if weight:
            weights.append(weight)
    if not weights:
        return None
    return round(sum(weights) / len(weights), 1)


def todays_weight(weight_rows: List[Row], user_id: str, day: str) -> Optional[float]:
    for row in weight_rows:
        if _cell(row, 0) == day and _cell(row, 1) == user_id:
            return _number(_cell(row, 2))
    return None


def meals_for_day(meal_rows: List[Row], user_id: str, day: str) -> List[Dict[str, Any]]:
    return [
        {"meal_text": _cell(row, 3), "ai_estimate": _cell(row, 4)}
        for row in meal_rows
        if _cell(row, 0) == day and _cell(row, 1) == user_id
    ]


def estimate_midpoint(estimate: Any) -> Optional[float]:
    """Midpoint of the first 'N-M' range in an estimate string."""
    match = _CALORIE_RANGE.search(str(estimate or ""))
    if not match:
        return None
    return (int(match.group(1)) + int(match.group(2))) / 2


def total_calories(meals: List[Dict[str, Any]]) -> int:
    total = 0.0
    for meal in meals:
        midpoint = estimate_midpoint(meal.get("ai_estimate"))
        if midpoint is not None:
            total += midpoint
    return int(round(total))


def build_user_context(
    weight_rows: List[Row],
    meal_rows: List[Row],
    user_id: str,
    day: str,
) -> Dict[str, Any]:
    """
    Assemble the context used for daily summaries.

    Args:
        weight_rows: WEIGHT_LOGS rows (date, user_id, weight)
        meal_rows: MEAL_LOGS rows (date, user_id, _, meal text, estimate, ...)
        user_id: Sheet user id
        day: YYYY-MM-DD

    Returns:
        Context dict with today_weight, weekly_avg, total_calories and meals
    """
    meals = meals_for_day(meal_rows, user_id, day)
    return {
        "user_id": user_id,
        "date": day,
        "today_weight": todays_weight(weight_rows, user_id, day),
        "weekly_avg": weekly_average(weight_rows, user_id),
        "total_calories": total_calories(meals),
        "meals": meals,
    }
