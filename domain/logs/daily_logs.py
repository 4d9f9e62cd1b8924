"""
Daily log normalization and merging.

Daily logs live as one JSON array per customer. A log for a date that already
exists is merged into that entry; otherwise it is appended.
"""

import json
import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_COACH_FOCUS = "Stay consistent today."
CUSTOMER_GID_PREFIX = "gid://shopify/Customer/"

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def normalize_date_string(value: Any) -> Optional[str]:
    """
    Normalize any date-ish value to YYYY-MM-DD.

    Strings whose first 10 characters already look like an ISO date are
    sliced; anything else goes through ISO parsing. Returns None when the
    value cannot be read as a date.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) >= 10 and _ISO_DATE.match(text[:10]):
        try:
            return date.fromisoformat(text[:10]).isoformat()
        except ValueError:
            return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return None


def normalize_owner_id(raw: Any) -> Optional[str]:
    """Coerce a customer id (numeric or GID) to a Shopify Customer GID."""
    if raw is None or raw == "":
        return None
    text = str(raw).strip()
    if text.startswith(CUSTOMER_GID_PREFIX):
        return text
    digits = re.sub(r"\D", "", text)
    if digits:
        return f"{CUSTOMER_GID_PREFIX}{digits}"
    logger.warning(f"Owner id could not be normalized to a customer GID: {text!r}")
    return text


def normalize_incoming_log(raw_log: Any) -> Dict[str, Any]:
    log = dict(raw_log) if isinstance(raw_log, dict) else {}
    log["date"] = normalize_date_string(log.get("date")) or today_iso()
    if not isinstance(log.get("meals"), list):
        log["meals"] = []
    return log


def sum_meal_calories(meals: Any) -> float:
    if not isinstance(meals, list):
        return 0
    total = 0
    for meal in meals:
        if not isinstance(meal, dict):
            continue
        try:
            calories = float(meal.get("calories"))
        except (TypeError, ValueError):
            continue
        if calories > 0:
            total += calories
    return int(total) if float(total).is_integer() else total


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _latest(incoming: Dict[str, Any], existing: Dict[str, Any], key: str) -> Any:
    if _present(incoming.get(key)):
        return incoming[key]
    return existing.get(key)


def _coach_focus(*candidates: Any) -> str:
    for value in candidates:
        if value is not None and str(value).strip():
            return value
    return DEFAULT_COACH_FOCUS


def merge_logs_by_date(existing: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge an incoming log into the existing entry for the same date.

    Meals are appended and calorie totals recomputed from all meals. The
    latest non-empty weight, steps, mood, struggle and coach focus win.
    """
    merged = dict(existing or {})
    merged["date"] = incoming["date"]

    existing_meals = existing.get("meals") if isinstance(existing.get("meals"), list) else []
    incoming_meals = incoming.get("meals") if isinstance(incoming.get("meals"), list) else []
    merged["meals"] = existing_meals + incoming_meals

    for key in ("weight", "steps"):
        merged[key] = incoming[key] if incoming.get(key) is not None else existing.get(key)

    meal_total = sum_meal_calories(merged["meals"])
    if meal_total > 0:
        merged["total_calories"] = meal_total
        merged["calories"] = meal_total
    else:
        incoming_total = _first_not_none(incoming.get("total_calories"), incoming.get("calories"))
        existing_total = _first_not_none(existing.get("total_calories"), existing.get("calories"))
        merged["total_calories"] = _first_not_none(incoming_total, existing_total)
        merged["calories"] = merged["total_calories"]

    merged["mood"] = _latest(incoming, existing, "mood")
    merged["struggle"] = _latest(incoming, existing, "struggle")
    merged["coach_focus"] = _coach_focus(incoming.get("coach_focus"), existing.get("coach_focus"))
    return merged


def _first_not_none(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def parse_stored_logs(raw_value: Optional[str]) -> List[Dict[str, Any]]:
    """Decode the stored daily_logs value; a legacy single object is wrapped."""
    if not raw_value:
        return []
    try:
        parsed = json.loads(raw_value)
    except (TypeError, ValueError) as e:
        logger.error(f"Stored daily_logs is not valid JSON: {e}")
        return []
    if isinstance(parsed, list):
        return [item for item in parsed if isinstance(item, dict)]
    if isinstance(parsed, dict):
        return [parsed]
    logger.warning("Stored daily_logs was neither a list nor an object; starting fresh")
    return []


def upsert_daily_log(logs: List[Dict[str, Any]], raw_log: Any) -> List[Dict[str, Any]]:
    """
    Return a new log list with raw_log merged in by date.

    Args:
        logs: Existing stored logs
        raw_log: Incoming log payload

    Returns:
        Updated list; the saved entry's date is updated[...]["date"]
    """
    incoming = normalize_incoming_log(raw_log)
    updated = list(logs)

    for index, existing in enumerate(updated):
        if normalize_date_string(existing.get("date")) == incoming["date"]:
            updated[index] = merge_logs_by_date(existing, incoming)
            return updated

    meal_total = sum_meal_calories(incoming["meals"])
    if meal_total > 0:
        incoming["total_calories"] = meal_total
        incoming["calories"] = meal_total
    incoming["coach_focus"] = _coach_focus(incoming.get("coach_focus"))
    updated.append(incoming)
    return updated


# ---------------------------------------------------------------------------
# Metaobject-backed logs
# ---------------------------------------------------------------------------

def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def metaobject_to_log(node: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a daily_log metaobject node into a plain log dict."""
    fields = {f.get("key"): f.get("value") for f in node.get("fields") or [] if isinstance(f, dict)}
    flag = fields.get("flag")
    return {
        "id": node.get("id"),
        "gid": node.get("id"),
        "display_name": node.get("displayName") or None,
        "date": fields.get("date") or None,
        "weight": _to_float(fields.get("weight")),
        "calories": _to_float(fields.get("calories")),
        "steps": _to_float(fields.get("steps")),
        "mood": fields.get("mood") or None,
        "feeling": fields.get("feeling") or None,
        "struggle": fields.get("struggle") or None,
        "coach_focus": fields.get("coach_focus") or None,
        "meals": fields.get("meals") or None,
        "daily_protein": _to_float(fields.get("daily_protein")),
        "daily_carbs": _to_float(fields.get("daily_carbs")),
        "daily_fats": _to_float(fields.get("daily_fats")),
        "customer_id": fields.get("customer_id") or None,
        "flag": flag.lower() == "true" if isinstance(flag, str) else None,
    }


def sort_logs_by_date(logs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(logs, key=lambda log: log.get("date") or "")
