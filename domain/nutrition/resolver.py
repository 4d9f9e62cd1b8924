"""
Nutrition resolution rules.

Items resolve from the user's saved foods first, then shared foods, then a
FoodData Central match, else they come back unknown with a question. These
are the pure pieces; application.use_cases.estimate_nutrition drives the lookups.
"""

import math
import re
from typing import Any, Dict, List, Optional

from domain.nutrition.parser import normalize_food_key

USER_FOOD_CONFIDENCE = 0.95
GLOBAL_FOOD_CONFIDENCE = 0.9
USDA_WEIGHED_CONFIDENCE = 0.8
USDA_UNWEIGHED_CONFIDENCE = 0.7
USDA_VOLUME_CONFIDENCE = 0.55
UNKNOWN_CONFIDENCE = 0.2
CLARIFICATION_THRESHOLD = 0.65

# FoodData Central nutrient ids (per 100 g)
NUTRIENT_ENERGY_KCAL = 1008
NUTRIENT_PROTEIN = 1003
NUTRIENT_CARBS = 1005
NUTRIENT_FAT = 1004

GRAMS_PER_UNIT = {
    "g": 1.0,
    "kg": 1000.0,
    "oz": 28.349523125,
    "lb": 453.59237,
}

# Household measures known well enough to convert
ESTIMATED_GRAMS = {
    ("cup", "rice"): 158.0,
    ("slice", "bread"): 25.0,
}

VOLUME_UNITS = ("cup", "tbsp", "tsp", "slice")

PENALIZED_TERMS = (
    "chips", "dried", "dehydrated", "powder", "flour", "puree", "babyfood", "frozen",
    "smoothie", "muffin", "cake", "cookie", "candy", "cereal", "ready-to-eat", "oh!s", "bars",
)

_LEAN_PERCENT = re.compile(r"^(\d{2})\s*%\s*(.*)$", re.IGNORECASE)
_GROUND_BEEF = re.compile(r"ground\s+beef", re.IGNORECASE)


def round1(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 0.0
    return round(number * 10) / 10


def _number(value: Any, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


# ---------------------------------------------------------------------------
# Saved foods
# ---------------------------------------------------------------------------

def serving_multiplier(item: Dict[str, Any], entry: Dict[str, Any]) -> float:
    """Quantity relative to the saved serving when units match, else raw quantity."""
    qty = _number(item.get("qty"), 1.0) or 1.0
    if normalize_food_key(item.get("unit")) == normalize_food_key(entry.get("serving_unit")):
        base = _number(entry.get("serving_qty"), 1.0)
        return qty / base if base else qty
    return qty


def apply_serving(entry: Dict[str, Any], item: Dict[str, Any], source: str, confidence: float) -> Dict[str, Any]:
    multiplier = serving_multiplier(item, entry)
    return {
        **item,
        "source": source,
        "confidence": confidence,
        "calories": round1(_number(entry.get("calories")) * multiplier),
        "protein": round1(_number(entry.get("protein")) * multiplier),
        "carbs": round1(_number(entry.get("carbs")) * multiplier),
        "fat": round1(_number(entry.get("fat")) * multiplier),
        "matched_to": entry.get("label") or entry.get("name") or item.get("name"),
    }


def resolve_from_memory(
    item: Dict[str, Any],
    user_foods: Dict[str, Dict[str, Any]],
    global_foods: Dict[str, Dict[str, Any]],
) -> Optional[Dict[str, Any]]:
    key = normalize_food_key(item.get("name"))
    if key in user_foods:
        return apply_serving(user_foods[key], item, "user", USER_FOOD_CONFIDENCE)
    if key in global_foods:
        return apply_serving(global_foods[key], item, "global", GLOBAL_FOOD_CONFIDENCE)
    return None


def unknown_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        **item,
        "source": "unknown",
        "confidence": UNKNOWN_CONFIDENCE,
        "calories": None,
        "protein": None,
        "carbs": None,
        "fat": None,
        "question": f'For "{item.get("name")}", what brand/serving size are you using?',
    }


# ---------------------------------------------------------------------------
# FoodData Central
# ---------------------------------------------------------------------------

def build_search_query(item: Dict[str, Any]) -> str:
    """Search text for an item, with a few rewrites that find better matches."""
    name = str(item.get("name") or "").strip()

    lean = _LEAN_PERCENT.match(name)
    if lean and _GROUND_BEEF.search(lean.group(2) or ""):
        return f"{lean.group(1)}% lean ground beef"

    unit = normalize_food_key(item.get("unit"))
    base = name.lower()
    if base == "rice" and unit == "cup":
        return "rice, white, cooked"
    if base == "bread" and unit == "slice":
        return "bread, white"
    return name


def score_food(food: Dict[str, Any], query: str, item_name: str) -> float:
    """
    Rank a search hit. Whole-food data types and raw/fresh descriptions score
    up; branded and processed products score down.
    """
    description = str(food.get("description") or "").lower()
    brand = str(food.get("brandName") or "").lower()
    text = f"{description} {brand}".strip()
    data_type = str(food.get("dataType") or "").lower()

    score = 0.0
    if "foundation" in data_type:
        score += 60
    if "sr legacy" in data_type:
        score += 40
    if "survey" in data_type:
        score += 15
    if "branded" in data_type:
        score -= 15

    if "raw" in text:
        score += 15
    if "fresh" in text:
        score += 10

    for word in str(query or "").lower().split():
        if len(word) >= 3 and word in text:
            score += 8

    for term in PENALIZED_TERMS:
        if term in text:
            score -= 60

    base = normalize_food_key(item_name)
    if base == "rice":
        if any(word in text for word in ("dirty", "fried", "pilaf", "seasoned")):
            score -= 80
        if "white" in text and "cooked" in text:
            score += 35
        if "brown" in text and "cooked" in text:
            score += 15

    if base == "bread":
        if any(word in text for word in ("cereal", "cracker", "graham")):
            score -= 90
        if "bread" in text:
            score += 20
        if any(word in text for word in ("white", "wheat", "whole")):
            score += 10

    if "beef" in base:
        if "ground" in text and "beef" in text:
            score += 25
        if "lean" in text:
            score += 10

    score -= min(len(description), 200) / 25
    return score


def select_best_food(foods: List[Dict[str, Any]], query: str, item_name: str) -> Optional[Dict[str, Any]]:
    """Highest scoring of the first 15 hits; ties keep the earlier hit."""
    best = None
    best_score = -math.inf
    for food in foods[:15]:
        score = score_food(food, query, item_name)
        if score > best_score:
            best, best_score = food, score
    return best


def nutrient_amount(detail: Dict[str, Any], nutrient_id: int) -> Optional[float]:
    for entry in detail.get("foodNutrients") or []:
        nutrient = entry.get("nutrient") or {}
        amount = entry.get("amount")
        if nutrient.get("id") == nutrient_id and amount is not None:
            number = _number(amount, math.nan)
            if math.isfinite(number):
                return number
    return None


def item_grams(qty: float, unit: str, name_key: str) -> Optional[float]:
    if not math.isfinite(qty) or qty <= 0:
        return None
    if unit in GRAMS_PER_UNIT:
        return qty * GRAMS_PER_UNIT[unit]
    per_unit = ESTIMATED_GRAMS.get((unit, name_key))
    return qty * per_unit if per_unit else None


def usda_item(
    item: Dict[str, Any],
    detail: Dict[str, Any],
    best: Dict[str, Any],
) -> Optional[Dict[str, Any]]:
    """
    Scale a FoodData Central detail record to the item's quantity.

    Returns None when the record has no energy value.
    """
    kcal = nutrient_amount(detail, NUTRIENT_ENERGY_KCAL)
    if kcal is None:
        return None

    qty = _number(item.get("qty"), 1.0) or 1.0
    unit = normalize_food_key(item.get("unit"))
    name_key = normalize_food_key(item.get("name"))
    grams = item_grams(qty, unit, name_key)
    multiplier = grams / 100 if grams is not None else qty

    resolved = {
        **item,
        "source": "usda",
        "confidence": USDA_WEIGHED_CONFIDENCE if grams is not None else USDA_UNWEIGHED_CONFIDENCE,
        "calories": round1(kcal * multiplier),
        "protein": round1((nutrient_amount(detail, NUTRIENT_PROTEIN) or 0) * multiplier),
        "carbs": round1((nutrient_amount(detail, NUTRIENT_CARBS) or 0) * multiplier),
        "fat": round1((nutrient_amount(detail, NUTRIENT_FAT) or 0) * multiplier),
        "matched_to": detail.get("description") or best.get("description") or item.get("name"),
    }

    if grams is None and unit in VOLUME_UNITS:
        resolved["confidence"] = USDA_VOLUME_CONFIDENCE
        resolved["question"] = (
            f'For "{item.get("name")}", can you give grams or ounces (ex: 200g, 5oz) '
            "so I can be accurate?"
        )
    if unit == "slice" and name_key == "bread":
        resolved["confidence"] = 0.65
    if unit == "cup" and name_key == "rice":
        resolved["confidence"] = 0.7
    return resolved


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def clarification_for(item: Dict[str, Any], resolved: Dict[str, Any]) -> Optional[Dict[str, str]]:
    if resolved.get("confidence", 0) >= CLARIFICATION_THRESHOLD:
        return None
    question = resolved.get("question") or (
        f'I’m not 100% sure on "{item.get("name")}". '
        "What’s the serving (ex: 1 slice = 40 cal)?"
    )
    return {"name": item.get("name"), "question": question}


def sum_totals(resolved: List[Dict[str, Any]]) -> Dict[str, float]:
    totals = {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fat": 0.0}
    for entry in resolved:
        for key in totals:
            totals[key] += entry.get(key) or 0
    return {key: round1(value) for key, value in totals.items()}
