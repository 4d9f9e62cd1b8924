"""
Free-text meal parsing.

Splits "2 eggs, 1 cup rice and 5oz chicken" into {name, qty, unit} items.
"""

import re
from typing import Any, Dict, List

UNIT_ALIASES = {
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "gram": "g",
    "grams": "g",
    "g": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kg": "kg",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "cup": "cup",
    "cups": "cup",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tsp": "tsp",
    "tsps": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "slice": "slice",
    "slices": "slice",
    "piece": "piece",
    "pieces": "piece",
    "serving": "serving",
    "servings": "serving",
    "scoop": "scoop",
    "scoops": "scoop",
}

# Longest alternatives first so "grams" is not read as "g" + "rams"
_UNIT_ALTERNATION = "|".join(sorted(UNIT_ALIASES, key=len, reverse=True))
QUANTITY_PATTERN = re.compile(
    rf"^\s*(\d+(?:\.\d+)?)\s*({_UNIT_ALTERNATION})?\b\s*(.*)$",
    re.IGNORECASE,
)

_SEPARATORS = [
    (re.compile(r"\n"), ", "),
    (re.compile(r"\+"), ", "),
    (re.compile(r"\s*&\s*"), ", "),
    (re.compile(r"\s+and\s+", re.IGNORECASE), ", "),
]
_POSSESSIVE = re.compile(r"'s\b", re.IGNORECASE)
_FILLER_WORDS = re.compile(r"(\bwith\b|\bw/|\bin\b|\bon\b|\bof\b)", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def normalize_food_key(value: Any) -> str:
    """Lower-case alphanumeric key used for food memory lookups."""
    text = _NON_ALNUM.sub(" ", str(value or "").lower())
    return _WHITESPACE.sub(" ", text).strip()


def clean_name(value: Any) -> str:
    """Drop possessives, filler words and stray single-letter tokens."""
    text = _POSSESSIVE.sub("", str(value or ""))
    text = _FILLER_WORDS.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip()
    return " ".join(token for token in text.split(" ") if len(token) > 1).strip()


def split_meal_text(text: str) -> List[str]:
    normalized = str(text or "").strip()
    for pattern, replacement in _SEPARATORS:
        normalized = pattern.sub(replacement, normalized)
    return [chunk.strip() for chunk in normalized.split(",") if chunk.strip()]


def parse_chunk(chunk: str) -> Dict[str, Any]:
    match = QUANTITY_PATTERN.match(chunk)
    if not match:
        return {"name": clean_name(chunk), "qty": 1, "unit": ""}

    qty = float(match.group(1))
    unit_raw = (match.group(2) or "").lower()
    name = clean_name(match.group(3) or chunk) or clean_name(chunk)
    return {
        "name": name,
        "qty": _tidy(qty) if qty > 0 else 1,
        "unit": UNIT_ALIASES.get(unit_raw, unit_raw),
    }


def _tidy(number: float):
    return int(number) if number.is_integer() else number


def parse_meal_text(text: str) -> List[Dict[str, Any]]:
    """
    Parse meal text into food items.

    Args:
        text: Free text such as "2 slices bread & 1 tbsp peanut butter"

    Returns:
        List of {"name", "qty", "unit"} dicts; items without a name are dropped
    """
    items = [parse_chunk(chunk) for chunk in split_meal_text(text)]
    return [item for item in items if item["name"].strip()]


def index_food_memory(raw: Any) -> Dict[str, Dict[str, Any]]:
    """
    Key a stored food list or mapping by normalized food name.

    Accepts either a list of entries or a {key: entry} mapping; an entry's
    own name or label takes precedence over its mapping key.
    """
    indexed: Dict[str, Dict[str, Any]] = {}
    if isinstance(raw, list):
        pairs = [(None, entry) for entry in raw]
    elif isinstance(raw, dict):
        pairs = list(raw.items())
    else:
        return indexed

    for mapping_key, entry in pairs:
        if not isinstance(entry, dict):
            continue
        key = normalize_food_key(entry.get("name") or entry.get("label") or mapping_key or "")
        if key:
            indexed[key] = entry
    return indexed
