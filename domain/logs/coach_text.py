"""
Structured blocks embedded in coach replies.

The chat, meal-photo and summary prompts ask the model to append a machine
readable block to its prose. These helpers pull those blocks back out.
"""

import json
import logging
import re
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DAILY_LOG_MARKER = "DAILY_LOG:"
LOG_JSON_MARKER = "[[LOG_JSON"

DAILY_LOG_KEYS = (
    "user_id",
    "date",
    "weight",
    "calories",
    "steps",
    "mood",
    "feeling",
    "main_struggle",
    "coach_focus",
    "flag",
)

FLAG_LINE = re.compile(r"^FLAG:\s*(.*)$", re.MULTILINE)
_LEADING_INT = re.compile(r"^[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)")


def _parse_float(value: str) -> Optional[float]:
    match = _LEADING_FLOAT.match(value)
    return float(match.group(0)) if match else None


def _parse_int(value: str) -> Optional[int]:
    match = _LEADING_INT.match(value)
    return int(match.group(0)) if match else None


def _parse_flag(value: str) -> Optional[bool]:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def parse_daily_log_block(reply: str) -> Optional[Dict[str, Any]]:
    """
    Read the DAILY_LOG key/value block from a chat reply.

    The block ends at the first non-blank line without a colon. Unknown keys
    are ignored; blank values become None.

    Returns:
        Dict with every DAILY_LOG key, or None when the reply has no block
    """
    if not reply:
        return None
    start = reply.find(DAILY_LOG_MARKER)
    if start == -1:
        return None

    log: Dict[str, Any] = {key: None for key in DAILY_LOG_KEYS}
    for raw_line in reply[start + len(DAILY_LOG_MARKER):].split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if ":" not in line:
            break
        key, _, value = line.partition(":")
        key = key.strip().lower()
        value = value.strip()
        if key not in log:
            continue
        if not value:
            log[key] = None
        elif key == "weight":
            log[key] = _parse_float(value)
        elif key in ("calories", "steps"):
            log[key] = _parse_int(value)
        elif key == "flag":
            log[key] = _parse_flag(value)
        else:
            log[key] = value
    return log


def extract_log_json(text: str) -> Optional[Dict[str, Any]]:
    """JSON object inside a [[LOG_JSON ... ]] block, or None."""
    if not text:
        return None
    start = text.find(LOG_JSON_MARKER)
    if start == -1:
        return None
    end = text.find("]]", start)
    if end == -1:
        return None

    block = text[start:end + 2]
    json_start = block.find("{")
    json_end = block.rfind("}")
    if json_start == -1 or json_end == -1:
        return None
    try:
        parsed = json.loads(block[json_start:json_end + 1])
    except ValueError as e:
        logger.warning(f"LOG_JSON block was not valid JSON: {e}")
        return None
    return parsed if isinstance(parsed, dict) else None


def split_flag(text: str) -> Tuple[str, str]:
    """
    Separate an optional 'FLAG: reason' line from a summary.

    Returns:
        (summary without the flag line, flag reason or "")
    """
    match = FLAG_LINE.search(text or "")
    flag = match.group(1).strip() if match else ""
    summary = FLAG_LINE.sub("", text or "", count=1).strip()
    return summary, flag
