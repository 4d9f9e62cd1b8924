"""
Coach Chat Use Case.

One chat completion per message. Prior turns come from the client; when the
reply closes out the day with a DAILY_LOG block and the request names a
customer, the parsed log is merged into the customer's daily logs.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.exceptions import BadRequestError, ServiceError
from application.ports import LanguageModel
from application.use_cases.daily_logs import SaveDailyLogUseCase
from backend.ai.prompts import COACH_CHAT_SYSTEM_PROMPT, COACH_CHAT_TEMPERATURE
from domain.logs.coach_text import parse_daily_log_block
from domain.logs.daily_logs import normalize_owner_id, today_iso

logger = logging.getLogger(__name__)

MAX_HISTORY_MESSAGES = 20
IDENTITY_FIELDS = ("email", "userEmail", "userId", "user_id")
DEFAULT_IMAGE_TEXT = "Here is an image for you to analyze."


@dataclass
class CoachChatResult:
    """Coach reply and the daily log it produced, if any."""
    reply: str
    daily_log: Optional[Dict[str, Any]] = None
    saved_log: bool = False
    debug: Dict[str, Any] = field(default_factory=dict)


def _history_messages(history: Any) -> List[Dict[str, Any]]:
    if not isinstance(history, list):
        return []
    messages = []
    for turn in history[-MAX_HISTORY_MESSAGES:]:
        if not isinstance(turn, dict):
            continue
        role = turn.get("role")
        content = turn.get("content")
        if role in ("user", "assistant") and isinstance(content, str) and content.strip():
            messages.append({"role": role, "content": content})
    return messages


def _user_content(text: str, image_data_url: Optional[str]) -> Any:
    if not image_data_url:
        return text
    return [
        {"type": "text", "text": text or DEFAULT_IMAGE_TEXT},
        {"type": "image_url", "image_url": {"url": image_data_url}},
    ]


class CoachChatUseCase:
    """Coaching reply with optional daily log capture."""

    def __init__(self, model: LanguageModel, daily_logs: SaveDailyLogUseCase):
        self._model = model
        self._daily_logs = daily_logs

    async def execute(self, body: Dict[str, Any]) -> CoachChatResult:
        """
        Args:
            body: message and/or imageBase64, optional identity fields,
                customerId and prior history turns

        Raises:
            BadRequestError: Neither a message nor an image was sent
        """
        message = body.get("message")
        image = body.get("imageBase64")
        if (not isinstance(message, str) or not message) and not image:
            raise BadRequestError("Message or imageBase64 is required")

        email = next((str(body[k]).lower() for k in IDENTITY_FIELDS if body.get(k)), None)
        text = f"user_email: {email}\n{message or ''}" if email else (message or "")

        messages = [{"role": "system", "content": COACH_CHAT_SYSTEM_PROMPT}]
        messages.extend(_history_messages(body.get("history")))
        messages.append({"role": "user", "content": _user_content(text, image)})

        generation = await self._model.complete_chat(
            messages=messages,
            temperature=COACH_CHAT_TEMPERATURE,
            feature="coach_chat",
        )
        result = CoachChatResult(
            reply=generation.text,
            debug={"model": generation.model, "openai_ms": generation.elapsed_ms},
        )

        log = parse_daily_log_block(generation.text)
        if log is None:
            return result
        if not log.get("date"):
            log["date"] = today_iso()
        result.daily_log = log

        customer_gid = normalize_owner_id(body.get("customerId"))
        if not customer_gid:
            logger.info("DAILY_LOG in reply but no customerId; not saved")
            return result

        try:
            await self._daily_logs.save(customer_gid, log)
            result.saved_log = True
        except ServiceError as e:
            logger.error(f"Failed to save DAILY_LOG for {customer_gid}: {e.message}")
            result.debug["save_error"] = e.message
        return result
