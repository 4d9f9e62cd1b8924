"""
User Context and Daily Summary Use Cases.

Context is computed from the WEIGHT_LOGS and MEAL_LOGS tabs. A summary is a
short model-written note; an optional FLAG line becomes the coach flag, and
the result is appended to the DAILY_SUMMARIES tab.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from application.exceptions import BadRequestError
from application.ports import LanguageModel, SheetTable
from backend.ai.prompts import DAILY_SUMMARY_TEMPERATURE, build_daily_summary_prompt
from domain.logs.coach_text import split_flag
from domain.logs.user_context import build_user_context, resolve_day

logger = logging.getLogger(__name__)

WEIGHT_RANGE = "WEIGHT_LOGS!A2:C"
MEAL_RANGE = "MEAL_LOGS!A:G"
SUMMARY_RANGE = "DAILY_SUMMARIES!A:H"

GENERATE_SUMMARY_ACTION = "generate_summary"


class DailySummaryUseCase:
    """Sheet-derived daily context with optional model summary."""

    def __init__(self, sheets: SheetTable, model: LanguageModel):
        self._sheets = sheets
        self._model = model

    async def load_context(self, user_id: Any, client_date: Optional[str]) -> Dict[str, Any]:
        """
        Raises:
            BadRequestError: user_id missing
        """
        if not user_id:
            raise BadRequestError("Missing user_id")
        day = resolve_day(client_date)
        weight_rows = await self._sheets.get_rows(WEIGHT_RANGE)
        meal_rows = await self._sheets.get_rows(MEAL_RANGE)
        return build_user_context(weight_rows, meal_rows, str(user_id), day)

    async def summarize(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Write and store a summary for a loaded context.

        Returns:
            {"ai_summary": full text, "coach_flag": flag reason or ""}
        """
        generation = await self._model.complete_chat(
            messages=[{"role": "system", "content": build_daily_summary_prompt(context)}],
            temperature=DAILY_SUMMARY_TEMPERATURE,
            feature="daily_summary",
        )
        text = generation.text.strip()
        summary, flag = split_flag(text)

        await self._sheets.append_row(
            SUMMARY_RANGE,
            [
                context["date"],
                context["user_id"],
                context.get("today_weight"),
                context.get("weekly_avg"),
                context.get("total_calories"),
                summary,
                flag,
                datetime.now(timezone.utc).isoformat(),
            ],
        )
        logger.info(f"Daily summary stored for {context['user_id']} on {context['date']}")
        return {"ai_summary": text, "coach_flag": flag}

    async def get_user_context(
        self,
        user_id: Any,
        client_date: Optional[str] = None,
        action: Optional[str] = None,
    ) -> Dict[str, Any]:
        context = await self.load_context(user_id, client_date)
        if action == GENERATE_SUMMARY_ACTION:
            context.update(await self.summarize(context))
        return context

    async def generate_daily_summary(
        self,
        user_id: Any,
        client_date: Optional[str] = None,
    ) -> Dict[str, Any]:
        context = await self.load_context(user_id, client_date)
        summary = await self.summarize(context)
        return {"date": context["date"], **summary}
