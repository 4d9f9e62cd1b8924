"""
Daily Log Use Cases.

Saving merges one day's log into the customer's daily_logs metafield array.
Reading lists the daily_log metaobjects recorded against a customer email.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from application.exceptions import BadRequestError
from application.ports import CustomerStore
from application.use_cases.plan_state import DAILY_LOGS_KEY
from domain.logs.daily_logs import (
    metaobject_to_log,
    normalize_date_string,
    normalize_incoming_log,
    normalize_owner_id,
    parse_stored_logs,
    sort_logs_by_date,
    upsert_daily_log,
)

logger = logging.getLogger(__name__)

OWNER_FIELDS = ("ownerId", "customerId", "customer_id", "customerGid", "customer_gid")
LOG_FIELDS = ("log", "daily_log", "dailyLog")
EMAIL_FIELDS = ("email", "userEmail", "customerId")


def first_present(body: Dict[str, Any], keys) -> Optional[Any]:
    for key in keys:
        if body.get(key):
            return body[key]
    return None


@dataclass
class SaveDailyLogResult:
    """Outcome of a daily log upsert."""
    customer_gid: str
    saved_date: str
    logs_count: int
    log: Dict[str, Any] = field(default_factory=dict)


class SaveDailyLogUseCase:
    """Merge a daily log into the stored array, keyed by date."""

    def __init__(self, store: CustomerStore):
        self._store = store

    async def save(self, customer_gid: str, raw_log: Any) -> SaveDailyLogResult:
        """
        Read, merge and write back the daily_logs array.

        Args:
            customer_gid: Customer GID
            raw_log: Incoming log; a missing or invalid date means today

        Returns:
            SaveDailyLogResult with the stored entry for the log's date
        """
        values = await self._store.get_customer_metafields(customer_gid, [DAILY_LOGS_KEY]) or {}
        existing = parse_stored_logs(values.get(DAILY_LOGS_KEY))
        updated = upsert_daily_log(existing, raw_log)

        saved_date = normalize_incoming_log(raw_log)["date"]
        saved = next(
            (log for log in updated if normalize_date_string(log.get("date")) == saved_date),
            updated[-1],
        )

        await self._store.set_customer_metafield(customer_gid, DAILY_LOGS_KEY, json.dumps(updated))
        logger.info(f"Saved daily log {saved['date']} for {customer_gid} ({len(updated)} total)")
        return SaveDailyLogResult(
            customer_gid=customer_gid,
            saved_date=saved["date"],
            logs_count=len(updated),
            log=saved,
        )

    async def execute(self, body: Dict[str, Any]) -> SaveDailyLogResult:
        """
        Args:
            body: Request body with an owner id field and a log field

        Raises:
            BadRequestError: Owner id or log payload missing
        """
        customer_gid = normalize_owner_id(first_present(body, OWNER_FIELDS))
        raw_log = first_present(body, LOG_FIELDS)
        if not customer_gid:
            raise BadRequestError("Missing customerId / ownerId")
        if not raw_log:
            raise BadRequestError("Missing daily log payload")
        return await self.save(customer_gid, raw_log)


class GetDailyLogsUseCase:
    """daily_log metaobjects for a customer email, oldest first."""

    def __init__(self, store: CustomerStore):
        self._store = store

    async def execute(self, email: Any) -> Dict[str, Any]:
        if not email:
            raise BadRequestError("Missing email")
        email = str(email).strip().lower()

        nodes = await self._store.list_daily_log_metaobjects(email)
        logs: List[Dict[str, Any]] = sort_logs_by_date([metaobject_to_log(node) for node in nodes])
        return {"email": email, "logs": logs}
