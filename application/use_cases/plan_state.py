"""
Plan State Use Cases.

Read and write the coaching state kept in customer metafields: the saved
plan, onboarding flags and the daily log array.
"""
import json
import logging
from typing import Any, Dict, Optional

from application.exceptions import BadRequestError, NotFoundError
from application.ports import CustomerStore
from domain.logs.daily_logs import normalize_owner_id, parse_stored_logs

logger = logging.getLogger(__name__)

COACH_PLAN_KEY = "coach_plan"
PLAN_JSON_KEY = "plan_json"
ONBOARDING_COMPLETE_KEY = "onboarding_complete"
POST_PLAN_STAGE_KEY = "post_plan_stage"
DAILY_LOGS_KEY = "daily_logs"


def parse_json_value(value: Any) -> Any:
    """Decode a stored JSON string; unreadable values become None."""
    if not value:
        return None
    if isinstance(value, (dict, list)):
        return value
    try:
        return json.loads(str(value))
    except ValueError:
        logger.warning("Stored metafield value is not valid JSON")
        return None


def require_customer_gid(raw_customer_id: Any) -> str:
    customer_gid = normalize_owner_id(raw_customer_id)
    if not customer_gid:
        raise BadRequestError("Missing customerId")
    return customer_gid


def _onboarding_flags(values: Dict[str, Optional[str]]) -> Dict[str, Any]:
    return {
        "onboarding_complete": str(values.get(ONBOARDING_COMPLETE_KEY) or "").strip().lower() == "true",
        "post_plan_stage": str(values.get(POST_PLAN_STAGE_KEY) or "").strip() or None,
    }


class GetPlanUseCase:
    """Read the saved plan and onboarding flags for a customer."""

    def __init__(self, store: CustomerStore):
        self._store = store

    async def execute(self, customer_id: Any) -> Dict[str, Any]:
        customer_gid = require_customer_gid(customer_id)
        values = await self._store.get_customer_metafields(
            customer_gid,
            [COACH_PLAN_KEY, PLAN_JSON_KEY, ONBOARDING_COMPLETE_KEY, POST_PLAN_STAGE_KEY],
        )
        if values is None:
            raise NotFoundError("Customer not found", debug={"customerGid": customer_gid})

        return {
            "customerGid": customer_gid,
            **_onboarding_flags(values),
            "coach_plan": parse_json_value(values.get(COACH_PLAN_KEY)),
            "plan_json": parse_json_value(values.get(PLAN_JSON_KEY)),
        }


class SavePlanUseCase:
    """Store a plan in the coach_plan metafield."""

    def __init__(self, store: CustomerStore):
        self._store = store

    async def execute(self, customer_id: Any, plan: Any) -> Dict[str, Any]:
        """
        Args:
            customer_id: Numeric id or customer GID
            plan: Plan object; serialized to a JSON string for storage

        Raises:
            BadRequestError: customer_id or plan missing
        """
        if not customer_id or not plan:
            raise BadRequestError("Missing customerId or plan in body")
        customer_gid = require_customer_gid(customer_id)

        await self._store.set_customer_metafield(customer_gid, COACH_PLAN_KEY, json.dumps(plan))
        logger.info(f"Saved coach plan for {customer_gid}")
        return {"customerGid": customer_gid, "message": "Coach plan saved to customer metafield."}


class GetStateUseCase:
    """Plan, daily logs and onboarding flags in one read for the coach UI."""

    def __init__(self, store: CustomerStore):
        self._store = store

    async def execute(self, customer_id: Any) -> Dict[str, Any]:
        customer_gid = require_customer_gid(customer_id)
        values = await self._store.get_customer_metafields(
            customer_gid,
            [ONBOARDING_COMPLETE_KEY, POST_PLAN_STAGE_KEY, COACH_PLAN_KEY, DAILY_LOGS_KEY],
        )
        if values is None:
            raise NotFoundError("Customer not found", debug={"customerGid": customer_gid})

        return {
            "customerGid": customer_gid,
            **_onboarding_flags(values),
            "coach_plan": parse_json_value(values.get(COACH_PLAN_KEY)),
            "daily_logs": parse_stored_logs(values.get(DAILY_LOGS_KEY)),
        }
