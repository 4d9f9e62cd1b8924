"""
Save Onboarding Use Case.

Looks the customer up by email and writes whichever onboarding answers were
provided as typed customer metafields.
"""
import logging
from typing import Any, Dict, List

from application.exceptions import BadRequestError, NotFoundError
from application.ports import METAFIELD_NAMESPACE, CustomerStore

logger = logging.getLogger(__name__)

# request field -> number_integer metafield key
INTEGER_FIELDS = (
    ("startWeight", "start_weight"),
    ("goalWeight", "goal_weight"),
    ("age", "age"),
    ("avgSteps", "avg_steps"),
    ("alcoholNights", "alcohol_nights"),
    ("mealsOut", "meals_out"),
)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_onboarding_metafields(body: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Typed metafield inputs for the provided onboarding answers.

    Height is stored as a single text value like 5'10" when either part is
    present; the missing part counts as 0.
    """
    metafields: List[Dict[str, Any]] = []

    def add(key: str, type_: str, value: str) -> None:
        metafields.append({"namespace": METAFIELD_NAMESPACE, "key": key, "type": type_, "value": value})

    feet, inches = body.get("heightFeet"), body.get("heightInches")
    if feet is not None or inches is not None:
        add(
            "height",
            "single_line_text_field",
            f"{_format_value(feet if feet is not None else 0)}'{_format_value(inches if inches is not None else 0)}\"",
        )

    for field_name, key in INTEGER_FIELDS:
        if body.get(field_name) is not None:
            add(key, "number_integer", _format_value(body[field_name]))

    return metafields


class SaveOnboardingUseCase:
    """Persist onboarding answers on the customer record."""

    def __init__(self, store: CustomerStore):
        self._store = store

    async def execute(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Raises:
            BadRequestError: No email, or no onboarding fields present
            NotFoundError: No customer has the email
        """
        email = body.get("email")
        if not email:
            raise BadRequestError("Missing email")

        customer_gid = await self._store.find_customer_id_by_email(str(email))
        if not customer_gid:
            raise NotFoundError(f"Customer not found for email {email}")

        metafields = build_onboarding_metafields(body)
        if not metafields:
            raise BadRequestError("No onboarding fields to save")

        await self._store.update_customer_metafields(customer_gid, metafields)
        logger.info(f"Saved {len(metafields)} onboarding fields for {customer_gid}")
        return {"success": True}
