"""
Plan and customer-state request schemas.

Fields are optional at the schema level; the use cases decide what is
missing and answer 400 with a specific message.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CustomerId = Union[str, int]


class CustomerRequest(BaseModel):
    """Body carrying a numeric customer id or customer GID."""
    model_config = ConfigDict(extra="allow")

    customerId: Optional[CustomerId] = Field(
        default=None,
        description="Shopify customer id (numeric or gid://shopify/Customer/...)",
    )


class SavePlanRequest(CustomerRequest):
    """Body for POST /api/save-plan."""
    plan: Optional[Any] = Field(default=None, description="Plan object to store as JSON")


class GetDailyLogsRequest(BaseModel):
    """Body for POST /api/get-daily-logs; any one identity field is enough."""
    model_config = ConfigDict(extra="allow")

    email: Optional[str] = None
    userEmail: Optional[str] = None
    customerId: Optional[CustomerId] = None
