"""
Fake Port Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No Shopify, Google Sheets, OpenAI or
FoodData Central access required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Call tracking (call_count, last_request, writes, appended)
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeCustomerStore, create_customer_store

    # Direct instantiation
    store = FakeCustomerStore()
    store.seed_customer("gid://shopify/Customer/1", email="a@b.com")

    # Factory function with pre-populated data
    store = create_customer_store(customer_id="1", email="a@b.com", num_logs=3)
"""
import json
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from tests.fakes.customer_store import FakeCustomerStore
from tests.fakes.food_lookup import FakeFoodLookup
from tests.fakes.language_model import FakeLanguageModel
from tests.fakes.sheet_table import FakeSheetTable

CUSTOMER_GID_PREFIX = "gid://shopify/Customer/"


# =============================================================================
# Factory Functions
# =============================================================================


def create_customer_store(
    *,
    customer_id: str = "1001",
    email: Optional[str] = "client@example.com",
    num_logs: int = 0,
    start_date: date = date(2025, 1, 1),
    metafields: Optional[Dict[str, Optional[str]]] = None,
) -> FakeCustomerStore:
    """
    Create a FakeCustomerStore holding one customer.

    Args:
        customer_id: Numeric customer id
        email: Customer email for lookups
        num_logs: Number of consecutive daily logs stored in daily_logs
        start_date: Date of the first generated log
        metafields: Extra metafield values

    Returns:
        Pre-populated FakeCustomerStore
    """
    values: Dict[str, Optional[str]] = dict(metafields or {})
    if num_logs > 0:
        logs = [
            {
                "date": (start_date + timedelta(days=i)).isoformat(),
                "weight": 180 - i,
                "meals": [],
                "coach_focus": "Stay consistent today.",
            }
            for i in range(num_logs)
        ]
        values["daily_logs"] = json.dumps(logs)

    store = FakeCustomerStore()
    store.seed_customer(f"{CUSTOMER_GID_PREFIX}{customer_id}", email=email, metafields=values)
    return store


def create_sheet_table(
    *,
    user_id: str = "usr_1",
    weights: Optional[List[tuple]] = None,
    meals: Optional[List[tuple]] = None,
) -> FakeSheetTable:
    """
    Create a FakeSheetTable with header rows and optional weight/meal logs.

    Args:
        user_id: User id written into generated rows
        weights: (date, weight) pairs for WEIGHT_LOGS
        meals: (date, meal_text, estimate) triples for MEAL_LOGS
    """
    sheets = FakeSheetTable()
    sheets.seed("users", [["user_id", "email", "password_hash", "created_at"]])
    sheets.seed(
        "WEIGHT_LOGS",
        [["date", "user_id", "weight"]] + [[d, user_id, str(w)] for d, w in (weights or [])],
    )
    sheets.seed(
        "MEAL_LOGS",
        [["date", "user_id", "meal_type", "meal_text", "ai_estimate", "protein", "created_at"]]
        + [[d, user_id, "meal", text, est, "", ""] for d, text, est in (meals or [])],
    )
    return sheets


def create_language_model(*responses: Any) -> FakeLanguageModel:
    """FakeLanguageModel with responses queued in order."""
    model = FakeLanguageModel()
    for response in responses:
        model.set_response(response)
    return model


__all__ = [
    "FakeCustomerStore",
    "FakeFoodLookup",
    "FakeLanguageModel",
    "FakeSheetTable",
    "create_customer_store",
    "create_language_model",
    "create_sheet_table",
]
