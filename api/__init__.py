"""
API package for the PJiFitness Coach API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request bodies
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_language_model,
    get_customer_store,
    get_sheet_table,
    get_food_lookup,
)

__all__ = [
    # Settings
    "get_settings",
    # Adapters
    "get_language_model",
    "get_customer_store",
    "get_sheet_table",
    "get_food_lookup",
]
